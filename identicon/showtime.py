"""
Identicon Showtime - Flask entrypoint
"""

import logging
import os
import sys

from flask import Flask, Response

from identicon.api.routes import bp as api_bp
from identicon.config import (
    DEFAULT_HEIGHT, DEFAULT_PORT, DEFAULT_SCALE, DEFAULT_WIDTH, HEIGHT_RANGE, HOST,
    LOG_LEVEL, SCALE_RANGE, WIDTH_RANGE,
)

HTML = f"""<!doctype html><meta charset="utf-8"><title>Identicon</title>
<body style='font-family:sans-serif;margin:20px'>
<h2>Identicon generator</h2>
<form onsubmit='gen();return false'>
<input id=username placeholder='username'>
height <input id=iconHeight type=number min={HEIGHT_RANGE[0]} max={HEIGHT_RANGE[1]} value={DEFAULT_HEIGHT}>
width <input id=iconWidth type=number min={WIDTH_RANGE[0]} max={WIDTH_RANGE[1]} value={DEFAULT_WIDTH}>
scale <input id=iconScale type=number min={SCALE_RANGE[0]} max={SCALE_RANGE[1]} value={DEFAULT_SCALE}>
<button>Generate</button>
<a id=download hidden>Download</a>
</form>
<pre id=log></pre>
<img id=userIcon hidden>
<script>
function q(){{const v=id=>encodeURIComponent(document.getElementById(id).value);
return `height=${{v('iconHeight')}}&width=${{v('iconWidth')}}&scale=${{v('iconScale')}}`;}}
async function gen(){{const u=encodeURIComponent(document.getElementById('username').value);
const url=`/identicon.png?username=${{u}}&`+q();const r=await fetch(url);const log=document.getElementById('log');
if(!r.ok){{const ct=r.headers.get('Content-Type')||'';
log.textContent=ct.includes('json')?(await r.json()).error:`ERROR: ${{r.status}} ${{r.statusText}}`;return;}}log.textContent='';
const img=document.getElementById('userIcon');img.src=url;img.hidden=false;
const a=document.getElementById('download');a.href=url+'&download=1';a.hidden=false;}}
</script>
"""


def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(api_bp)

    @app.route("/")
    def index():
        return Response(HTML, mimetype="text/html")

    return app


app = create_app()

def resolve_port(argv, environ=os.environ) -> int:
    """--port wins over IDENTICON_PORT; unusable values fall back to DEFAULT_PORT."""
    port = DEFAULT_PORT
    raw = environ.get("IDENTICON_PORT")
    if raw:
        try:
            port = int(raw)
        except ValueError:
            print("[Identicon] IDENTICON_PORT expects an integer, using", port, file=sys.stderr)
    if "--port" in argv:
        try:
            i = argv.index("--port")
            port = int(argv[i+1])
        except (IndexError, ValueError):
            print("[Identicon] --port expects an integer, using", port, file=sys.stderr)
    return port


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    port = resolve_port(sys.argv)
    print(f"[Identicon] running at http://{HOST}:{port}")
    app.run(host=HOST, port=port, debug=False)
