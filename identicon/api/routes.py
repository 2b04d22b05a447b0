import base64
import io
import logging

from flask import Blueprint, request, jsonify, send_file

from identicon.config import (
    DEFAULT_FILENAME, DEFAULT_HEIGHT, DEFAULT_SCALE, DEFAULT_WIDTH,
    DIGEST_ALGORITHM, MARGIN,
)
from identicon.kernel.digest import UnknownDigestError
from identicon.kernel.icon import IconSizeError, generate_icon, validate_margin

log = logging.getLogger(__name__)

bp = Blueprint("api", __name__, url_prefix="/")


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise IconSizeError(name, raw)


def _icon_from_args(username: str):
    height = _int_arg("height", DEFAULT_HEIGHT)
    width = _int_arg("width", DEFAULT_WIDTH)
    scale = _int_arg("scale", DEFAULT_SCALE)
    algorithm = request.args.get("algorithm", DIGEST_ALGORITHM)
    return generate_icon(username, height, width, scale, algorithm=algorithm)


def _error(e: Exception):
    msg = f"ERROR: {e}" if isinstance(e, IconSizeError) else str(e)
    log.info("rejected %s: %s", request.path, msg)
    return jsonify({"ok": False, "error": msg}), 400


# ---------- health / version ----------
@bp.route("/health")
def health():
    return jsonify({"ok": True})

@bp.route("/version")
def version():
    return jsonify({"name": "pixel-identicon", "api": 1, "digest": DIGEST_ALGORITHM})

# ---------- PNG ----------
@bp.route("/identicon.png")
@bp.route("/identicon/<path:username>.png")
def identicon_png(username=None):
    if username is None:
        username = request.args.get("username", "")
    try:
        icon = _icon_from_args(username)
        margin = _int_arg("margin", MARGIN)
        validate_margin(margin)
    except (IconSizeError, UnknownDigestError) as e:
        return _error(e)
    download = request.args.get("download", "") not in ("", "0", "false")
    return send_file(
        io.BytesIO(icon.to_png(margin)),
        mimetype="image/png",
        as_attachment=download,
        download_name=DEFAULT_FILENAME,
    )

# ---------- raw buffer ----------
@bp.route("/api/identicon")
def identicon_json():
    username = request.args.get("username", "")
    try:
        icon = _icon_from_args(username)
    except (IconSizeError, UnknownDigestError) as e:
        return _error(e)
    geo = icon.geometry
    return jsonify({
        "username": icon.username,
        "digest": icon.digest,
        "color": {"rgba": list(icon.color.to_rgba()), "hex": icon.color.hex},
        "width": geo.pixel_width,
        "height": geo.pixel_height,
        "size": len(icon.pixels),
        "pixels": base64.b64encode(bytes(icon.pixels)).decode("ascii"),
    })
