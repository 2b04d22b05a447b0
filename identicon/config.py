"""
Identicon defaults - ranges, margins and environment overrides
"""

import os

# ---------- icon geometry ----------
HEIGHT_RANGE = (1, 50)
WIDTH_RANGE = (1, 50)
SCALE_RANGE = (1, 100)

DEFAULT_HEIGHT = 5
DEFAULT_WIDTH = 5
DEFAULT_SCALE = 10

# transparent border around the icon on the exported canvas
MARGIN = 10
MARGIN_RANGE = (0, 100)

# ---------- color ----------
MIN_COLOR_SUM = 128
RESCUE_GREEN = 128
ALPHA = 255

# ---------- export ----------
DEFAULT_FILENAME = "identicon.png"

# ---------- environment ----------
DIGEST_ALGORITHM = os.environ.get("IDENTICON_DIGEST", "md5")
HOST = os.environ.get("IDENTICON_HOST", "0.0.0.0")
DEFAULT_PORT = 5000
LOG_LEVEL = os.environ.get("IDENTICON_LOG_LEVEL", "INFO").upper()
