import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base project directory (1 level up from hotspot_src/config.py)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# ===== WIDGET ASSETS =====
# Built widget HTML lives in ASSETS_DIR (output of the front-end build).
# Canned datasets live under DATA_DIR, one mock-data.json per widget.
ASSETS_DIR = Path(os.getenv("HOTSPOT_ASSETS_DIR", str(PROJECT_ROOT / "assets")))
DATA_DIR = Path(os.getenv("HOTSPOT_DATA_DIR", str(PROJECT_ROOT / "mock_data")))

# Which built-in catalog to serve ("hotspot" or "post")
CATALOG = os.getenv("HOTSPOT_CATALOG", "hotspot")

# ===== HTTP =====
HOST = os.getenv("HOST", "0.0.0.0")
DEFAULT_PORT = 8000


def get_port() -> int:
    """Read PORT from the environment, falling back to DEFAULT_PORT."""
    try:
        return int(os.getenv("PORT", DEFAULT_PORT))
    except ValueError:
        return DEFAULT_PORT


PORT = get_port()

STREAM_PATH = "/mcp"
MESSAGE_PATH = "/mcp/messages"
DIRECT_PATH = "/mcp"

LOG_LEVEL = os.getenv("HOTSPOT_LOG_LEVEL", "INFO").upper()

# ===== PROTOCOL =====
VERSION = "0.1.0"
PROTOCOL_VERSION = "2024-11-05"
WIDGET_MIME_TYPE = "text/html+skybridge"

# Seconds of silence before a keep-alive comment is written on a stream
HEARTBEAT_INTERVAL = 30.0
# Pending messages per session before the stream is considered stalled
SINK_QUEUE_SIZE = 100
