from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "notegraph"
APP_HOME = Path(os.environ.get("NOTEGRAPH_HOME") or Path.home() / f".{APP_NAME}")
LOG_DIR = APP_HOME / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

NOTE_GLOB = "*.md"
