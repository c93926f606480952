from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from notegraph.settings import APP_NAME


@dataclass(frozen=True)
class SettingsKeys:
    WORKSPACE_DIR: str = "workspace/dir"
    GRAPH_MODE: str = "graph/mode"
    GRAPH_DEPTH: str = "graph/depth"


def open_settings() -> QSettings:
    return QSettings(APP_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default
