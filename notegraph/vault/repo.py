from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from notegraph.settings import NOTE_GLOB


def read_workspace_file(path: str | Path) -> str:
    """Read a note as UTF-8. I/O errors propagate to the caller untouched."""
    return Path(path).read_text(encoding="utf-8")


@dataclass(frozen=True)
class WorkspaceRepository:
    workspace_dir: Path

    def resolve(self, path: str | Path) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p

    def list_note_paths(self) -> list[Path]:
        return sorted(self.workspace_dir.rglob(NOTE_GLOB), key=lambda p: str(p).lower())

    def read(self, path: str | Path) -> str:
        return read_workspace_file(self.resolve(path))
