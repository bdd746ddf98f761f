from __future__ import annotations
from pathlib import Path
from typing import Optional
from umlgen.core.config import settings


class WorkspaceManager:
    """Per-export working directory: <exports_dir>/<export_id>/."""

    def __init__(self, export_id: str, base_dir: Optional[Path] = None):
        self.export_id = export_id
        self.root = Path(base_dir or settings.exports_dir) / export_id

    @property
    def artifacts_dir(self) -> Path:
        return self.root / "workspace"

    @property
    def project_dir(self) -> Path:
        return self.root / "project"

    def archive_path(self, project_name: str) -> Path:
        return self.root / f"{project_name}.zip"

    def ensure(self) -> None:
        self.artifacts_dir.mkdir(parents=True, exist_ok=True)
        self.project_dir.mkdir(parents=True, exist_ok=True)
