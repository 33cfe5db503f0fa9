"""Helper utilities for constructing temporary projects in tests."""

from __future__ import annotations

import shutil
import textwrap
from pathlib import Path
from typing import Mapping

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


class ProjectBuilder:
    """Utility for writing config files into a throwaway project root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def copy_fixture(self, name: str, target: str | None = None) -> Path:
        """Copy a file from tests/fixtures into the project root."""
        destination = self.root / (target or name)
        shutil.copyfile(FIXTURES_DIR / name, destination)
        return destination

    def path(self, relative: str | None = None) -> Path:
        """Return the project root, or a path beneath it."""
        return self.root / relative if relative else self.root


__all__ = ["FIXTURES_DIR", "ProjectBuilder"]
