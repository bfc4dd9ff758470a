from __future__ import annotations

from pathlib import Path
from typing import Union

# The manifest every dfx project keeps at its root
MANIFEST_FILENAME = "dfx.json"

# Where we look when no --path is given
DEFAULT_PROJECT_DIR = "."


def resolve_manifest_path(base_dir: Union[str, Path] = DEFAULT_PROJECT_DIR) -> Path:
    """Return <base_dir>/dfx.json. Nothing is checked on disk here."""
    return Path(base_dir) / MANIFEST_FILENAME


__all__ = ["MANIFEST_FILENAME", "DEFAULT_PROJECT_DIR", "resolve_manifest_path"]
