from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from canister_core.errors import FileReadError, ParseError
from canister_core.paths import DEFAULT_PROJECT_DIR, resolve_manifest_path

log = logging.getLogger(__name__)


def read_manifest_text(path: Union[str, Path]) -> str:
    """
    Read the whole manifest as UTF-8 text.

    Missing files, directories, permission problems and undecodable bytes all
    surface as FileReadError carrying the attempted path.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"invalid JSON token {name!r}")


def parse_manifest(text: str, path: Optional[Path] = None) -> Any:
    """
    Parse manifest text into plain JSON values (dict / list / str / number / bool / None).

    Anything json.loads would reject, plus NaN/Infinity and nesting deep enough
    to exhaust the recursion limit, raises ParseError.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"{e.msg} (line {e.lineno}, column {e.colno})", path) from e
    except ValueError as e:
        raise ParseError(str(e), path) from e
    except RecursionError as e:
        raise ParseError("recursion limit exceeded", path) from e


def load_manifest(base_dir: Union[str, Path] = DEFAULT_PROJECT_DIR) -> Any:
    """
    Resolve <base_dir>/dfx.json, read it, and return the parsed document.
    """
    path = resolve_manifest_path(base_dir)
    log.info("Reading manifest %s", path)
    text = read_manifest_text(path)
    manifest = parse_manifest(text, path)
    log.info("Parsed manifest %s (%d chars)", path, len(text))
    return manifest


__all__ = ["read_manifest_text", "parse_manifest", "load_manifest"]
