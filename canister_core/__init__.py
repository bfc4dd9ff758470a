from __future__ import annotations

__version__ = "0.1.0"

from canister_core.analyzer import analyze_canisters, summarize_canisters
from canister_core.errors import (
    CanisterCounterError,
    FileReadError,
    MissingFieldError,
    ParseError,
)
from canister_core.manifest import load_manifest

__all__ = [
    "__version__",
    "analyze_canisters",
    "summarize_canisters",
    "load_manifest",
    "CanisterCounterError",
    "FileReadError",
    "ParseError",
    "MissingFieldError",
]
