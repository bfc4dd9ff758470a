from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class CanisterEntry(BaseModel):
    name: str
    type: str


class CanisterSummary(BaseModel):
    """
    Everything the report needs from one pass over the `canisters` object.

    `entries` keeps manifest order; `type_counts` maps type label -> count.
    """
    total: int = 0
    type_counts: Dict[str, int] = Field(default_factory=dict)
    entries: List[CanisterEntry] = Field(default_factory=list)


__all__ = ["CanisterEntry", "CanisterSummary"]
