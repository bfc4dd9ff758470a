from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from canister_core.errors import MissingFieldError
from canister_core.models import CanisterEntry, CanisterSummary

CANISTERS_FIELD = "canisters"
TYPE_FIELD = "type"
UNKNOWN_TYPE = "unknown"


def get_canisters(manifest: Any) -> Mapping[str, Any]:
    """
    Return the manifest's `canisters` object.

    Raises MissingFieldError when the field is absent, null, or not an object
    (an array or a scalar), and when the document itself is not an object.
    """
    canisters = manifest.get(CANISTERS_FIELD) if isinstance(manifest, dict) else None
    if not isinstance(canisters, dict):
        raise MissingFieldError(CANISTERS_FIELD)
    return canisters


def canister_type(definition: Any) -> str:
    """
    Type label of one canister definition.

    Anything other than a string `type` (missing, null, a number, or a
    definition that is not an object at all) is labelled "unknown".
    """
    if isinstance(definition, dict):
        value = definition.get(TYPE_FIELD)
        if isinstance(value, str):
            return value
    return UNKNOWN_TYPE


def iter_canister_entries(manifest: Any) -> Iterator[CanisterEntry]:
    """Yield one CanisterEntry per canister, in manifest order."""
    for name, definition in get_canisters(manifest).items():
        yield CanisterEntry(name=name, type=canister_type(definition))


def tally_types(labels: Iterable[str]) -> Dict[str, int]:
    """Return {type label: number of times it occurs in `labels`}."""
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return counts


def analyze_canisters(manifest: Any) -> Tuple[int, Dict[str, int]]:
    """
    Return (total number of canisters, {type label: count}).

    Pure: reads `manifest` and never mutates it.
    """
    canisters = get_canisters(manifest)
    counts = tally_types(canister_type(d) for d in canisters.values())
    return len(canisters), counts


def summarize_canisters(manifest: Any) -> CanisterSummary:
    entries = list(iter_canister_entries(manifest))
    counts = tally_types(e.type for e in entries)
    return CanisterSummary(total=len(entries), type_counts=counts, entries=entries)


__all__ = [
    "CANISTERS_FIELD",
    "TYPE_FIELD",
    "UNKNOWN_TYPE",
    "get_canisters",
    "canister_type",
    "tally_types",
    "iter_canister_entries",
    "analyze_canisters",
    "summarize_canisters",
]
