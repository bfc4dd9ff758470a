from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from canister_core.models import CanisterSummary


def format_report(summary: CanisterSummary) -> List[str]:
    """
    Human-friendly report lines: one per canister, the total, then the
    type breakdown sorted by label.
    """
    lines = [f"Canister: {e.name}, Type: {e.type}" for e in summary.entries]

    lines.append("")
    lines.append(f"Total number of canisters: {summary.total}")
    lines.append("")
    lines.append("Canister types summary:")
    for type_name, count in sorted(summary.type_counts.items()):
        lines.append(f"  {type_name}: {count}")
    return lines


def print_report(summary: CanisterSummary, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in format_report(summary):
        print(line, file=out)


__all__ = ["format_report", "print_report"]
