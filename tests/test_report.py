from __future__ import annotations

import io

from canister_core.analyzer import summarize_canisters
from canister_core.models import CanisterSummary
from canister_core.report import format_report, print_report


def test_format_report_layout(sample_manifest) -> None:
    lines = format_report(summarize_canisters(sample_manifest))

    assert lines == [
        "Canister: web3disk, Type: custom",
        "Canister: web3disk_service_backend, Type: motoko",
        "Canister: internet-identity, Type: pull",
        "",
        "Total number of canisters: 3",
        "",
        "Canister types summary:",
        "  custom: 1",
        "  motoko: 1",
        "  pull: 1",
    ]


def test_type_buckets_are_sorted_by_label() -> None:
    summary = summarize_canisters(
        {
            "canisters": {
                "z": {"type": "rust"},
                "y": {},
                "x": {"type": "assets"},
                "w": {"type": "rust"},
            }
        }
    )
    lines = format_report(summary)
    tally = lines[lines.index("Canister types summary:") + 1 :]

    assert tally == ["  assets: 1", "  rust: 2", "  unknown: 1"]


def test_empty_summary() -> None:
    assert format_report(CanisterSummary()) == [
        "",
        "Total number of canisters: 0",
        "",
        "Canister types summary:",
    ]


def test_print_report_writes_to_stream(sample_manifest) -> None:
    buf = io.StringIO()
    print_report(summarize_canisters(sample_manifest), stream=buf)

    out = buf.getvalue()
    assert out.startswith("Canister: web3disk, Type: custom\n")
    assert out.endswith("  pull: 1\n")
