from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest


SAMPLE_MANIFEST = {
    "canisters": {
        "web3disk": {
            "type": "custom",
            "candid": "src/distributed/web3disk/web3disk.did",
        },
        "web3disk_service_backend": {
            "type": "motoko",
            "main": "src/web3disk_service_backend/src/main.mo",
        },
        "internet-identity": {
            "type": "pull",
            "id": "rdmx6-jaaaa-aaaaa-aaadq-cai",
        },
    }
}


@pytest.fixture
def sample_manifest() -> dict:
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def write_dfx_json(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a dfx.json into tmp_path (str content is written raw) and return the dir."""

    def _write(content: Any) -> Path:
        text = content if isinstance(content, str) else json.dumps(content)
        (tmp_path / "dfx.json").write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    """Drop handlers the CLI attaches so each test gets fresh stderr / log files."""
    yield
    logger = logging.getLogger("canister_core")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
