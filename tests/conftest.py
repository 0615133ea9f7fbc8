from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def regular_fee_json() -> dict:
    return {"fee": {"amount": "10"}, "tier": "regular", "value": "6"}


@pytest.fixture
def fees_file(tmp_path: Path) -> Path:
    path = tmp_path / "fees.json"
    path.write_text(
        json.dumps(
            [
                {"fee": {"amount": "30"}, "tier": "fast", "value": "1"},
                {"fee": {"amount": "10"}, "tier": "regular", "value": "6"},
                {"fee": {"amount": "2"}, "tier": "slow"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ("BLOCKCHAINDB_JSON_INDENT", "BLOCKCHAINDB_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    # AppSettings lee `.env` del cwd.
    monkeypatch.chdir(tmp_path)
