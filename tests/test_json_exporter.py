from __future__ import annotations

import json
from pathlib import Path

import pytest

from blockchaindb.adapters.json_exporter import dumps_blockchain_fees, export_blockchain_fees_json
from blockchaindb.core.domain.models import BlockchainFee

FEES = [BlockchainFee("30", "fast", "1"), BlockchainFee("10", "régulier", "6")]


def test_dumps_uses_flat_shape_and_keeps_order():
    data = json.loads(dumps_blockchain_fees(FEES))
    assert data == [
        {"amount": "30", "tier": "fast", "confirmations": "1"},
        {"amount": "10", "tier": "régulier", "confirmations": "6"},
    ]


def test_dumps_is_stable_utf8_with_trailing_newline():
    text = dumps_blockchain_fees(FEES, indent=2)
    assert text.endswith("\n")
    assert "régulier" in text
    assert text.index('"amount"') < text.index('"confirmations"') < text.index('"tier"')


def test_dumps_indent_zero_is_single_line():
    assert dumps_blockchain_fees(FEES, indent=0).count("\n") == 1


def test_dumps_reads_indent_from_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BLOCKCHAINDB_JSON_INDENT", "4")
    assert '\n        "amount"' in dumps_blockchain_fees(FEES)


def test_export_creates_parent_directories(tmp_path: Path):
    output = tmp_path / "out" / "nested" / "fees.json"
    written = export_blockchain_fees_json(fees=FEES, output_path=output)
    assert written == output
    assert json.loads(output.read_text(encoding="utf-8"))[1]["confirmations"] == "6"
