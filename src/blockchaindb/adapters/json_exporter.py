"""Exportación JSON de fees.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- La forma exportada es la de `to_json` (`amount`/`tier`/`confirmations`),
  no la del cable del backend.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from blockchaindb.adapters.fee_codec import to_json_many
from blockchaindb.core.config import AppSettings
from blockchaindb.core.domain.models import BlockchainFee


def dumps_blockchain_fees(fees: Iterable[BlockchainFee], *, indent: int | None = None) -> str:
    """Serializa fees a JSON UTF-8 con formato estable."""

    if indent is None:
        indent = AppSettings().json_indent
    payload = to_json_many(fees)
    return json.dumps(payload, ensure_ascii=False, indent=indent or None, sort_keys=True) + "\n"


def export_blockchain_fees_json(
    *,
    fees: Iterable[BlockchainFee],
    output_path: Path,
    indent: int | None = None,
) -> Path:
    """Exporta fees a `output_path` (crea directorios si hace falta)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_blockchain_fees(fees, indent=indent), encoding="utf-8")
    return output_path
