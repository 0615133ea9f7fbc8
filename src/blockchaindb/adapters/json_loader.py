"""Carga de fees desde texto/ficheros JSON.

Soporta formatos tipo:
- Lista:  [{"fee": {"amount": "10"}, "tier": "regular", "value": "6"}, ...]
- Objeto: {"fee": {"amount": "10"}, "tier": "regular"} (se normaliza a lista)

Nota:
- JSON mal formado es "input malformado" -> `None`.
- Un fichero ilegible no lo es: el `OSError` se propaga.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from blockchaindb.adapters.fee_codec import parse_many, parse_one
from blockchaindb.core.domain.models import BlockchainFee

logger = logging.getLogger(__name__)

_UNDECODABLE = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-JSON constant {name}")


def _decode(text: str | bytes) -> Any:
    # JSONDecodeError y UnicodeDecodeError son ValueError.
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.debug("Rejected blockchain fee payload: invalid JSON (%s)", exc)
        return _UNDECODABLE


def loads_blockchain_fee(text: str | bytes) -> BlockchainFee | None:
    data = _decode(text)
    if data is _UNDECODABLE:
        return None
    return parse_one(data)


def loads_blockchain_fees(text: str | bytes) -> list[BlockchainFee] | None:
    data = _decode(text)
    if data is _UNDECODABLE:
        return None
    return parse_many(data)


def load_blockchain_fees(path: Path) -> list[BlockchainFee] | None:
    """Lee un fichero UTF-8 con uno o varios fees."""

    raw = path.read_bytes()
    data = _decode(raw)
    if data is _UNDECODABLE:
        return None

    if isinstance(data, dict):
        fee = parse_one(data)
        return [fee] if fee is not None else None
    return parse_many(data)
