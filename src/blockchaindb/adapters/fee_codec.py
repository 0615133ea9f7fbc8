"""Codec JSON <-> `BlockchainFee`.

Por qué un adaptador:
- El servicio blockchain-db habla JSON con una forma (`fee.amount`, `value`)
  distinta de la que exponemos (`amount`, `confirmations`).
- El dominio no debería conocer esa forma del cable.

Contrato:
- Los errores de parseo nunca se lanzan: se devuelve `None` (registro
  rechazado). No hay objetos parciales.
- `to_json` no es simétrico con `parse_one`; esa asimetría es la del backend.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from blockchaindb.core.domain.models import BlockchainFee, BlockchainFeePayload

logger = logging.getLogger(__name__)


def parse_one(obj: Any) -> BlockchainFee | None:
    """Parsea un objeto JSON de fee; `None` si está mal formado."""

    if not isinstance(obj, dict):
        logger.debug("Rejected blockchain fee: expected JSON object, got %s", type(obj).__name__)
        return None

    try:
        payload = BlockchainFeePayload.model_validate(obj)
    except ValidationError as exc:
        logger.debug("Rejected blockchain fee: %s", _summarize(exc))
        return None

    return payload.to_domain()


def parse_many(arr: Any) -> list[BlockchainFee] | None:
    """Parsea un array JSON de fees (todo o nada), preservando el orden."""

    if not isinstance(arr, list):
        logger.debug("Rejected blockchain fees: expected JSON array, got %s", type(arr).__name__)
        return None

    fees: list[BlockchainFee] = []
    for index, item in enumerate(arr):
        if not isinstance(item, dict):
            logger.debug("Rejected blockchain fees: element %d is not a JSON object", index)
            return None

        fee = parse_one(item)
        if fee is None:
            logger.debug("Rejected blockchain fees: element %d is malformed", index)
            return None

        fees.append(fee)

    return fees


def to_json(fee: BlockchainFee) -> dict[str, str]:
    return {
        "amount": fee.amount,
        "tier": fee.tier,
        "confirmations": fee.confirmations,
    }


def to_json_many(fees: Iterable[BlockchainFee]) -> list[dict[str, str]]:
    return [to_json(fee) for fee in fees]


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)
