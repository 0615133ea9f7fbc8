"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da inmutabilidad (`frozen`) e igualdad por valor sin escribir boilerplate.
- Separa el *payload* que envía el servicio blockchain-db (forma del cable) del
  valor que maneja el resto de la aplicación.

Nota:
- Los importes y confirmaciones son strings opacos: aquí no se parsean a
  números ni se valida su semántica.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator
from pydantic.config import ConfigDict

DEFAULT_CONFIRMATIONS = "1"


class BlockchainFee(BaseModel):
    """Un tier de fee de una blockchain (p.ej. fast/regular/slow).

    Por qué inmutable:
    - Es un valor recibido del backend; nadie debería modificarlo en memoria.
    - Al ser `frozen` es hashable y se puede usar en sets/dicts.
    """

    model_config = ConfigDict(frozen=True)

    amount: str = Field(
        ...,
        description="Importe del fee por unidad, como string decimal.",
    )
    tier: str = Field(
        ...,
        description="Etiqueta del nivel de servicio (fast, regular, slow...).",
    )
    confirmations: str = Field(
        ...,
        description="Confirmaciones esperadas, como string de conteo.",
    )

    def __init__(self, amount: str, tier: str, confirmations: str, **data: Any) -> None:
        super().__init__(amount=amount, tier=tier, confirmations=confirmations, **data)


class FeeAmountPayload(BaseModel):
    """Objeto anidado `fee` tal como lo devuelve el servicio."""

    model_config = ConfigDict(extra="ignore")

    amount: StrictStr


class BlockchainFeePayload(BaseModel):
    """Forma JSON de un fee en el cable.

    Importante:
    - La clave top-level `value` se guarda como `confirmations` en el dominio.
    - `value` es opcional; si falta (o es null) vale "1".
    """

    model_config = ConfigDict(extra="ignore")

    fee: FeeAmountPayload
    tier: StrictStr
    value: str = DEFAULT_CONFIRMATIONS

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> str:
        # null -> default; escalares no-string se renderizan como texto JSON.
        if v is None:
            return DEFAULT_CONFIRMATIONS
        if isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return json.dumps(v, ensure_ascii=False, separators=(",", ":"), default=str)

    def to_domain(self) -> BlockchainFee:
        return BlockchainFee(self.fee.amount, self.tier, self.value)
