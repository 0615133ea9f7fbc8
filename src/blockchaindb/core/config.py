"""Ajustes de `blockchaindb` leídos de env vars (`BLOCKCHAINDB_*`) o `.env`.

Los lee la CLI una vez por invocación y los pasa a los comandos.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Ajustes de la CLI y del exportador JSON.

    - `json_indent`: sangría de `convert` y `export_blockchain_fees_json`
      (0 escribe todo en una línea).
    - `log_level`: nivel inicial del logger `blockchaindb`; `--verbose` lo
      fuerza a DEBUG para ver los registros rechazados.

    El default de confirmaciones ("1") es contrato del cable, no un ajuste.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOCKCHAINDB_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentación del JSON exportado (0 = una sola línea).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel del logger `blockchaindb` (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
