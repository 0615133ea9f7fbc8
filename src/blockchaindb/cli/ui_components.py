"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table

from blockchaindb.core.domain.models import BlockchainFee


def build_fees_table(fees: Iterable[BlockchainFee], *, title: str = "Blockchain Fees") -> Table:
    """Crea una tabla Rich con un fee por fila, en el orden recibido."""

    table = Table(title=title)
    table.add_column("Tier", style="cyan", no_wrap=True)
    table.add_column("Amount", style="white", justify="right")
    table.add_column("Confirmations", style="green", justify="right")
    for fee in fees:
        table.add_row(fee.tier, fee.amount, fee.confirmations)
    return table
