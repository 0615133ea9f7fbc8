"""Lanzador local de `blockchaindb-fees` desde un checkout.

Uso:
- `python -m main show fees.json`
- `python -m main convert fees.json -o out/fees.json`

Añade `src/` a `sys.path` para no depender de `pip install -e .`; la
CLI instalada (`blockchaindb-fees`) no pasa por aquí.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from blockchaindb.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
