"""Codec de fees de blockchain para el servicio blockchain-db."""

from blockchaindb.adapters.fee_codec import parse_many, parse_one, to_json, to_json_many
from blockchaindb.core.domain.models import BlockchainFee

__all__ = [
    "BlockchainFee",
    "parse_many",
    "parse_one",
    "to_json",
    "to_json_many",
]

__version__ = "0.1.0"
