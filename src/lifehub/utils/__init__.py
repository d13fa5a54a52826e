"""Utility functions for lifehub."""

from lifehub.utils.date_parser import parse_date
from lifehub.utils.amount_parser import parse_amount
from lifehub.utils.currency import format_gbp
from lifehub.utils.id_generator import IdGenerator, UUIDGenerator, SequentialIdGenerator

__all__ = [
    "parse_date",
    "parse_amount",
    "format_gbp",
    "IdGenerator",
    "UUIDGenerator",
    "SequentialIdGenerator",
]
