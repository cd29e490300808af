"""Module that contains data models."""
from .record import (
    ALL_COLUMNS,
    COLUMN_NAMES,
    DEFAULT_COLUMNS,
    EMPTY_DECODED_FIELD,
    DecodedField,
    FieldEncoding,
    Record,
)
from .types import FieldResult
from .vault_entry import VaultEntry

__all__ = [
    "ALL_COLUMNS",
    "COLUMN_NAMES",
    "DEFAULT_COLUMNS",
    "EMPTY_DECODED_FIELD",
    "DecodedField",
    "FieldEncoding",
    "FieldResult",
    "Record",
    "VaultEntry",
]
