"""The kinds of value a datum can hold, and their names in serialized data."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType


class DatumType(IntEnum):
    """Type tag for the values stored in a datum."""

    BOOLEAN = 0
    INTEGER = 1
    FLOAT = 2
    STRING = 3
    VECTOR = 4
    MATRIX = 5
    POINTER = 6
    TABLE_POINTER = 7
    TABLE = 8
    UNKNOWN = 9


DATUM_TYPE_NAMES = MappingProxyType(
    {
        "unknown": DatumType.UNKNOWN,
        "bool": DatumType.BOOLEAN,
        "integer": DatumType.INTEGER,
        "float": DatumType.FLOAT,
        "string": DatumType.STRING,
        "vector": DatumType.VECTOR,
        "matrix": DatumType.MATRIX,
        "pointer": DatumType.POINTER,
        "rawtable": DatumType.TABLE_POINTER,
        "table": DatumType.TABLE,
    }
)


def datum_type_from_name(name: str) -> DatumType:
    """Look up the datum type for its serialized name.

    Raises ValueError if the name is not a known type.
    """
    try:
        return DATUM_TYPE_NAMES[name]
    except KeyError:
        raise ValueError(f"Type {name} is not a valid DatumType") from None