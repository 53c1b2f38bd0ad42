"""Serialization – exception normalizer and cycle-safe JSON rendering."""
from hooklog.serialization.errors import NON_ERROR, SerializedError, serialize_error
from hooklog.serialization.json import UNSET, stringify, to_jsonable

__all__ = [
    "NON_ERROR",
    "UNSET",
    "SerializedError",
    "serialize_error",
    "stringify",
    "to_jsonable",
]
