"""
Serialization utilities for caching.

Uses orjson for JSON serialization/deserialization. ``None`` serializes to the
JSON literal ``null`` so a cached absence is distinguishable from a miss.
"""

from logging import getLogger

from orjson import OPT_NON_STR_KEYS, JSONDecodeError
from orjson import dumps as orjson_dumps
from orjson import loads as orjson_loads

from quill.configs import file_logger
from quill.errors import CacheDeserializationError, CacheSerializationError

logger = file_logger(getLogger(__name__))


def serialize(value: object) -> str:
    """
    Serialize value to JSON string.

    Args:
        value: Value to serialize.

    Returns:
        JSON serialized string.

    Raises:
        CacheSerializationError: If serialization fails.
    """
    try:
        return orjson_dumps(value, default=str, option=OPT_NON_STR_KEYS).decode("utf-8")
    except TypeError as e:
        logger.exception("Serialization failed")
        mssg = f"Cannot serialize value of type {type(value).__name__}: {e}"
        raise CacheSerializationError(mssg) from e


def deserialize(value: str | bytes) -> object:
    """
    Deserialize JSON string to value.

    Raises:
        CacheDeserializationError: If the payload is not valid JSON.
    """
    try:
        return orjson_loads(value)
    except (JSONDecodeError, TypeError) as e:
        logger.exception("Deserialization failed")
        mssg = f"Cannot deserialize cached payload: {e}"
        raise CacheDeserializationError(mssg) from e
