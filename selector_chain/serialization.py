"""
JSON helpers for selector-chain.

to_json turns any value (pydantic models, dataclasses, containers, scalars)
into JSON text; from_json parses JSON text back into a value of a given shape,
so the result carries the shape's methods:

    >>> from_json(Rectangle, '{"width":10,"height":20}').get_area()
    200
"""

import json
import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from selector_chain.config.options import SerializerOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerializationError(ValueError):
    """Value cannot be encoded to JSON or text cannot be decoded into a shape."""

    pass


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return to_jsonable_python(value)


def to_json(value: Any, options: Optional[SerializerOptions] = None) -> str:
    """Return the JSON representation of a value.

    Output is compact (``[1,2,3]``) and keeps key insertion order unless the
    options ask for indentation or sorted keys.

    Args:
        value: Value to encode.
        options: Output options; defaults to SerializerOptions().

    Returns:
        JSON text.

    Raises:
        SerializationError: If the value has no JSON representation, e.g.
            an unknown type or a NaN or infinite float.
    """
    options = options or SerializerOptions()

    try:
        plain = _to_plain(value)
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Cannot serialize {type(value).__name__} to JSON: {e}"
        ) from e

    separators = (",", ":") if options.indent is None else (",", ": ")
    try:
        return json.dumps(
            plain,
            sort_keys=options.sort_keys,
            indent=options.indent,
            separators=separators,
            ensure_ascii=options.ensure_ascii,
            allow_nan=False,
        )
    except ValueError as e:
        raise SerializationError(f"Cannot serialize {type(value).__name__} to JSON: {e}") from e


def from_json(shape: type[T], text: str) -> T:
    """Parse JSON text into a value of the given shape.

    Keys that are not fields of the shape are kept for models that allow
    extra fields (such as Rectangle) and dropped for models that ignore them.

    Args:
        shape: Target type, e.g. a pydantic model, a dataclass or ``list[int]``.
        text: JSON text.

    Returns:
        Value of type ``shape``.

    Raises:
        SerializationError: If the text is not valid JSON or does not fit the shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    try:
        return TypeAdapter(shape).validate_python(data)
    except ValidationError as e:
        logger.debug(f"JSON does not fit {shape!r}: {e}")
        raise SerializationError(
            f"JSON does not match {getattr(shape, '__name__', shape)}: {e}"
        ) from e


get_json = to_json


__all__ = [
    "SerializationError",
    "from_json",
    "get_json",
    "to_json",
]
