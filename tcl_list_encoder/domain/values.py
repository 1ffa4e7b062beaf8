"""Encodable value variants and conversion from native Python objects."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from .exceptions import NestingTooDeepException, UnsupportedValueException


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    """Any real number, rendered with Python's default ``str()``.

    Covers int, float, Decimal, Fraction (``1/2``) and numpy scalars.

    Edge cases follow the host interpreter: ``1e21`` becomes ``1e+21``,
    ``-0.0`` stays ``-0.0`` and NaN/infinity come out as ``nan``/``inf``.
    """

    value: numbers.Real | Decimal

    def to_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def to_text(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True)
class ListValue:
    items: tuple["EncodableValue", ...] = ()


EncodableValue = Union[Text, Number, Boolean, ListValue]

_SCALAR_VARIANTS = (Text, Number, Boolean)


def to_value(obj: Any, max_depth: int | None = None, depth: int = 0) -> EncodableValue:
    """Resolve a native Python object into an encodable variant.

    ``str`` maps to Text, ``bool`` to Boolean, real numbers and Decimal to
    Number and any other iterable to ListValue (recursively). Scalar variants
    pass through; the items of a ListValue are converted like any iterable.

    ``depth`` is the list level ``obj`` itself sits at (0 for the top-level
    sequence). Raises UnsupportedValueException for None, bytes, mappings and
    other objects, and NestingTooDeepException when a list would sit at a level
    greater than ``max_depth``.
    """
    return _convert(obj, depth, max_depth)


def _convert(obj: Any, depth: int, max_depth: int | None) -> EncodableValue:
    if isinstance(obj, _SCALAR_VARIANTS):
        return obj
    # bool is a subclass of int
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (numbers.Real, Decimal)):
        return Number(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        raise UnsupportedValueException(
            f"Cannot encode {type(obj).__name__}; decode it to str first"
        )
    if isinstance(obj, Mapping):
        raise UnsupportedValueException(f"Cannot encode mapping type {type(obj).__name__}")
    if isinstance(obj, ListValue):
        obj = obj.items
    if isinstance(obj, Iterable):
        if max_depth is not None and depth > max_depth:
            raise NestingTooDeepException(max_depth)
        return ListValue(tuple(_convert(item, depth + 1, max_depth) for item in obj))
    raise UnsupportedValueException(f"Cannot encode value of type {type(obj).__name__}")
