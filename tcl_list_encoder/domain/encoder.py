"""List encoder: composes encodable values into one Tcl list string."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .exceptions import NestingTooDeepException, UnsupportedValueException
from .quoting import quote_element
from .values import Boolean, EncodableValue, ListValue, Number, Text, to_value

logger = logging.getLogger(__name__)

SEPARATOR = " "
DEFAULT_MAX_DEPTH = 200
# Conversion and encoding recurse a few frames per list level; deeper limits
# would reach the interpreter's default recursion limit of 1000.
MAX_DEPTH_CEILING = 250


class ListEncoder:
    """Encodes sequences of values the way ``[list ...]`` does in Tcl.

    Strings are quoted as needed, numbers use Python's default ``str()``,
    booleans become ``1``/``0`` and nested sequences are encoded recursively
    and then quoted as a single element.

    ``max_depth`` bounds how many list levels may sit below the top-level
    sequence; deeper input raises NestingTooDeepException. It must lie
    between 0 and MAX_DEPTH_CEILING.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if not 0 <= max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(
                f"max_depth must be between 0 and {MAX_DEPTH_CEILING}, got {max_depth}"
            )
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def encode(self, values: Iterable[Any] | ListValue) -> str:
        """Encode a sequence of values into one space-separated list."""
        if isinstance(values, (str, Text, Number, Boolean)):
            raise UnsupportedValueException(
                f"Expected a sequence of values, got {type(values).__name__}"
            )
        root = to_value(values, self._max_depth)
        if not isinstance(root, ListValue):
            raise UnsupportedValueException(
                f"Expected a sequence of values, got {type(values).__name__}"
            )
        return self._encode_list(root, 0)

    def encode_element(self, value: Any) -> str:
        """Encode one value as it would appear inside a list."""
        return self._encode_value(to_value(value, self._max_depth, depth=1), 0)

    def _encode_list(self, value: ListValue, depth: int) -> str:
        if depth > self._max_depth:
            logger.debug("Nesting depth %d exceeds limit %d", depth, self._max_depth)
            raise NestingTooDeepException(self._max_depth)
        return SEPARATOR.join(self._encode_value(item, depth) for item in value.items)

    def _encode_value(self, value: EncodableValue, depth: int) -> str:
        if isinstance(value, Text):
            return quote_element(value.value)
        if isinstance(value, (Number, Boolean)):
            return value.to_text()
        if isinstance(value, ListValue):
            return quote_element(self._encode_list(value, depth + 1))
        raise UnsupportedValueException(f"Cannot encode value of type {type(value).__name__}")


def encode_list(values: Iterable[Any] | ListValue, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Encode ``values`` as a Tcl list, e.g. ``encode_list(["a b", 1])`` -> ``{a b} 1``."""
    return ListEncoder(max_depth).encode(values)
