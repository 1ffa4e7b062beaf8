"""Encode strings, numbers, booleans and nested sequences as Tcl lists."""

from .domain.encoder import DEFAULT_MAX_DEPTH, ListEncoder, encode_list
from .domain.enums import QuotingStrategy
from .domain.exceptions import (
    EncoderException,
    NestingTooDeepException,
    UnsupportedValueException,
)
from .domain.quoting import backslash_escape, classify, quote_element
from .domain.values import Boolean, EncodableValue, ListValue, Number, Text, to_value

__all__ = [
    "encode_list",
    "quote_element",
    "classify",
    "backslash_escape",
    "to_value",
    "ListEncoder",
    "DEFAULT_MAX_DEPTH",
    "QuotingStrategy",
    "EncodableValue",
    "Text",
    "Number",
    "Boolean",
    "ListValue",
    "EncoderException",
    "NestingTooDeepException",
    "UnsupportedValueException",
]
