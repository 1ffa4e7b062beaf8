"""Shared test fixtures for tcl_list_encoder tests."""

from __future__ import annotations

import pytest

_WHITESPACE = " \t\n\r\v\f"

_BACKSLASH_NAMED = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_HEX_DIGITS = "0123456789abcdefABCDEF"


def split_list(text: str) -> list[str]:
    """Split a Tcl list into its elements (brace and bare words only).

    Used when tkinter is unavailable; follows Tcl's list parsing rules for
    the forms the encoder can produce.
    """
    elements: list[str] = []
    i = 0
    length = len(text)

    while i < length:
        if text[i] in _WHITESPACE:
            i += 1
            continue

        if text[i] == "{":
            depth = 1
            start = i + 1
            i += 1
            while depth:
                if i >= length:
                    raise ValueError(f"unmatched open brace in {text!r}")
                char = text[i]
                if char == "\\":
                    i += 2
                    continue
                if char == "{":
                    depth += 1
                elif char == "}":
                    depth -= 1
                i += 1
            elements.append(text[start:i - 1])
            if i < length and text[i] not in _WHITESPACE:
                raise ValueError(f"list element in braces followed by {text[i]!r}")
            continue

        current: list[str] = []
        while i < length and text[i] not in _WHITESPACE:
            char = text[i]
            if char != "\\":
                current.append(char)
                i += 1
                continue
            if i + 1 >= length:
                current.append("\\")
                i += 1
                continue
            escaped = text[i + 1]
            if escaped in _BACKSLASH_NAMED:
                current.append(_BACKSLASH_NAMED[escaped])
                i += 2
            elif escaped == "x" and i + 2 < length and text[i + 2] in _HEX_DIGITS:
                end = i + 2
                while end < length and end < i + 4 and text[end] in _HEX_DIGITS:
                    end += 1
                current.append(chr(int(text[i + 2:end], 16)))
                i = end
            else:
                current.append(escaped)
                i += 2
        elements.append("".join(current))

    return elements


@pytest.fixture(scope="session")
def tcl_split():
    """Tcl's own list splitter; the local splitter where Tk is not built in."""
    try:
        import tkinter
    except ImportError:
        return split_list

    interp = tkinter.Tcl()

    def splitlist(text: str) -> list[str]:
        return list(interp.splitlist(text))

    return splitlist


@pytest.fixture
def special_strings() -> list[str]:
    return [
        "",
        "plain",
        "a b c",
        "{a b} {c d}",
        "a bc\\",
        "\\",
        "\\\\",
        "x\\}",
        "{{{}}",
        "{{}}}",
        "}{",
        'a"b{c',
        "tab\there",
        "line\nbreak",
        "\x00\x01\x7f",
        "\x01a",
        "Don’t stop here {",
        "¡Hola! ¿Què pasa?",
        "😀 😀",
    ]
