"""Element quoting for the Tcl list format.

Equivalent to ``[list $s]`` in Tcl for a single element: the result, read
back as one element of a list, yields exactly ``s``.

Three strategies, cheapest first:

- unquoted: nothing in ``s`` is special to the list parser;
- brace quoted: ``{s}``, valid only if every ``{`` is matched by a later
  ``}`` and ``s`` does not end in an unpaired backslash;
- backslash quoted: each special character escaped individually. This can
  represent anything, but may grow the input up to 4x, and applying it at
  every nesting level compounds.

Python strings iterate by code point, so characters outside the BMP are
seen whole and never need quoting.
"""

from __future__ import annotations

from .enums import QuotingStrategy

EMPTY_ELEMENT = "{}"

# Characters that force at least brace quoting (besides braces and backslash).
_BRACE_TRIGGERS = frozenset(' "')

# Characters escaped with a plain backslash prefix.
_LITERAL_ESCAPES = frozenset(' "\\{}')

# BEL (\a) is written in hex form.
_NAMED_ESCAPES = {
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def is_unprintable_ascii(char: str) -> bool:
    code = ord(char)
    return code < 32 or code == 127


def classify(s: str) -> QuotingStrategy:
    """Decide the cheapest quoting strategy that keeps ``s`` a single element.

    The empty string is classified as BRACE (it is written as ``{}``).
    """
    if not s:
        return QuotingStrategy.BRACE

    needs_backslash = False
    needs_brace = False
    brace_depth = 0
    length = len(s)
    i = 0

    while i < length:
        char = s[i]

        if is_unprintable_ascii(char):
            needs_backslash = True
        elif char in _BRACE_TRIGGERS:
            needs_brace = True
        elif char == "\\":
            if i + 1 == length:
                # A trailing backslash would escape the closing brace.
                needs_backslash = True
            else:
                # The escaped character is protected, skip it.
                needs_brace = True
                i += 1
        elif char == "{":
            needs_brace = True
            brace_depth += 1
        elif char == "}":
            needs_brace = True
            if brace_depth:
                brace_depth -= 1
            else:
                needs_backslash = True

        if needs_backslash:
            break
        i += 1

    if brace_depth:
        needs_backslash = True

    if needs_backslash:
        return QuotingStrategy.BACKSLASH
    if needs_brace:
        return QuotingStrategy.BRACE
    return QuotingStrategy.UNQUOTED


def backslash_escape(s: str) -> str:
    """Escape every character of ``s`` that is special to the list parser.

    Control characters get their C-style name where Tcl has one, otherwise
    ``\\xHH``. No surrounding braces are added.
    """
    parts: list[str] = []
    for char in s:
        named = _NAMED_ESCAPES.get(char)
        if named is not None:
            parts.append(named)
        elif char in _LITERAL_ESCAPES:
            parts.append("\\" + char)
        elif is_unprintable_ascii(char):
            parts.append(f"\\x{ord(char):02x}")
        else:
            parts.append(char)
    return "".join(parts)


def quote_element(s: str) -> str:
    """Quote ``s`` so that it reads back as exactly one list element."""
    if not s:
        return EMPTY_ELEMENT

    strategy = classify(s)
    if strategy is QuotingStrategy.BACKSLASH:
        return backslash_escape(s)
    if strategy is QuotingStrategy.BRACE:
        return "{" + s + "}"
    return s
