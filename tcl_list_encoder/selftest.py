"""Reference-table self-test for the list encoder.

Each case encodes ``[source]`` as a one-element list and compares the result
with the expected text. Cases without an expectation are reported for manual
review instead of being judged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from tcl_list_encoder.domain.encoder import ListEncoder

logger = logging.getLogger(__name__)

ALL_ASCII = "".join(chr(i) for i in range(128))

ALL_ASCII_ESCAPED = (
    "\\x00\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\b\\t\\n\\v\\f\\r\\x0e\\x0f"
    "\\x10\\x11\\x12\\x13\\x14\\x15\\x16\\x17\\x18\\x19\\x1a\\x1b\\x1c\\x1d\\x1e\\x1f"
    "\\ !\\\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\\\]^_`"
    "abcdefghijklmnopqrstuvwxyz\\{|\\}~\\x7f"
)

_ASTRAL = "🙏😆—🕶⅓👌 𝔘𝔫𝔦𝔠𝔬𝔡𝔢 𝕔𝕠𝕕𝕖 𝐩𝐨𝐢𝐧𝐭  𝑣𝑠 𝒹𝒶𝓉𝒶 𝚙𝚘𝚒𝚗𝚝"


@dataclass(frozen=True)
class SelfTestCase:
    source: Any
    expected: str | None = None
    notes: str = ""


@dataclass
class SelfTestResult:
    case: SelfTestCase
    actual: str


@dataclass
class SelfTestReport:
    passed: list[SelfTestResult] = field(default_factory=list)
    failed: list[SelfTestResult] = field(default_factory=list)
    needs_review: list[SelfTestResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        if self.failed:
            status = "FAILED"
        elif self.needs_review:
            status = "NEEDS REVIEW"
        else:
            status = "SUCCESS"
        return (
            f"{status}: {len(self.passed)} passed, {len(self.failed)} failed, "
            f"{len(self.needs_review)} need review"
        )


REFERENCE_CASES: tuple[SelfTestCase, ...] = (
    SelfTestCase(ALL_ASCII, ALL_ASCII_ESCAPED, "all ASCII chars"),
    SelfTestCase("", "{}", "empty string"),
    SelfTestCase("simple_value", "simple_value", "simple value"),
    SelfTestCase("a b c", "{a b c}", "simple list"),
    SelfTestCase(
        "{a b} {{c d} {e f}} {} {g h}",
        "{{a b} {{c d} {e f}} {} {g h}}",
        "recursive list, braces added",
    ),
    SelfTestCase(
        "{a b} \\\\ \\} \\{ {c d}",
        "{{a b} \\\\ \\} \\{ {c d}}",
        "escaped braces inside a list, braces added",
    ),
    SelfTestCase("a bc\\", "a\\ bc\\\\", "trailing backslash"),
    SelfTestCase("{{{}}", "\\{\\{\\{\\}\\}", "too many opens"),
    SelfTestCase("{{}}}", "\\{\\{\\}\\}\\}", "too many closes"),
    SelfTestCase("{}}{{}", "\\{\\}\\}\\{\\{\\}", "wrong order"),
    SelfTestCase('a"b{c', 'a\\"b\\{c', "quote and unmatched brace"),
    SelfTestCase("“Hello_world”", "“Hello_world”", "simple value with UTF-8"),
    SelfTestCase("¡Hola! ¿Què pasa?", "{¡Hola! ¿Què pasa?}", "simple list with UTF-8"),
    SelfTestCase("Don’t stop here {", "Don’t\\ stop\\ here\\ \\{", "UTF-8 and backslash"),
    SelfTestCase("沒有測試，直到有中文測試！", "沒有測試，直到有中文測試！", "Chinese"),
    SelfTestCase(_ASTRAL, "{" + _ASTRAL + "}", "characters outside the BMP"),
    SelfTestCase(((), (1, 2, "three", (True, False))), "{{} {1 2 three {1 0}}}", "recursion"),
)


def run_self_test(
    additional_cases: Iterable[SelfTestCase] = (),
    encoder: ListEncoder | None = None,
) -> SelfTestReport:
    """Run the caller's cases followed by the reference table."""
    encoder = encoder or ListEncoder()
    report = SelfTestReport()

    for case in (*additional_cases, *REFERENCE_CASES):
        result = SelfTestResult(case=case, actual=encoder.encode([case.source]))
        if case.expected is None:
            report.needs_review.append(result)
            logger.info("Needs review (%s): %r -> %r", case.notes, case.source, result.actual)
        elif result.actual == case.expected:
            report.passed.append(result)
        else:
            report.failed.append(result)
            logger.error(
                "Self-test failed (%s): %r -> %r, expected %r",
                case.notes,
                case.source,
                result.actual,
                case.expected,
            )

    if report.ok:
        logger.info(report.summary())
    else:
        logger.error(report.summary())
    return report
