# zeitangabe - German Time Expression Parser
# Copyright (c) 2025-2026 Slash Daemon slashdaemon@protonmail.com
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing: [slashdaemon@protonmail.com]

"""
Parser Combinators

Small building blocks the time grammars are assembled from. A parser is a
callable taking the remaining input and returning either ``Ok(value, rest)``
or ``Err(rest)``. Input is never mutated; ``rest`` is always a suffix of what
the parser was given, so a failure points at the text that could not be
matched.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")

_ASCII_DIGITS = frozenset("0123456789")

# Upper bounds of the integer types the grammars read into
I64_MAX = 2**63 - 1
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful parse: the value and the unconsumed input."""

    value: T
    rest: str


@dataclass(frozen=True)
class Err:
    """A failed parse: the suffix at which matching broke down."""

    rest: str


Result = Union[Ok, Err]
Parser = Callable[[str], Result]


def literal(tag: str) -> Parser:
    """Match ``tag`` exactly."""

    def parse(inp: str) -> Result:
        if inp.startswith(tag):
            return Ok(tag, inp[len(tag):])
        return Err(inp)

    return parse


def literal_ci(tag: str) -> Parser:
    """
    Match ``tag`` as written or fully lower-cased.

    Covers sentence-initial capitalization, so ``literal_ci("In ")`` accepts
    both "In " and "in ". Mixed casing such as "iN " is not accepted.
    """
    lowered = tag.lower()
    if lowered == tag:
        return literal(tag)
    return alt(literal(tag), literal(lowered))


def integer(max_value: int = I64_MAX) -> Parser:
    """
    Read one or more ASCII digits as a non-negative int.

    Fails on an empty digit run and when the number exceeds ``max_value``,
    the upper bound of the integer type being read.
    """

    def parse(inp: str) -> Result:
        end = 0
        while end < len(inp) and inp[end] in _ASCII_DIGITS:
            end += 1
        if end == 0:
            return Err(inp)
        # Longer runs cannot fit and would be slow (or refused) by int()
        if len(inp[:end].lstrip("0")) > len(str(max_value)):
            return Err(inp)
        value = int(inp[:end])
        if value > max_value:
            return Err(inp)
        return Ok(value, inp[end:])

    return parse


def sequence(*parsers: Parser) -> Parser:
    """
    Run every parser in order on the successively remaining input.

    Returns a tuple of the results. If a member fails its failure is
    returned unchanged, which records how far the sequence got.
    """

    def parse(inp: str) -> Result:
        values = []
        rest = inp
        for parser in parsers:
            result = parser(rest)
            if isinstance(result, Err):
                return result
            values.append(result.value)
            rest = result.rest
        return Ok(tuple(values), rest)

    return parse


def alt(*parsers: Parser) -> Parser:
    """
    Try each alternative on the same input and return the first success.

    When all alternatives fail, the failure that progressed furthest into
    the input (shortest remainder) is reported; on a tie the later
    alternative wins.
    """

    def parse(inp: str) -> Result:
        furthest: Optional[Err] = None
        for parser in parsers:
            result = parser(inp)
            if isinstance(result, Ok):
                return result
            if furthest is None or len(result.rest) <= len(furthest.rest):
                furthest = result
        return furthest if furthest is not None else Err(inp)

    return parse


def optional(parser: Parser) -> Parser:
    """Always succeed, with ``None`` and the input unchanged if ``parser`` fails."""

    def parse(inp: str) -> Result:
        result = parser(inp)
        if isinstance(result, Ok):
            return result
        return Ok(None, inp)

    return parse


def permute(*parsers: Parser) -> Parser:
    """
    Apply each parser at most once, in whatever order the input has them.

    Scans the parsers not yet used for one that matches the remaining input,
    applies it and starts over, until none of the remaining ones match. The
    result is a tuple aligned with ``parsers`` holding ``None`` for every
    parser that never matched, so the combinator itself never fails.
    """

    def parse(inp: str) -> Result:
        values: list = [None] * len(parsers)
        pending = list(range(len(parsers)))
        rest = inp
        progressed = True
        while progressed:
            progressed = False
            for index in pending:
                result = parsers[index](rest)
                if isinstance(result, Ok):
                    values[index] = result.value
                    rest = result.rest
                    pending.remove(index)
                    progressed = True
                    break
        return Ok(tuple(values), rest)

    return parse


def map_value(parser: Parser, func: Callable[[Any], Any]) -> Parser:
    """Transform the value of a successful parse."""

    def parse(inp: str) -> Result:
        result = parser(inp)
        if isinstance(result, Err):
            return result
        return Ok(func(result.value), result.rest)

    return parse


def map_fallible(parser: Parser, func: Callable[[Any], Optional[Any]]) -> Parser:
    """
    Transform the value of a successful parse with a function that may reject it.

    If ``func`` returns ``None`` the combinator fails at its own starting
    input, as though ``parser`` had not matched at all. Inside ``alt`` such a
    rejection therefore loses to any alternative that got further before
    failing: a well-formed but past date like "10.11.2024 14:00" is reported
    at ".11.2024 14:00", where the clock time alternative stopped.
    """

    def parse(inp: str) -> Result:
        result = parser(inp)
        if isinstance(result, Err):
            return result
        value = func(result.value)
        if value is None:
            return Err(inp)
        return Ok(value, result.rest)

    return parse
