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
Relative Duration Grammar

Recognizes spans like "5m", "1h30m", "2 Stunden", "in 1 Tag und 3 Stunden".
Each unit is a number followed by either a German word (after exactly one
space, case-insensitive) or a short suffix (optionally after one space).
"""

from typing import Optional

from .combinators import (
    Parser,
    Result,
    alt,
    integer,
    literal,
    literal_ci,
    map_fallible,
    optional,
    permute,
    sequence,
)
from .duration import DAY, HOUR, MINUTE, SECOND, WEEK, Duration

# Long forms are listed longest first so "Tagen" is not cut short at "Tag"
UNIT_WORDS = {
    SECOND: ("Sekunden", "Sekunde"),
    MINUTE: ("Minuten", "Minute"),
    HOUR: ("Stunden", "Stunde"),
    DAY: ("Tagen", "Tage", "Tag"),
    WEEK: ("Wochen", "Woche"),
}

UNIT_SUFFIXES = {
    SECOND: ("sec", "s"),
    MINUTE: ("min", "m"),
    HOUR: ("h",),
    DAY: ("d",),
    WEEK: ("w",),
}

SEPARATOR = alt(literal(" und "), literal(", "), literal(" "))
IN_PREFIX = literal_ci("In ")


def _unit_tag(unit: int) -> Parser:
    # The word form goes first: "5 minuten" must not stop after "min"
    word = sequence(literal(" "), alt(*(literal_ci(w) for w in UNIT_WORDS[unit])))
    suffix = sequence(optional(literal(" ")), alt(*(literal(s) for s in UNIT_SUFFIXES[unit])))
    return alt(word, suffix)


def unit_parser(unit: int) -> Parser:
    """Parser for ``<number><unit tag>`` yielding a Duration."""
    return map_fallible(
        sequence(integer(), _unit_tag(unit)),
        lambda parsed: Duration.of(parsed[0], unit),
    )


seconds = unit_parser(SECOND)
minutes = unit_parser(MINUTE)
hours = unit_parser(HOUR)
days = unit_parser(DAY)
weeks = unit_parser(WEEK)


def _non_zero_total(values) -> Optional[Duration]:
    total = Duration.total(values)
    if total is None or total.is_zero():
        return None
    return total


# Days and weeks only; used as the date offset in mixed expressions
part = map_fallible(permute(days, weeks), _non_zero_total)

rel = map_fallible(permute(seconds, minutes, hours, days, weeks), _non_zero_total)


def chained(unit_group: Parser) -> Parser:
    """
    ``["in "] unit_group (SEPARATOR chained)?`` summed with checked addition.

    The chain is right-recursive, so "1 Tag und 2 Stunden, 5m" becomes
    1 Tag + (2 Stunden + 5m). An overflowing sum fails the whole chain.
    """

    def parse(inp: str) -> Result:
        return chain(inp)

    chain = map_fallible(
        sequence(
            optional(IN_PREFIX),
            unit_group,
            optional(sequence(SEPARATOR, parse)),
        ),
        _sum_chain,
    )
    return chain


def _sum_chain(parsed) -> Optional[Duration]:
    _, head, tail = parsed
    if tail is None:
        return head
    return head.checked_add(tail[1])


full_part = chained(part)
full_rel = chained(rel)
