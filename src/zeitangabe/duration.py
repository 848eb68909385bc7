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
Duration

Signed whole-second time spans with checked arithmetic. Every operation
that could leave the representable range returns ``None`` instead of
wrapping or raising, so grammar code can reject the input.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

# Signed 64-bit milliseconds, expressed in whole seconds
MAX_SECONDS = (2**63 - 1) // 1000
MIN_SECONDS = -MAX_SECONDS

SECOND = 1
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time in whole seconds."""

    seconds: int = 0

    @classmethod
    def of(cls, amount: int, unit: int = SECOND) -> Optional["Duration"]:
        """
        Build a duration of ``amount`` units of ``unit`` seconds.

        Args:
            amount: Number of units
            unit: Length of one unit in seconds (SECOND, MINUTE, HOUR, DAY, WEEK)

        Returns:
            The duration, or None if it falls outside the representable range
        """
        return cls.from_seconds(amount * unit)

    @classmethod
    def from_seconds(cls, seconds: int) -> Optional["Duration"]:
        if MIN_SECONDS <= seconds <= MAX_SECONDS:
            return cls(seconds)
        return None

    def to_seconds(self) -> int:
        return self.seconds

    def is_zero(self) -> bool:
        return self.seconds == 0

    def checked_add(self, other: "Duration") -> Optional["Duration"]:
        """Sum of both durations, or None on overflow."""
        return Duration.from_seconds(self.seconds + other.seconds)

    def to_timedelta(self) -> Optional[timedelta]:
        """The equivalent ``timedelta``, or None if it cannot hold this span."""
        try:
            return timedelta(seconds=self.seconds)
        except OverflowError:
            return None

    def add_to(self, instant: datetime) -> Optional[datetime]:
        """Shift ``instant`` by this duration, or None if the result is out of range."""
        delta = self.to_timedelta()
        if delta is None:
            return None
        try:
            return instant + delta
        except OverflowError:
            return None

    @staticmethod
    def total(parts) -> Optional["Duration"]:
        """
        Checked sum of the given durations, skipping ``None`` entries.

        Returns None if any intermediate sum overflows.
        """
        result: Optional[Duration] = Duration()
        for part in parts:
            if part is None:
                continue
            result = result.checked_add(part)
            if result is None:
                return None
        return result
