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
Parser Configuration

Defaults used by the command-facing entry points. Values can be overridden
via environment variables.
"""

import logging
import os
from dataclasses import dataclass

from .timezones import validate_timezone

logger = logging.getLogger("zeitangabe.config")


@dataclass
class ZeitConfig:
    """Configuration for time expression parsing."""

    # Timezone used when a server has not picked one
    default_timezone: str = "CET"

    # Discord allows at most 25 autocomplete choices
    autocomplete_limit: int = 25

    @classmethod
    def from_env(cls) -> "ZeitConfig":
        """Create config from environment variables with defaults."""
        default_timezone = os.getenv("ZEIT_DEFAULT_TIMEZONE", "CET")
        if not validate_timezone(default_timezone):
            logger.warning(
                f"Invalid ZEIT_DEFAULT_TIMEZONE '{default_timezone}', falling back to UTC"
            )
            default_timezone = "UTC"
        return cls(
            default_timezone=default_timezone,
            autocomplete_limit=int(os.getenv("ZEIT_AUTOCOMPLETE_LIMIT", "25")),
        )
