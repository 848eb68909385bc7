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
Message Formatting

User-facing strings around parsed times: the parse error diagnostic and
Discord timestamp markup.
"""

from datetime import datetime


def format_parse_error(text: str, remainder: str) -> str:
    """
    Diagnostic that splits the input where parsing broke down.

    Args:
        text: The original input
        remainder: The unparsed suffix of ``text``

    Returns:
        "Fehler beim parsen der Zeit: <parsed part> --- <remainder>"
    """
    consumed = text[: len(text) - len(remainder)]
    return f"Fehler beim parsen der Zeit: {consumed} --- {remainder}"


def discord_timestamp(instant: datetime, style: str = "R") -> str:
    """Discord markup rendering ``instant`` in each reader's local time."""
    return f"<t:{int(instant.timestamp())}:{style}>"
