"""Normalized audit replay command; every parser variant maps to this record."""

import re
from dataclasses import dataclass, asdict
from typing import Any

# Short user name: everything before the first '/', '@' or space.
_SIMPLE_UGI_RE = re.compile(r"^([^/@ ]*)")


@dataclass(frozen=True)
class AuditReplayCommand:
    absolute_timestamp: int  # ms since epoch, after rebasing
    user_group_info: str
    command: str
    source: str
    destination: str  # "" for unary operations
    source_address: str

    @property
    def simple_ugi(self) -> str:
        """Return the short user name, e.g. 'hdfs' for 'hdfs/host@REALM'."""
        return _SIMPLE_UGI_RE.match(self.user_group_info).group(1)

    def delay_ms(self, now_ms: int) -> int:
        """Milliseconds until this command is due (negative when overdue)."""
        return self.absolute_timestamp - now_ms


def command_to_dict(command: AuditReplayCommand) -> dict[str, Any]:
    """Convert an AuditReplayCommand to a plain dict for JSON output."""
    return asdict(command)
