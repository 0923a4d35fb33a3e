"""Parser contract shared by every audit log encoding."""

from typing import Callable, Protocol, runtime_checkable

from auditreplay.config import ParserConfig
from auditreplay.models import AuditReplayCommand

# Maps a relative timestamp (ms from the start of the log) to an absolute one.
Rebaser = Callable[[int], int]


@runtime_checkable
class CommandParser(Protocol):
    def initialize(self, config: ParserConfig) -> None: ...

    def parse(self, raw_line: str, rebase: Rebaser) -> AuditReplayCommand: ...
