"""Parses audit commands exported by a Hive query into delimited text files.

Each line holds six fields separated by the start-of-heading (U+0001)
character, in order::

    relativeTimestampMs, ugi, command, src, dest, sourceIP

relativeTimestampMs is the time elapsed between the start of the audit log
and the event. Such an export can be produced with a query like::

    INSERT OVERWRITE DIRECTORY '${outputPath}'
    SELECT (timestamp - ${startTimestamp}) AS relativeTimestamp, ugi, cmd, src, dst, ip
    FROM '${auditLogTableLocation}'
    WHERE timestamp >= ${startTimestamp} AND timestamp < ${endTimestamp}
    DISTRIBUTE BY src
    SORT BY relativeTimestamp ASC;

Events within each output file must be in ascending time order; that is the
reader's concern, not checked here.
"""

import re

from auditreplay.base import Rebaser
from auditreplay.config import ParserConfig
from auditreplay.errors import CommandFormatError
from auditreplay.models import AuditReplayCommand

FIELD_SEPARATOR = "\u0001"
FIELD_COUNT = 6

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def parse_relative_timestamp(value: str, line: str = "") -> int:
    """Parse a base-10 integer timestamp field, rejecting blanks and padding."""
    if not _TIMESTAMP_RE.fullmatch(value):
        raise CommandFormatError(f"Invalid relative timestamp: {value!r}", line)
    return int(value)


class HiveTableParser:
    def initialize(self, config: ParserConfig) -> None:
        # Nothing to set up
        pass

    def parse(self, raw_line: str, rebase: Rebaser) -> AuditReplayCommand:
        fields = raw_line.split(FIELD_SEPARATOR)
        if len(fields) != FIELD_COUNT:
            raise CommandFormatError(
                f"Expected {FIELD_COUNT} fields, found {len(fields)}", raw_line
            )

        relative = parse_relative_timestamp(fields[0], raw_line)
        return AuditReplayCommand(
            absolute_timestamp=rebase(relative),
            user_group_info=fields[1],
            command=fields[2],
            source=fields[3],
            destination=fields[4],
            source_address=fields[5],
        )
