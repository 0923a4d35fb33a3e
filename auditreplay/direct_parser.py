"""Parses raw HDFS NameNode audit log lines.

Expected line shape (fields after the colon are tab separated)::

    2017-01-01 00:00:00,123 INFO FSNamesystem.audit: allowed=true\tugi=hdfs (auth:SIMPLE)\tip=/10.0.0.1\tcmd=rename\tsrc=/a\tdst=/b\tperm=null\tproto=rpc

Audit log timestamps are absolute, so ``log_start_time_ms`` must be
configured to turn them into relative offsets before rebasing.
"""

import logging
import re
from datetime import datetime, timedelta, timezone

from auditreplay.base import Rebaser
from auditreplay.config import ParserConfig
from auditreplay.errors import CommandFormatError, ParserInitializationError
from auditreplay.models import AuditReplayCommand

logger = logging.getLogger(__name__)

_MESSAGE_ONLY_RE = re.compile(r"^([0-9-]+ [0-9:,]+) [^:]+: (.+)$")

AUDIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S,%f"
# strptime %f takes 1-6 digits; audit logs always write exactly 3
_AUDIT_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}")
REQUIRED_KEYS = ("ugi", "cmd", "src", "dst", "ip")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def audit_time_to_epoch_ms(time_str: str) -> int:
    """Convert '2017-01-01 00:00:00,123' (UTC) → milliseconds since epoch."""
    if not _AUDIT_TIME_RE.fullmatch(time_str):
        raise ValueError(f"Expected yyyy-MM-dd HH:mm:ss,SSS, got {time_str!r}")
    dt = datetime.strptime(time_str, AUDIT_DATE_FORMAT).replace(tzinfo=timezone.utc)
    return (dt - _EPOCH) // _ONE_MS


def split_audit_message(message: str) -> dict[str, str]:
    """Split 'k1=v1\\tk2=v2' into a dict, skipping blank entries."""
    # Rename options look like "(options=[...])"; keep that '=' out of the split
    sanitized = message.replace("(options=", "(options:")
    params = {}
    for entry in sanitized.split("\t"):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        if not sep:
            raise CommandFormatError(f"Audit field without '=': {entry!r}", message)
        params[key.strip()] = value.strip()
    return params


class DirectParser:
    def __init__(self):
        self._start_timestamp = -1

    def initialize(self, config: ParserConfig) -> None:
        start = getattr(config, "log_start_time_ms", -1)
        if start is None or start < 0:
            raise ParserInitializationError(
                f"Invalid or missing audit start timestamp: {start}"
            )
        self._start_timestamp = start
        logger.info("Direct audit parser using log start time %d ms", start)

    def parse(self, raw_line: str, rebase: Rebaser) -> AuditReplayCommand:
        if self._start_timestamp < 0:
            raise ParserInitializationError("DirectParser used before initialize()")

        m = _MESSAGE_ONLY_RE.match(raw_line)
        if not m:
            raise CommandFormatError(
                "Unable to find valid message pattern in audit log line", raw_line
            )

        try:
            relative = audit_time_to_epoch_ms(m.group(1)) - self._start_timestamp
        except ValueError as exc:
            raise CommandFormatError(
                f"Invalid audit timestamp: {m.group(1)!r}", raw_line
            ) from exc

        params = split_audit_message(m.group(2))
        missing = [k for k in REQUIRED_KEYS if k not in params]
        if missing:
            raise CommandFormatError(
                f"Missing audit fields: {', '.join(missing)}", raw_line
            )

        ugi_parts = params["ugi"].split()
        return AuditReplayCommand(
            absolute_timestamp=rebase(relative),
            # Drop the "(auth:...)" and "via proxy" parts of the UGI
            user_group_info=ugi_parts[0] if ugi_parts else "",
            command=params["cmd"],
            source=params["src"],
            destination=params["dst"],
            source_address=params["ip"].removeprefix("/"),
        )
