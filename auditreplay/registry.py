"""Selects and initializes a command parser variant from configuration."""

import logging

from auditreplay.base import CommandParser
from auditreplay.config import ParserConfig
from auditreplay.direct_parser import DirectParser
from auditreplay.errors import ParserInitializationError
from auditreplay.hive_table_parser import HiveTableParser

logger = logging.getLogger(__name__)

PARSERS: dict[str, type] = {
    "hive": HiveTableParser,    # U+0001-delimited Hive export
    "direct": DirectParser,     # raw NameNode audit log lines
}


def get_parser_class(name: str) -> type:
    key = (name or "").strip().lower()
    try:
        return PARSERS[key]
    except KeyError:
        raise ParserInitializationError(
            f"Unknown command parser {name!r}; expected one of {sorted(PARSERS)}"
        ) from None


def create_parser(config: ParserConfig) -> CommandParser:
    """Instantiate the parser named by ``config.command_parser`` and initialize it once."""
    parser = get_parser_class(config.command_parser)()
    parser.initialize(config)
    logger.info("Initialized %s command parser", config.command_parser)
    return parser
