"""Shared pytest fixtures for the audit replay parser test suite."""

import pytest

from auditreplay.config import ParserConfig
from auditreplay.direct_parser import DirectParser
from auditreplay.hive_table_parser import HiveTableParser

# 2017-01-01 00:00:00 UTC
LOG_START_MS = 1_483_228_800_000


@pytest.fixture()
def identity():
    return lambda t: t


@pytest.fixture()
def hive_parser() -> HiveTableParser:
    parser = HiveTableParser()
    parser.initialize(ParserConfig())
    return parser


@pytest.fixture()
def direct_config() -> ParserConfig:
    return ParserConfig(command_parser="direct", log_start_time_ms=LOG_START_MS)


@pytest.fixture()
def direct_parser(direct_config) -> DirectParser:
    parser = DirectParser()
    parser.initialize(direct_config)
    return parser
