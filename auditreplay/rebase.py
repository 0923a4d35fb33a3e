"""Builds rebasing functions that map relative log offsets onto replay time."""

from auditreplay.base import Rebaser
from auditreplay.config import ParserConfig


def make_rebaser(start_ms: int, rate_factor: float = 1.0) -> Rebaser:
    """Return ``rebase(relative) -> start_ms + relative / rate_factor``.

    A rate_factor above 1.0 compresses the replay (events arrive sooner),
    below 1.0 stretches it. With the default of 1.0 the mapping is plain
    integer addition.

    Raises:
        ValueError: If rate_factor is not positive.
    """
    if rate_factor <= 0:
        raise ValueError(f"rate_factor must be positive, got {rate_factor}")

    if rate_factor == 1.0:
        def rebase(relative: int) -> int:
            return start_ms + relative
    else:
        def rebase(relative: int) -> int:
            return start_ms + int(relative / rate_factor)

    return rebase


def make_rebaser_from_config(config: ParserConfig, start_ms: int) -> Rebaser:
    return make_rebaser(start_ms, config.rate_factor)
