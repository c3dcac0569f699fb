"""Building blocks shared by check routines."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import aiohttp

if TYPE_CHECKING:
    from site_smoke.runner import TestRunner

# Transport failures, timeouts and undecodable bodies (JSONDecodeError and
# UnicodeDecodeError are both ValueError).
REQUEST_ERRORS: tuple[type[Exception], ...] = (
    aiohttp.ClientError,
    TimeoutError,
    ValueError,
)

type Check = Callable[["TestRunner"], Awaitable[None]]


@dataclass(frozen=True, kw_only=True)
class CheckGroup:
    """Checks that run one after another under a common heading."""

    title: str
    checks: Sequence[Check]


def check_name(check: Check) -> str:
    """Name used when a check crashes before recording anything."""
    return getattr(check, "__name__", repr(check))
