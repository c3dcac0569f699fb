"""Response time checks."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from site_smoke.checks.base import REQUEST_ERRORS
from site_smoke.config import SuiteConfig

if TYPE_CHECKING:
    from site_smoke.runner import TestRunner


def timed_endpoints(config: SuiteConfig) -> Sequence[tuple[str, str]]:
    """Labels and URLs of the website and every API endpoint."""
    return [
        ("Website", config.website_url),
        *(
            (f"{endpoint} API", config.api_url(endpoint))
            for endpoint in config.api_endpoints
        ),
    ]


async def check_response_times(runner: "TestRunner") -> None:
    """Each endpoint answers under the latency threshold.

    Latency is measured until response headers arrive. One result is
    recorded per endpoint and a failing endpoint does not stop the loop.
    """
    threshold_ms = runner.config.latency_threshold_ms

    for label, url in timed_endpoints(runner.config):
        name = f"Performance: {label}"
        try:
            started = runner.clock()
            async with runner.session.get(url):
                elapsed_ms = round((runner.clock() - started) * 1000)
        except REQUEST_ERRORS as exc:
            runner.record(name, False, f"Failed to test response time: {exc}")
            continue

        fast = elapsed_ms < threshold_ms
        runner.record(
            name,
            fast,
            f"Response time: {elapsed_ms}ms {'(Good)' if fast else '(Slow)'}",
        )
