"""Security checks: response headers, HTTPS and CORS."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from site_smoke.checks.base import REQUEST_ERRORS
from site_smoke.config import HeaderExpectation

if TYPE_CHECKING:
    from site_smoke.runner import TestRunner


def find_header_mismatches(
    expectations: Sequence[HeaderExpectation], headers: Mapping[str, str]
) -> Mapping[str, str | None]:
    """Return the actual value of every header that misses its expectation.

    Args:
        expectations: Headers to verify
        headers: Response headers, looked up by expectation name

    Returns:
        Mismatched header names mapped to the received value (None if absent)

    """
    mismatched: dict[str, str | None] = {}
    for expectation in expectations:
        value = headers.get(expectation.name)
        if not expectation.matches(value):
            mismatched[expectation.name] = value
    return mismatched


async def check_security_headers(runner: "TestRunner") -> None:
    """All configured security headers are served by the website."""
    name = "Security: Headers"
    expectations = runner.config.security_headers
    try:
        async with runner.session.get(runner.config.website_url) as response:
            mismatched = find_header_mismatches(expectations, response.headers)
    except REQUEST_ERRORS as exc:
        runner.record(name, False, f"Error checking headers: {exc}")
        return

    matched = len(expectations) - len(mismatched)
    runner.record(
        name,
        not mismatched,
        f"{matched}/{len(expectations)} security headers correctly configured",
        {"mismatched": dict(mismatched)} if mismatched else None,
    )


async def check_https(runner: "TestRunner") -> None:
    """Website URL uses the https scheme. No request is made."""
    uses_https = runner.config.website_url.startswith("https://")
    runner.record(
        "Security: HTTPS",
        uses_https,
        "Website uses HTTPS encryption" if uses_https else "Website not using HTTPS",
    )


async def check_cors(runner: "TestRunner") -> None:
    """API allows either any origin or exactly the website origin."""
    name = "Security: CORS"
    try:
        async with runner.session.get(
            runner.config.api_url(runner.config.cors_endpoint)
        ) as response:
            allowed_origin = response.headers.get("Access-Control-Allow-Origin")
    except REQUEST_ERRORS as exc:
        runner.record(name, False, f"CORS test failed: {exc}")
        return

    configured = allowed_origin in ("*", runner.config.website_url)
    runner.record(
        name,
        configured,
        f"CORS properly configured: {allowed_origin}"
        if configured
        else "CORS not configured correctly",
    )
