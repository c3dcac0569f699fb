"""Checks for the JSON endpoints of the API under test."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from site_smoke.checks.base import REQUEST_ERRORS
from site_smoke.models.base import Model
from site_smoke.models.payloads import (
    BritEdgeInfo,
    CustomersResponse,
    TestimonialsResponse,
)
from site_smoke.validation import validate_payload

if TYPE_CHECKING:
    from site_smoke.runner import TestRunner

log = logging.getLogger(__name__)


async def check_britedge_info(runner: "TestRunner") -> None:
    """Company info carries a name, an employee count and locations."""
    await _check_contract(
        runner,
        endpoint="GetBritEdgeInfo",
        model=BritEdgeInfo,
        invalid_message="Invalid response structure",
        describe=lambda info: (
            f"Valid company data returned ({info.stats.total_employees} employees, "
            f"{len(info.locations)} locations)"
        ),
    )


async def check_testimonials(runner: "TestRunner") -> None:
    """Testimonials list is non-empty and every entry has a client and rating."""
    await _check_contract(
        runner,
        endpoint="GetTestimonials",
        model=TestimonialsResponse,
        invalid_message="Invalid testimonials structure",
        describe=lambda body: (
            f"{len(body.testimonials)} testimonials returned with valid structure"
        ),
    )


async def check_customers(runner: "TestRunner") -> None:
    """Customers list is non-empty and every entry has an id and company name."""
    await _check_contract(
        runner,
        endpoint="GetCustomers",
        model=CustomersResponse,
        invalid_message="Invalid customers structure",
        describe=lambda body: (
            f"{len(body.customers)} customers returned with valid structure"
        ),
    )


async def check_json_responses(runner: "TestRunner") -> None:
    """Every configured API endpoint returns a JSON object or array.

    Records a single result for the whole endpoint list. Endpoints that fail
    are named in the result data rather than recorded one by one.
    """
    endpoints = runner.config.api_endpoints
    invalid: list[str] = []

    for endpoint in endpoints:
        try:
            async with runner.session.get(runner.config.api_url(endpoint)) as response:
                data = await response.json(content_type=None)
        except REQUEST_ERRORS as exc:
            log.debug("No JSON from %s: %s", endpoint, exc)
            invalid.append(endpoint)
            continue

        if not isinstance(data, dict | list):
            log.debug("Unexpected JSON from %s: %r", endpoint, data)
            invalid.append(endpoint)

    valid = len(endpoints) - len(invalid)
    runner.record(
        "Functionality: JSON APIs",
        not invalid,
        f"{valid}/{len(endpoints)} APIs return valid JSON",
        {"invalid": invalid} if invalid else None,
    )


async def _check_contract[T: Model](
    runner: "TestRunner",
    *,
    endpoint: str,
    model: type[T],
    invalid_message: str,
    describe: Callable[[T], str],
) -> None:
    name = f"API: {endpoint}"
    try:
        async with runner.session.get(runner.config.api_url(endpoint)) as response:
            if response.status != 200:
                runner.record(name, False, f"HTTP {response.status} error")
                return
            payload: Any = await response.json(content_type=None)
    except REQUEST_ERRORS as exc:
        runner.record(name, False, f"Network error: {exc}")
        return

    validation = validate_payload(model, payload)
    if validation.record is None:
        runner.record(
            name,
            False,
            invalid_message,
            {
                "errors": [str(error) for error in validation.errors],
                "payload": payload,
            },
        )
        return

    runner.record(name, True, describe(validation.record))
