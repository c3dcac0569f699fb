"""Check routines and the default run order."""

from collections.abc import Sequence

from site_smoke.checks.api import (
    check_britedge_info,
    check_customers,
    check_json_responses,
    check_testimonials,
)
from site_smoke.checks.base import Check, CheckGroup
from site_smoke.checks.functionality import check_website_content
from site_smoke.checks.performance import check_response_times
from site_smoke.checks.security import (
    check_cors,
    check_https,
    check_security_headers,
)


def default_check_groups() -> Sequence[CheckGroup]:
    """API, security, performance then functionality checks."""
    return (
        CheckGroup(
            title="📡 Testing APIs...",
            checks=(
                check_britedge_info,
                check_testimonials,
                check_customers,
                check_json_responses,
            ),
        ),
        CheckGroup(
            title="🔒 Testing Security...",
            checks=(check_security_headers, check_https, check_cors),
        ),
        CheckGroup(
            title="⚡ Testing Performance...",
            checks=(check_response_times,),
        ),
        CheckGroup(
            title="🎯 Testing Functionality...",
            checks=(check_website_content,),
        ),
    )


__all__ = ["Check", "CheckGroup", "default_check_groups"]
