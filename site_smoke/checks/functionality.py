"""Website content checks."""

from typing import TYPE_CHECKING

from site_smoke.checks.base import REQUEST_ERRORS

if TYPE_CHECKING:
    from site_smoke.runner import TestRunner


async def check_website_content(runner: "TestRunner") -> None:
    """Website HTML contains every configured content marker.

    The partial score is always reported, the check passes only on a full
    score.
    """
    name = "Functionality: Website"
    markers = runner.config.content_markers
    try:
        async with runner.session.get(runner.config.website_url) as response:
            html = await response.text(errors="replace")
    except REQUEST_ERRORS as exc:
        runner.record(name, False, f"Website functionality test failed: {exc}")
        return

    missing = [marker.name for marker in markers if not marker.found_in(html)]
    score = len(markers) - len(missing)
    runner.record(
        name,
        not missing,
        f"Website functionality check: {score}/{len(markers)} elements found",
        {"missing": missing} if missing else None,
    )
