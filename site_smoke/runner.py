"""Test runner holding the result log of a smoke test run."""

import logging
import time
from collections.abc import AsyncGenerator, Callable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import aiohttp

from site_smoke.checks import Check, CheckGroup, default_check_groups
from site_smoke.checks.base import check_name
from site_smoke.config import SuiteConfig
from site_smoke.models.result import ResultStatus, Summary, TestResult

log = logging.getLogger(__name__)

STATUS_SYMBOLS: dict[ResultStatus, str] = {
    "PASS": "✅",
    "FAIL": "❌",
}


@dataclass(kw_only=True)
class TestRunner:
    """Runs checks one at a time and keeps their results in order.

    The clock returns seconds and is used both for response time
    measurements and for the elapsed time of the whole run.
    """

    __test__ = False

    config: SuiteConfig
    session: aiohttp.ClientSession = field(repr=False)
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False)
    _results: list[TestResult] = field(default_factory=list, init=False, repr=False)
    started_at: float = field(init=False)

    def __post_init__(self) -> None:
        self.started_at = self.clock()

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls,
        config: SuiteConfig,
        clock: Callable[[], float] = time.perf_counter,
    ) -> AsyncGenerator["TestRunner", None]:
        """Create runner with managed session lifecycle."""
        session_kwargs: dict[str, Any] = {}
        if config.timeout_seconds is not None:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(
                total=config.timeout_seconds
            )
        async with aiohttp.ClientSession(**session_kwargs) as session:
            yield cls(config=config, session=session, clock=clock)

    @property
    def results(self) -> Sequence[TestResult]:
        return tuple(self._results)

    def record(
        self, name: str, passed: bool, message: str, data: Any = None
    ) -> TestResult:
        """Append a result to the log and write it to the output channel."""
        result = TestResult(
            name=name,
            status="PASS" if passed else "FAIL",
            message=message,
            timestamp=datetime.now(timezone.utc),
            data=data,
        )
        self._results.append(result)

        log.info("%s %s: %s", STATUS_SYMBOLS[result.status], name, message)
        if data is not None:
            log.info("  Data: %s", data)
        return result

    async def run_check(self, check: Check) -> None:
        """Run one check; an unexpected exception is recorded as a failure."""
        try:
            await check(self)
        except Exception as exc:
            log.exception("Check %s crashed", check_name(check))
            self.record(check_name(check), False, f"Check crashed: {exc}")

    async def run_all_tests(
        self, groups: Sequence[CheckGroup] | None = None
    ) -> Summary:
        """Run every check group in order, then summarize.

        Args:
            groups: Check groups to run (default: API, security, performance
                and functionality checks)

        Returns:
            Summary of the whole run

        """
        if groups is None:
            groups = default_check_groups()

        log.info("🚀 Starting smoke test suite...")
        for group in groups:
            log.info(group.title)
            for check in group.checks:
                await self.run_check(check)

        return self.generate_summary()

    def generate_summary(self) -> Summary:
        """Aggregate the result log and write the summary report."""
        elapsed_ms = round((self.clock() - self.started_at) * 1000)
        summary = Summary.from_results(self._results, elapsed_ms)
        log_summary(summary)
        return summary


def log_summary(summary: Summary) -> None:
    """Log counts, success rate, elapsed time and every failed result."""
    log.info("=" * 50)
    log.info("📊 TEST SUITE SUMMARY")
    log.info("=" * 50)
    log.info("Total Tests: %d", summary.total)
    log.info("✅ Passed: %d", summary.passed)
    log.info("❌ Failed: %d", summary.failed)
    log.info("📈 Success Rate: %s%%", summary.success_rate)
    log.info("⏱️ Total Time: %dms", summary.execution_time_ms)
    log.info("=" * 50)

    if summary.failed:
        log.info("❌ FAILED TESTS:")
        for result in summary.failed_results:
            log.info("  - %s: %s", result.name, result.message)


async def run_suite(config: SuiteConfig) -> Summary:
    """Run the default checks against the configured deployment."""
    async with TestRunner.from_config(config) as runner:
        return await runner.run_all_tests()
