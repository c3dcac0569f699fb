"""Tests for the test runner."""

import asyncio
import logging
from unittest.mock import Mock

import aiohttp
import pytest

from site_smoke.checks import Check, CheckGroup
from site_smoke.config import SuiteConfig
from site_smoke.runner import TestRunner


@pytest.fixture
def clock() -> Mock:
    """Create a clock that advances 0.25s on every reading."""
    readings = iter(step * 0.25 for step in range(1000))
    return Mock(side_effect=lambda: next(readings))


@pytest.fixture
def runner(clock: Mock) -> TestRunner:
    """Create runner with a mock session."""
    return TestRunner(
        config=SuiteConfig(),
        session=Mock(spec=aiohttp.ClientSession),
        clock=clock,
    )


class TestRecord:
    """Tests for record."""

    def test_appends_results_in_order(self, runner: TestRunner) -> None:
        """Results are kept in insertion order with their status."""
        runner.record("first", True, "ok")
        runner.record("second", False, "broken", {"status": 500})

        assert [(r.name, r.status) for r in runner.results] == [
            ("first", "PASS"),
            ("second", "FAIL"),
        ]
        assert runner.results[1].data == {"status": 500}

    def test_timestamps_do_not_decrease(self, runner: TestRunner) -> None:
        """Each result is stamped when recorded."""
        for index in range(5):
            runner.record(f"check {index}", True, "ok")

        timestamps = [result.timestamp for result in runner.results]
        assert timestamps == sorted(timestamps)
        assert all(ts.tzinfo is not None for ts in timestamps)

    def test_results_view_is_read_only(self, runner: TestRunner) -> None:
        """The exposed log cannot be appended to."""
        runner.record("first", True, "ok")

        assert isinstance(runner.results, tuple)

    def test_logs_result_line(
        self, runner: TestRunner, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Writes icon, name and message, then data when present."""
        with caplog.at_level(logging.INFO):
            runner.record("Security: HTTPS", True, "Website uses HTTPS encryption")
            runner.record("API: GetCustomers", False, "Invalid", {"customers": []})

        assert "✅ Security: HTTPS: Website uses HTTPS encryption" in caplog.text
        assert "❌ API: GetCustomers: Invalid" in caplog.text
        assert "Data: {'customers': []}" in caplog.text


class TestGenerateSummary:
    """Tests for generate_summary."""

    def test_summarizes_log(self, runner: TestRunner) -> None:
        """Counts results and measures time since construction."""
        runner.record("a", True, "ok")
        runner.record("b", False, "nope")
        runner.record("c", True, "ok")

        summary = runner.generate_summary()

        assert summary.total == 3
        assert summary.passed == 2
        assert summary.failed == 1
        assert summary.success_rate == "66.7"
        # started at 0.0s, summarized at the next reading
        assert summary.execution_time_ms == 250

    def test_is_idempotent(self, runner: TestRunner) -> None:
        """Summarizing twice yields the same counts."""
        runner.record("a", True, "ok")
        runner.record("b", False, "nope")

        first = runner.generate_summary()
        second = runner.generate_summary()

        assert (first.total, first.passed, first.failed, first.success_rate) == (
            second.total,
            second.passed,
            second.failed,
            second.success_rate,
        )
        assert len(runner.results) == 2

    def test_empty_log(self, runner: TestRunner) -> None:
        """An empty run summarizes without error."""
        summary = runner.generate_summary()

        assert summary.total == 0
        assert summary.success_rate == "0.0"

    def test_logs_failed_tests_in_order(
        self, runner: TestRunner, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Lists every failed result after the counts."""
        runner.record("first", False, "one")
        runner.record("ok", True, "fine")
        runner.record("second", False, "two")

        with caplog.at_level(logging.INFO):
            runner.generate_summary()

        assert "TEST SUITE SUMMARY" in caplog.text
        assert "Total Tests: 3" in caplog.text
        assert "Success Rate: 33.3%" in caplog.text
        assert "FAILED TESTS:" in caplog.text
        assert caplog.text.index("- first: one") < caplog.text.index("- second: two")
        assert "- ok: fine" not in caplog.text


class TestRunAllTests:
    """Tests for run_all_tests."""

    async def test_runs_groups_sequentially(self, runner: TestRunner) -> None:
        """Each check completes before the next one starts."""
        events: list[str] = []

        def make_check(label: str) -> Check:
            async def check(impl: TestRunner) -> None:
                events.append(f"start {label}")
                await asyncio.sleep(0)
                events.append(f"end {label}")
                impl.record(label, True, "ok")

            return check

        groups = [
            CheckGroup(title="one", checks=(make_check("a"), make_check("b"))),
            CheckGroup(title="two", checks=(make_check("c"),)),
        ]

        summary = await runner.run_all_tests(groups)

        assert events == [
            "start a",
            "end a",
            "start b",
            "end b",
            "start c",
            "end c",
        ]
        assert summary.total == 3
        assert summary.failed == 0

    async def test_crashing_check_does_not_stop_run(self, runner: TestRunner) -> None:
        """An unexpected exception is recorded and later checks still run."""

        async def check_broken(impl: TestRunner) -> None:
            raise KeyError("boom")

        async def check_fine(impl: TestRunner) -> None:
            impl.record("fine", True, "ok")

        summary = await runner.run_all_tests(
            [CheckGroup(title="group", checks=(check_broken, check_fine))]
        )

        assert [r.name for r in runner.results] == ["check_broken", "fine"]
        assert runner.results[0].status == "FAIL"
        assert "Check crashed" in runner.results[0].message
        assert summary.failed == 1

    async def test_empty_groups(self, runner: TestRunner) -> None:
        """Running no checks produces an empty summary."""
        summary = await runner.run_all_tests([])

        assert summary.total == 0
