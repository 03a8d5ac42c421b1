"""Pytest configuration & custom summary hook.

Also ensures the project root is on sys.path so 'import bigoh' works without install.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, List

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


class FakeClock:
    """Clock returning consecutive laps of known length.

    ``laps`` are consumed two readings at a time (start, finish), which is how
    ``TimingHarness.time_once`` reads the clock.
    """

    def __init__(self, laps: List[float]):
        self.laps = list(laps)
        self._readings = self._generate()

    def _generate(self) -> Iterator[float]:
        now = 100.0
        for lap in self.laps:
            yield now
            now += lap
            yield now
            now += 1.0

    def __call__(self) -> float:
        return next(self._readings)


@pytest.fixture
def fake_clock():
    return FakeClock


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(
        f"Passed: {passed} | Failed: {failed} | Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
