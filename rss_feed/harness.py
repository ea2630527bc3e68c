"""Minimal assertion-based test runner used by the self-check suite."""

import asyncio
import inspect
import sys
from collections.abc import Callable
from typing import Any, NamedTuple, TextIO

from .logging_config import create_execution_logger


class TestCase(NamedTuple):
    """A registered test case."""

    name: str
    test_fn: Callable[[], Any]


async def _await(awaitable):
    return await awaitable


def _drive(awaitable) -> None:
    """Run ``awaitable`` to completion on a fresh event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(_await(awaitable))
        return

    if inspect.iscoroutine(awaitable):
        awaitable.close()
    raise RuntimeError(
        "Async test case cannot run inside a running event loop; "
        "call run() from synchronous code"
    )


class TestRunner:
    """Registers named test cases and runs them one at a time."""

    __test__ = False

    def __init__(self, stream: TextIO | None = None, execution_id: str | None = None):
        """Initialize the runner.

        Args:
            stream: Where status lines are written; defaults to stdout
            execution_id: Execution ID for logging context
        """
        self.tests: list[TestCase] = []
        self.passed = 0
        self.failed = 0
        self.errors: list[tuple[str, str]] = []
        self.stream = stream
        self.logger = create_execution_logger("test_runner", execution_id)

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream or sys.stdout)

    def test(self, name: str, test_fn: Callable[[], Any]) -> None:
        """Register a test case. Duplicate names are kept."""
        self.tests.append(TestCase(name, test_fn))

    def run(self) -> bool:
        """Run every registered case in registration order.

        A case returning an awaitable is driven to completion before the
        next one starts. Async cases fail when run() is called from inside
        a running event loop. Failures are counted and never stop the run.

        Returns:
            True if no case failed
        """
        self.logger.log_execution_start(test_count=len(self.tests))
        self._write("Running tests...\n")

        for case in self.tests:
            try:
                result = case.test_fn()
                if inspect.isawaitable(result):
                    _drive(result)
            except Exception as e:
                self.failed += 1
                self.errors.append((case.name, str(e)))
                self._write(f"✗ {case.name}")
                self._write(f"  Error: {e}\n")
                self.logger.warning(
                    f"Test failed: {case.name}", test_name=case.name, error=str(e)
                )
            else:
                self.passed += 1
                self._write(f"✓ {case.name}")

        self._write(f"\nTest Results: {self.passed} passed, {self.failed} failed")
        self.logger.log_execution_end(
            success=self.failed == 0, passed=self.passed, failed=self.failed
        )
        return self.failed == 0

    def assert_(self, condition: Any, message: str | None = None) -> None:
        if not condition:
            raise AssertionError(message or "Assertion failed")

    def assert_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Fail unless ``actual`` and ``expected`` have the same type and value."""
        if type(actual) is not type(expected) or actual != expected:
            raise AssertionError(message or f"Expected {expected!r}, got {actual!r}")

    def assert_contains(self, text: str, substring: str, message: str | None = None) -> None:
        if substring not in text:
            raise AssertionError(
                message or f"Expected {text!r} to contain {substring!r}"
            )
