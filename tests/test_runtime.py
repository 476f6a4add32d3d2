"""
Tests for ERDKIT runtime primitives.
"""

import threading
import time
import pytest

from erdkit.core.runtime import ProgressMonitor, TaskResult, TaskRunner


class TestProgressMonitor:
    """Test cases for ProgressMonitor."""

    def test_cancel(self):
        """Test cancellation state."""
        monitor = ProgressMonitor()
        assert monitor.is_canceled() is False
        monitor.cancel()
        assert monitor.is_canceled() is True

    def test_progress(self):
        """Test task progress bookkeeping."""
        monitor = ProgressMonitor()
        monitor.begin_task("Collect", 4)
        monitor.sub_task("Read sales")
        monitor.worked(2)

        assert monitor.task_name == "Collect"
        assert monitor.sub_task_name == "Read sales"
        assert monitor.work_done == 2

        monitor.done()
        assert monitor.sub_task_name is None
        assert monitor.work_done == 4


class TestTaskRunner:
    """Test cases for TaskRunner."""

    def test_run_returns_value(self, config):
        """Test a successful task."""
        with TaskRunner(config=config) as runner:
            result = runner.run(lambda monitor: [1, 2, 3])

        assert isinstance(result, TaskResult)
        assert result.ok
        assert result.value == [1, 2, 3]
        assert result.canceled is False

    def test_run_captures_errors(self, config):
        """Test that task exceptions are returned, not raised."""
        def failing(monitor):
            raise ValueError("boom")

        with TaskRunner(config=config) as runner:
            result = runner.run(failing)

        assert not result.ok
        assert isinstance(result.error, ValueError)
        assert result.value is None

    def test_runs_off_calling_thread(self, config):
        """Test that work executes on a worker thread."""
        with TaskRunner(config=config) as runner:
            result = runner.run(lambda monitor: threading.current_thread().name)

        assert result.value.startswith("erdkit-task")

    def test_submit_returns_future(self, config):
        """Test polling a submitted task."""
        monitor = ProgressMonitor()
        with TaskRunner(config=config) as runner:
            future = runner.submit(lambda m: m is monitor, monitor)
            result = future.result(timeout=5)

        assert result.value is True

    def test_timeout_cancels_and_returns_partial(self, config):
        """Test that a timed out task is canceled and its partial result kept."""
        def slow(monitor):
            steps = 0
            while not monitor.is_canceled():
                steps += 1
                time.sleep(0.01)
            return steps

        with TaskRunner(config=config) as runner:
            result = runner.run(slow, timeout=0.05)

        assert result.canceled is True
        assert result.ok
        assert result.value >= 1

    def test_max_workers_from_config(self, config):
        """Test worker count configuration."""
        config.set("runtime.max_workers", 3)
        runner = TaskRunner(config=config)
        try:
            assert runner.max_workers == 3
        finally:
            runner.shutdown()


if __name__ == "__main__":
    pytest.main([__file__])
