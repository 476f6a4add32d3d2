"""
ERDKIT Runtime

This module provides the execution primitives for diagram collection:
- ProgressMonitor: cancellation token polled by long-running work
- TaskRunner: runs work off the calling thread and returns a TaskResult
"""

import concurrent.futures
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import Config
from .logger import Logger


class ProgressMonitor:
    """
    Cancellation and progress handle shared between a caller and a task.

    Cancellation is cooperative: work polls is_canceled() and returns early.
    """

    def __init__(self):
        self._canceled = threading.Event()
        self.task_name: Optional[str] = None
        self.sub_task_name: Optional[str] = None
        self.total_work = 0
        self.work_done = 0

    def is_canceled(self) -> bool:
        return self._canceled.is_set()

    def cancel(self) -> None:
        self._canceled.set()

    def begin_task(self, name: str, total_work: int = 0) -> None:
        self.task_name = name
        self.total_work = total_work
        self.work_done = 0

    def sub_task(self, name: str) -> None:
        self.sub_task_name = name

    def worked(self, amount: int = 1) -> None:
        self.work_done += amount

    def done(self) -> None:
        self.sub_task_name = None
        if self.total_work:
            self.work_done = self.total_work


@dataclass
class TaskResult:
    """Outcome of one task: a value or the error it raised."""
    value: Any = None
    error: Optional[BaseException] = None
    canceled: bool = False
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class TaskRunner:
    """
    Background task runner.

    Work is a callable taking a ProgressMonitor. Exceptions raised by the work
    are captured in the TaskResult instead of propagating to the caller.
    """

    def __init__(self, max_workers: Optional[int] = None, config: Optional[Config] = None):
        """Initialize the runner."""
        self.config = config or Config()
        self.logger = Logger("task_runner", config=self.config)
        self.max_workers = max_workers or self.config.get("runtime.max_workers", 1) or 1
        self.default_timeout = self.config.get("runtime.task_timeout")
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="erdkit-task"
        )

    def submit(self, work: Callable[[ProgressMonitor], Any],
               monitor: Optional[ProgressMonitor] = None) -> "concurrent.futures.Future[TaskResult]":
        """
        Schedule work and return a future resolving to its TaskResult.

        Args:
            work: Callable receiving the monitor
            monitor: Cancellation handle (a new one is created if omitted)

        Returns:
            Future: Completes with a TaskResult, never with an exception
        """
        monitor = monitor or ProgressMonitor()
        return self._executor.submit(self._execute, work, monitor)

    def run(self, work: Callable[[ProgressMonitor], Any],
            monitor: Optional[ProgressMonitor] = None,
            timeout: Optional[float] = None) -> TaskResult:
        """
        Run work in the background and wait for its result.

        On timeout the monitor is canceled and the partial result the work
        returns after noticing the cancellation is reported as canceled.
        """
        monitor = monitor or ProgressMonitor()
        timeout = timeout if timeout is not None else self.default_timeout
        future = self.submit(work, monitor)
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            self.logger.warning(f"Task exceeded {timeout}s, canceling")
            monitor.cancel()
            result = future.result()
            result.canceled = True
            return result

    def _execute(self, work: Callable[[ProgressMonitor], Any], monitor: ProgressMonitor) -> TaskResult:
        start_time = time.time()
        try:
            value = work(monitor)
        except Exception as e:
            return TaskResult(
                error=e,
                canceled=monitor.is_canceled(),
                elapsed=time.time() - start_time
            )
        return TaskResult(
            value=value,
            canceled=monitor.is_canceled(),
            elapsed=time.time() - start_time
        )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "TaskRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
