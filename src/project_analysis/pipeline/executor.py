"""Executor running the computation steps of an analysis in order.

Steps run sequentially on the calling thread. Cancellation is checked
between steps, never inside one. Once the pipeline terminates the listener
is told whether every step ran:

    all steps succeeded         -> listener.finished(True)
    a step raised / cancelled   -> listener.finished(False), error re-raised
    cancelled before any step   -> listener skipped, error raised

A listener raising is logged and never hides the pipeline outcome.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Optional, Protocol

from ..exceptions import AnalysisCancelledError
from ..logging_config import get_logger

logger = get_logger(__name__)


class ComputationStep(Protocol):
    description: str

    def execute(self) -> None: ...


class Listener(Protocol):
    def finished(self, all_steps_executed: bool) -> Any: ...


class ComputationStepExecutor:
    def __init__(
        self,
        steps: Iterable[ComputationStep],
        listener: Optional[Listener] = None,
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> None:
        self._steps: tuple[ComputationStep, ...] = tuple(steps)
        self._listener = listener
        self._is_cancelled = is_cancelled or (lambda: False)

    def execute(self) -> None:
        started = False
        try:
            for step in self._steps:
                if self._is_cancelled():
                    raise AnalysisCancelledError(step.description)
                started = True
                self._execute_step(step)
        except Exception:
            if started:
                self._notify_listener(False)
            else:
                logger.info("Analysis cancelled before its first step, listener skipped")
            raise
        self._notify_listener(True)

    def _execute_step(self, step: ComputationStep) -> None:
        start = time.perf_counter()
        try:
            step.execute()
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{step.description} | time={elapsed_ms:.0f}ms")

    def _notify_listener(self, all_steps_executed: bool) -> None:
        if self._listener is None:
            return
        try:
            self._listener.finished(all_steps_executed)
        except Exception:
            logger.error("Execution of computation listener failed", exc_info=True)
