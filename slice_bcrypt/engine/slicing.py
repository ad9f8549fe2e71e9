"""
Slice Controller
================
Runs expansion iterations in batches, measuring wall-clock time so that a
single resumption stays within its time budget.

The batch size adapts between resumptions: if the last invocation used
more than its budget the next batch shrinks in proportion, otherwise it
keeps the amount of work that fit.
"""

import time
from typing import Callable, Optional, Tuple

import structlog

from .models import SliceOutcome
from ..config import get_config

logger = structlog.get_logger(__name__)


def calc_percent(total: int, start: float, stop: float, budget: float) -> Tuple[int, int]:
    """
    Convert elapsed time into a percentage of the budget.

    Args:
        total: Running (unclamped) percentage for this invocation
        start: Clock reading before the batch
        stop: Clock reading after the batch
        budget: Budget in seconds

    Returns:
        Tuple of (percentage clamped into [1, 100], updated total)
    """
    elapsed_us = round((stop - start) * 1_000_000)
    budget_us = max(1, round(budget * 1_000_000))
    pct = elapsed_us * 100 // budget_us
    total += pct

    if pct > 100:
        return 100, total
    if pct <= 0:
        return 1, total
    return pct, total


def adjust_batch_size(total: int, done: int) -> int:
    """
    Batch size for the next resumption, given how much fit into this one.

    Args:
        total: Unclamped percentage of the budget spent this invocation
        done: Iterations executed this invocation

    Returns:
        New batch size, never below 1
    """
    m = total // 100

    if m == 0:
        batch = done
    elif m == 1:
        batch = done - (done * (total - 100)) // 100
    else:
        batch = done // m
    return max(1, batch)


class Timeslice:
    """
    Per-invocation budget accounting.

    Mirrors a cooperative scheduler's timeslice: callers report the share
    of the slice they used and learn when it is gone.
    """

    def __init__(self):
        self.consumed = 0

    def consume(self, pct: int) -> bool:
        """Record `pct` percent of the slice; True once 100% is used."""
        self.consumed += pct
        return self.consumed >= 100


class SliceController:
    """Drives expansion iterations within a time budget."""

    def __init__(
        self,
        budget_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.perf_counter,
        timeslice_factory: Callable[[], Timeslice] = Timeslice,
    ):
        if budget_seconds is None:
            budget_seconds = get_config().slice_budget_seconds
        if budget_seconds <= 0:
            raise ValueError("budget_seconds must be positive")
        self.budget_seconds = budget_seconds
        self.clock = clock
        self.timeslice_factory = timeslice_factory

    def run(
        self,
        step: Callable[[], None],
        progress: int,
        rounds: int,
        batch_size: int,
    ) -> SliceOutcome:
        """
        Execute iterations until the job finishes or the slice is used up.

        Args:
            step: Executes exactly one iteration
            progress: Iterations already completed
            rounds: Total iterations required
            batch_size: Iterations to attempt before the first measurement

        Returns:
            SliceOutcome with the new progress and batch size
        """
        if not 0 <= progress < rounds:
            raise ValueError("progress must be in [0, rounds)")
        batch_size = max(1, batch_size)

        start_index = progress
        k = progress
        end = min(k + batch_size, rounds)
        total = 0
        timeslice = self.timeslice_factory()

        while True:
            start = self.clock()
            while k < end:
                step()
                k += 1
            if k == rounds:
                return SliceOutcome(
                    progress=k,
                    batch_size=batch_size,
                    finished=True,
                    iterations=k - start_index,
                )
            stop = self.clock()

            pct, total = calc_percent(total, start, stop, self.budget_seconds)
            if timeslice.consume(pct):
                batch_size = adjust_batch_size(total, k - start_index)
                logger.debug(
                    "bcrypt_slice_exhausted",
                    progress=k,
                    rounds=rounds,
                    total_pct=total,
                    next_batch=batch_size,
                )
                return SliceOutcome(
                    progress=k,
                    batch_size=batch_size,
                    finished=False,
                    iterations=k - start_index,
                )

            end = min(end + batch_size, rounds)
