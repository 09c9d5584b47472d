# src/qshape/core/utils/benchmarking.py

import time
import logging
from typing import Callable, Dict, List, Optional
from contextlib import contextmanager
from dataclasses import dataclass, field
from statistics import mean, median

logger = logging.getLogger(__name__)


@dataclass
class Timer:
    """Context manager measuring wall-clock time of a block."""

    name: str
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self.end_time = 0.0
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since entering, or the block duration once it has exited."""
        end = self.end_time or time.perf_counter()
        return end - self.start_time


@dataclass
class TimingStats:
    """Accumulated timings of one search stage."""

    name: str
    total_time: float = 0.0
    count: int = 0
    times: List[float] = field(default_factory=list)
    evaluations: int = 0

    def add_timing(self, elapsed: float, evaluations: int = 0) -> None:
        """Record one run of the stage.

        Args:
            elapsed: Duration in seconds
            evaluations: Rotations evaluated during the run
        """
        self.times.append(elapsed)
        self.total_time += elapsed
        self.count += 1
        self.evaluations += evaluations

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    @property
    def evaluations_per_second(self) -> float:
        if self.total_time <= 0:
            return 0.0
        return self.evaluations / self.total_time

    def __str__(self) -> str:
        if not self.count:
            return f"{self.name}: not run"
        text = f"{self.name}: {self.total_time:.3f}s over {self.count} run(s)"
        if self.evaluations:
            text += (
                f", {self.evaluations} evaluations"
                f" ({self.evaluations_per_second:.0f}/s)"
            )
        return text


class PerformanceStats:
    """Per-stage timing collector shared by a search engine."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def get_stats(self, name: str) -> TimingStats:
        return self.stats.setdefault(name, TimingStats(name=name))

    def add_timing(self, name: str, elapsed: float, evaluations: int = 0) -> None:
        self.get_stats(name).add_timing(elapsed, evaluations)

    def totals(self) -> Dict[str, float]:
        """Total seconds spent in each stage."""
        return {name: s.total_time for name, s in self.stats.items()}

    def report(self) -> str:
        """One line per stage with per-run mean and median and its share of the total time."""
        if not self.stats:
            return "No stages timed"

        overall = sum(self.totals().values())
        lines = []
        for stats in self.stats.values():
            share = 100.0 * stats.total_time / overall if overall > 0 else 0.0
            lines.append(
                f"{stats}, mean {stats.avg_time:.4f}s, median {stats.median_time:.4f}s"
                f" [{share:.1f}%]"
            )
        return "\n".join(lines)


@contextmanager
def timer(
    name: str,
    stats: Optional[PerformanceStats] = None,
    evaluations: Optional[Callable[[], int]] = None,
):
    """Time a stage and record it in ``stats``.

    ``evaluations`` is read when the block exits, so it can report how many
    rotations the stage evaluated.
    """
    with Timer(name) as t:
        yield t
    if stats is not None:
        stats.add_timing(name, t.elapsed(), evaluations() if evaluations else 0)
    logger.debug("%s took %.4fs", name, t.elapsed())
