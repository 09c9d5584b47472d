"""Throttled progress reporting for the rotation search."""

import logging
import queue
from typing import Callable, Optional, Union

from ..domain.models.progress_event import ProgressEvent

logger = logging.getLogger(__name__)

ProgressSink = Union[Callable[[ProgressEvent], None], "queue.Queue[ProgressEvent]"]

# Report every N evaluations per stage
UPDATE_FREQUENCY = {
    "Seed Alignments": 5,
    "Key Orientations": 6,
    "Grid Search": 50,
    "Polish": 16,
    "Annealing": 500,
    "Refinement": 500,
    "Flexible Scaling": 100,
}
DEFAULT_UPDATE_FREQUENCY = 100


class ProgressReporter:
    """
    Forward throttled ProgressEvents to a callable or a bounded queue.

    Queue sinks never block the search: when the queue is full the event is
    dropped. Events at the start and end of a stage are always sent.
    """

    def __init__(self, sink: Optional[ProgressSink] = None):
        self._sink = sink
        self.dropped = 0

    @property
    def enabled(self) -> bool:
        return self._sink is not None

    def report(
        self,
        stage: str,
        current: int,
        total: int,
        best_so_far: float,
        force: bool = False,
    ) -> None:
        """Send an event unless it is throttled away."""
        if not self.enabled:
            return
        frequency = UPDATE_FREQUENCY.get(stage, DEFAULT_UPDATE_FREQUENCY)
        if not force and current != 0 and current != total and current % frequency:
            return
        self._emit(ProgressEvent(stage, int(current), int(total), float(best_so_far)))

    def _emit(self, event: ProgressEvent) -> None:
        if isinstance(self._sink, queue.Queue):
            try:
                self._sink.put_nowait(event)
            except queue.Full:
                self.dropped += 1
        else:
            self._sink(event)
