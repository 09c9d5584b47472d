"""Progress notifications emitted by the rotation search."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProgressEvent:
    """Snapshot of search progress within one stage."""

    stage: str
    current: int
    total: int
    best_so_far: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage,
            "current": self.current,
            "total": self.total,
            "bestSoFar": self.best_so_far,
        }
