"""Search budgets and annealing constants for each optimization mode."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..exceptions import InvalidInputError


class SearchMode(str, Enum):
    """Thoroughness of the rotation search."""

    FAST = "fast"
    DEFAULT = "default"
    INTENSIVE = "intensive"

    @classmethod
    def parse(cls, mode: Union[str, "SearchMode"]) -> "SearchMode":
        if isinstance(mode, cls):
            return mode
        try:
            return cls(str(mode).lower())
        except ValueError as e:
            choices = ", ".join(m.value for m in cls)
            raise InvalidInputError(
                f"Unknown search mode '{mode}' (expected one of {choices})"
            ) from e


@dataclass(frozen=True)
class SearchParameters:
    """Parameters of the multi-stage rotation search.

    Grid search samples every ``grid_stride``-th of ``grid_steps`` angles per
    Euler axis. Annealing temperatures cool geometrically from
    ``initial_temperature`` to ``min_temperature`` over ``steps_per_restart``.
    The ``polish_candidates`` lowest-measure rotations from the seeds, key
    orientations and grid are polished by up to ``polish_iterations`` rounds
    of reassignment and Kabsch superposition.
    The ``scaling_*`` fields drive the annealing of the three principal-axis
    scale factors of the flexible measure, each bounded by ``min_scale`` and
    ``max_scale``.
    """

    grid_steps: int = 18
    grid_stride: int = 3
    num_restarts: int = 6
    steps_per_restart: int = 3000
    initial_temperature: float = 20.0
    refinement_steps: int = 2000
    polish_candidates: int = 256
    polish_iterations: int = 30

    min_temperature: float = 0.001
    step_size_factor: float = 0.12
    step_size_randomness: float = 0.2

    refinement_initial_temperature: float = 3.0
    refinement_step_size_factor: float = 0.02
    refinement_decay: float = 0.999
    no_improvement_limit: int = 500

    early_exit_after_key_orientations: float = 0.01
    early_exit_after_grid: Optional[float] = 0.05
    early_exit_during_run: float = 0.001
    early_exit_after_annealing: float = 0.01
    early_exit_during_refinement: float = 0.01

    scaling_restarts: int = 3
    scaling_iterations: int = 1000
    scaling_initial_temperature: float = 0.5
    scaling_cooling_rate: float = 0.94
    min_scale: float = 0.4
    max_scale: float = 2.5

    optimal_scaling: bool = False
    cancel_check_interval: int = 256

    @classmethod
    def for_mode(cls, mode: Union[str, SearchMode]) -> "SearchParameters":
        """Preset parameters for ``mode``."""
        return _PRESETS[SearchMode.parse(mode)]

    @property
    def grid_points(self) -> int:
        """Number of rotations evaluated by the grid search."""
        per_axis = len(range(0, self.grid_steps, self.grid_stride))
        return per_axis**3


_PRESETS = {
    SearchMode.FAST: SearchParameters(
        grid_steps=6,
        grid_stride=2,
        num_restarts=1,
        steps_per_restart=100,
        refinement_steps=50,
        polish_candidates=8,
        scaling_restarts=1,
        scaling_iterations=300,
    ),
    SearchMode.DEFAULT: SearchParameters(),
    SearchMode.INTENSIVE: SearchParameters(
        grid_steps=30,
        grid_stride=2,
        num_restarts=12,
        steps_per_restart=8000,
        initial_temperature=30.0,
        refinement_steps=6000,
        polish_candidates=512,
        scaling_restarts=5,
        scaling_iterations=2000,
        scaling_initial_temperature=0.8,
        scaling_cooling_rate=0.96,
        early_exit_after_grid=None,
    ),
}
