# src/qshape/core/domain/implementations/rotation_search_engine.py
"""
Global search over rotations for the continuous shape measure.

For a candidate rotation R the actual points are rotated, the squared
distance matrix against the reference is built and the optimal assignment
is solved exactly; the measure is 100 * (sum of matched squared distances) / N.
Because the correspondence is unknown, the engine searches rotation and
assignment jointly in stages, each improving a running global best:

1. seed alignments (identity plus caller-supplied rotations)
2. key orientations (axis-aligned and 45/60 degree Euler triples)
3. coarse Euler-angle grid
4. polishing of the most promising candidates by alternating assignment and
   Kabsch superposition until the measure stops decreasing
5. simulated annealing restarts
6. local refinement around the best rotation
"""

import heapq
import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ...utils.benchmarking import PerformanceStats, timer
from ...utils.cancellation import CancellationToken
from ...utils.progress import ProgressReporter
from ...utils.vector_math import (
    random_unit_vector,
    rotation_from_axis_angle,
    rotation_from_euler,
)
from ..exceptions import InvalidInputError
from ..interfaces.assignment_solver import AssignmentSolver
from ..models.search_parameters import SearchParameters
from .kabsch_aligner import KabschAligner
from .linear_sum_assignment_solver import LinearSumAssignmentSolver

logger = logging.getLogger(__name__)

_PI = math.pi

KEY_ORIENTATIONS = (
    (0.0, 0.0, 0.0),
    (_PI / 2, 0.0, 0.0), (0.0, _PI / 2, 0.0), (0.0, 0.0, _PI / 2),
    (_PI, 0.0, 0.0), (0.0, _PI, 0.0), (0.0, 0.0, _PI),
    (_PI / 2, _PI / 2, 0.0), (_PI / 2, 0.0, _PI / 2), (0.0, _PI / 2, _PI / 2),
    (_PI / 4, 0.0, 0.0), (0.0, _PI / 4, 0.0), (0.0, 0.0, _PI / 4),
    (_PI / 4, _PI / 4, 0.0), (_PI / 4, 0.0, _PI / 4), (0.0, _PI / 4, _PI / 4),
    (_PI / 4, _PI / 4, _PI / 4), (_PI / 3, _PI / 3, _PI / 3),
)

# Polishing stops once an iteration gains less than this
POLISH_TOLERANCE = 1e-10

Candidate = Tuple[float, np.ndarray, np.ndarray]


@dataclass
class SearchOutcome:
    """Best rotation and assignment found by a search."""

    measure: float
    rotation: np.ndarray
    assignment: np.ndarray
    evaluations: int = 0
    stage_timings: Dict[str, float] = field(default_factory=dict)


class _Best:
    """Running minimum of (measure, rotation, assignment)."""

    def __init__(self, measure: float, rotation: np.ndarray, assignment: np.ndarray):
        self.measure = measure
        self.rotation = rotation
        self.assignment = assignment

    def consider(self, measure: float, rotation: np.ndarray, assignment: np.ndarray) -> bool:
        if measure < self.measure:
            self.measure = measure
            self.rotation = rotation.copy()
            self.assignment = assignment.copy()
            return True
        return False


class MeasureEvaluator:
    """Shape measure of an actual point set at a given rotation."""

    def __init__(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        solver: AssignmentSolver,
        optimal_scaling: bool = False,
    ):
        self.actual = np.asarray(actual, dtype=float)
        self.reference = np.asarray(reference, dtype=float)
        self.solver = solver
        self.optimal_scaling = optimal_scaling
        self.count = 0
        self._n = len(self.actual)
        self._rows = np.arange(self._n)

    def cost_matrix(self, rotation: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Rotated actual points and their squared distances to the reference."""
        rotated = self.actual @ rotation[:3, :3].T
        diff = rotated[:, None, :] - self.reference[None, :, :]
        return rotated, np.einsum("ijk,ijk->ij", diff, diff)

    def __call__(self, rotation: np.ndarray) -> Tuple[float, np.ndarray]:
        self.count += 1
        rotated, cost = self.cost_matrix(rotation)
        if not np.all(np.isfinite(cost)):
            return math.inf, self._rows.copy()

        assignment = self.solver.solve(cost)

        if self.optimal_scaling:
            matched = self.reference[assignment]
            norm = float(np.sum(matched * matched))
            factor = float(np.sum(rotated * matched)) / norm if norm > 0 else 1.0
            residual = float(np.sum((rotated - factor * matched) ** 2))
        else:
            residual = float(cost[self._rows, assignment].sum())

        measure = 100.0 * residual / self._n
        if not math.isfinite(measure):
            return math.inf, assignment
        return measure, assignment


class RotationSearchEngine:
    """
    Multi-stage search for the rotation minimizing the shape measure.

    Each engine owns its random generator and solver scratch state; create one
    per concurrent computation.
    """

    def __init__(
        self,
        parameters: Optional[SearchParameters] = None,
        solver: Optional[AssignmentSolver] = None,
        rng: Optional[np.random.Generator] = None,
        progress: Optional[ProgressReporter] = None,
        cancellation: Optional[CancellationToken] = None,
        stats: Optional[PerformanceStats] = None,
        aligner: Optional[KabschAligner] = None,
    ):
        """
        Args:
            parameters: Search budgets (default mode preset when omitted)
            solver: Assignment solver used for every evaluation
            rng: Seedable random generator for the annealing stages
            progress: Reporter receiving throttled progress events
            cancellation: Token polled at stage boundaries and inner steps
            stats: Collector for per-stage timings
            aligner: Kabsch aligner used to polish candidate rotations
        """
        self.parameters = parameters or SearchParameters()
        self.solver = solver or LinearSumAssignmentSolver()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.progress = progress or ProgressReporter()
        self.cancellation = cancellation
        self.stats = stats if stats is not None else PerformanceStats()
        self.aligner = aligner or KabschAligner()

    def search(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        seeds: Iterable[np.ndarray] = (),
    ) -> SearchOutcome:
        """
        Find the rotation and assignment minimizing the shape measure.

        Args:
            actual: Normalized (N, 3) actual points
            reference: Normalized (N, 3) reference points
            seeds: Candidate 4x4 rotations evaluated before the global search

        Returns:
            SearchOutcome with the best measure found

        Raises:
            InvalidInputError: If the point sets differ in size or are empty
            SearchCancelledError: If the cancellation token is triggered
        """
        actual = np.asarray(actual, dtype=float)
        reference = np.asarray(reference, dtype=float)
        if len(actual) == 0 or actual.shape != reference.shape:
            raise InvalidInputError(
                f"Point set size mismatch: actual {actual.shape}, reference {reference.shape}"
            )

        params = self.parameters
        evaluate = MeasureEvaluator(actual, reference, self.solver, params.optimal_scaling)
        best = _Best(math.inf, np.eye(4), np.arange(len(actual)))
        candidates: List[Candidate] = []

        with self._stage("Seed Alignments", evaluate):
            self._run_seeds(evaluate, best, seeds, candidates)

        with self._stage("Key Orientations", evaluate):
            self._run_key_orientations(evaluate, best, candidates)

        if best.measure < params.early_exit_after_key_orientations:
            logger.debug("Early exit after key orientations (%.6f)", best.measure)
            return self._outcome(best, evaluate)

        with self._stage("Grid Search", evaluate):
            self._run_grid(evaluate, best, candidates)

        with self._stage("Polish", evaluate):
            self._run_polish(evaluate, best, candidates)

        if params.early_exit_after_grid is not None and best.measure < params.early_exit_after_grid:
            logger.debug("Early exit after grid search (%.6f)", best.measure)
            return self._outcome(best, evaluate)

        with self._stage("Annealing", evaluate):
            self._run_annealing(evaluate, best)

        with self._stage("Refinement", evaluate):
            self._run_refinement(evaluate, best)

        return self._outcome(best, evaluate)

    @contextmanager
    def _stage(self, name: str, evaluate: MeasureEvaluator):
        self._check_cancelled()
        start_count = evaluate.count
        logger.debug("Starting stage %s", name)
        with timer(name, self.stats, evaluations=lambda: evaluate.count - start_count):
            yield
        self._check_cancelled()

    def _check_cancelled(self) -> None:
        if self.cancellation is not None:
            self.cancellation.raise_if_cancelled()

    def _outcome(self, best: _Best, evaluate: MeasureEvaluator) -> SearchOutcome:
        self.progress.report("Complete", 1, 1, best.measure, force=True)
        return SearchOutcome(
            measure=best.measure,
            rotation=best.rotation,
            assignment=best.assignment,
            evaluations=evaluate.count,
            stage_timings=self.stats.totals(),
        )

    def _run_seeds(self, evaluate, best: _Best, seeds, candidates: List[Candidate]) -> None:
        rotations = [np.eye(4)]
        for seed in seeds:
            matrix = np.asarray(seed, dtype=float)
            if is_proper_rotation(matrix):
                rotations.append(matrix)
            else:
                logger.warning("Ignoring seed that is not a proper rotation")

        total = len(rotations)
        for idx, rotation in enumerate(rotations):
            measure, assignment = evaluate(rotation)
            best.consider(measure, rotation, assignment)
            candidates.append((measure, rotation, assignment))
            self.progress.report("Seed Alignments", idx + 1, total, best.measure)

    def _run_key_orientations(self, evaluate, best: _Best, candidates: List[Candidate]) -> None:
        total = len(KEY_ORIENTATIONS)
        for idx, angles in enumerate(KEY_ORIENTATIONS):
            rotation = rotation_from_euler(*angles)
            measure, assignment = evaluate(rotation)
            best.consider(measure, rotation, assignment)
            candidates.append((measure, rotation, assignment))
            self.progress.report("Key Orientations", idx + 1, total, best.measure)

    def _run_grid(self, evaluate, best: _Best, candidates: List[Candidate]) -> None:
        params = self.parameters
        angle_step = 2 * _PI / params.grid_steps
        indices = range(0, params.grid_steps, params.grid_stride)
        total = params.grid_points

        count = 0
        for i in indices:
            for j in indices:
                for k in indices:
                    rotation = rotation_from_euler(i * angle_step, j * angle_step, k * angle_step)
                    measure, assignment = evaluate(rotation)
                    best.consider(measure, rotation, assignment)
                    candidates.append((measure, rotation, assignment))
                    count += 1
                    self.progress.report("Grid Search", count, total, best.measure)
                    if count % params.cancel_check_interval == 0:
                        self._check_cancelled()

    def _polish(
        self, evaluate, measure: float, rotation: np.ndarray, assignment: np.ndarray
    ) -> Candidate:
        """Alternate Kabsch superposition and reassignment until the measure converges."""
        for _ in range(self.parameters.polish_iterations):
            aligned = self.aligner.align(evaluate.actual, evaluate.reference, assignment)
            aligned_measure, aligned_assignment = evaluate(aligned)
            if aligned_measure >= measure - POLISH_TOLERANCE:
                break
            measure, rotation, assignment = aligned_measure, aligned, aligned_assignment
        return measure, rotation, assignment

    def _run_polish(self, evaluate, best: _Best, candidates: List[Candidate]) -> None:
        shortlist = heapq.nsmallest(
            self.parameters.polish_candidates, candidates, key=lambda c: c[0]
        )
        total = len(shortlist)
        for idx, candidate in enumerate(shortlist):
            best.consider(*self._polish(evaluate, *candidate))
            self.progress.report("Polish", idx + 1, total, best.measure)
            self._check_cancelled()

    def _restart_rotation(self, restart: int, best: _Best) -> np.ndarray:
        """Starting point: the best itself, a perturbation of it, or random."""
        rng = self.rng
        if restart == 0:
            return best.rotation.copy()
        if restart < self.parameters.num_restarts / 2:
            axis = random_unit_vector(rng)
            angle = (rng.random() - 0.5) * _PI
            return rotation_from_axis_angle(axis, angle) @ best.rotation
        return rotation_from_euler(*(rng.random(3) * 2 * _PI))

    def _run_annealing(self, evaluate, best: _Best) -> None:
        params = self.parameters
        rng = self.rng

        for restart in range(params.num_restarts):
            self.progress.report("Annealing", restart, params.num_restarts, best.measure, force=True)

            current = self._restart_rotation(restart, best)
            current_measure, current_assignment = evaluate(current)
            run_best = _Best(current_measure, current, current_assignment)

            temperature = params.initial_temperature
            alpha = (params.min_temperature / temperature) ** (1.0 / params.steps_per_restart)

            for step in range(params.steps_per_restart):
                if step and step % params.cancel_check_interval == 0:
                    self._check_cancelled()

                step_size = (
                    temperature
                    * params.step_size_factor
                    * (1 + params.step_size_randomness * rng.random())
                )
                axis = random_unit_vector(rng)
                angle = (rng.random() - 0.5) * 2 * step_size
                candidate = rotation_from_axis_angle(axis, angle) @ current
                measure, assignment = evaluate(candidate)

                delta = measure - current_measure
                if delta < 0 or rng.random() < math.exp(-delta / temperature):
                    current = candidate
                    current_measure = measure
                    run_best.consider(measure, candidate, assignment)

                temperature *= alpha

                if run_best.measure < params.early_exit_during_run:
                    break

            best.consider(
                *self._polish(evaluate, run_best.measure, run_best.rotation, run_best.assignment)
            )
            logger.debug(
                "Annealing restart %d/%d: run best %.6f, global best %.6f",
                restart + 1, params.num_restarts, run_best.measure, best.measure,
            )

            if best.measure < params.early_exit_after_annealing:
                break

        self.progress.report("Annealing", params.num_restarts, params.num_restarts, best.measure)

    def _run_refinement(self, evaluate, best: _Best) -> None:
        params = self.parameters
        rng = self.rng

        current = best.rotation.copy()
        current_measure = best.measure
        temperature = params.refinement_initial_temperature
        no_improvement = 0
        total = params.refinement_steps

        for step in range(total):
            if step and step % params.cancel_check_interval == 0:
                self._check_cancelled()

            step_size = temperature * params.refinement_step_size_factor
            axis = random_unit_vector(rng)
            angle = (rng.random() - 0.5) * 2 * step_size
            candidate = rotation_from_axis_angle(axis, angle) @ current
            measure, assignment = evaluate(candidate)

            if measure < current_measure:
                current = candidate
                current_measure = measure
                no_improvement = 0
                best.consider(measure, candidate, assignment)
            else:
                no_improvement += 1

            temperature *= params.refinement_decay
            self.progress.report("Refinement", step + 1, total, best.measure)

            if (
                no_improvement > params.no_improvement_limit
                and best.measure < params.early_exit_during_refinement
            ):
                logger.debug("Refinement stalled after %d steps", step + 1)
                break

        best.consider(*self._polish(evaluate, best.measure, best.rotation, best.assignment))


def is_proper_rotation(matrix: np.ndarray, tolerance: float = 1e-6) -> bool:
    """True for a finite 4x4 transform whose rotation block is orthogonal with det +1."""
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (4, 4) or not np.all(np.isfinite(matrix)):
        return False
    rotation = matrix[:3, :3]
    if not np.allclose(rotation @ rotation.T, np.eye(3), atol=tolerance):
        return False
    return abs(np.linalg.det(rotation) - 1.0) < tolerance
