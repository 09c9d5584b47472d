# src/qshape/core/services/shape_measure_service.py
"""Service computing the continuous shape measure of one (actual, reference) pair."""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Sequence, Union

import numpy as np

from ...data.reference_geometries import get_geometry
from ..domain.exceptions import (
    DegenerateGeometryError,
    InvalidInputError,
    ShapeMeasureError,
)
from ..domain.implementations.kabsch_aligner import KabschAligner
from ..domain.implementations.linear_sum_assignment_solver import (
    LinearSumAssignmentSolver,
)
from ..domain.implementations.rotation_search_engine import (
    MeasureEvaluator,
    RotationSearchEngine,
)
from ..domain.interfaces.assignment_solver import AssignmentSolver, assignment_pairs
from ..domain.models.flexible_shape_result import (
    AnisotropicScaling,
    FlexibleShapeMeasureResult,
)
from ..domain.models.point_set import NormalizedPointSet
from ..domain.models.reference_geometry import ReferenceGeometry
from ..domain.models.search_parameters import SearchMode, SearchParameters
from ..domain.models.shape_measure_result import ShapeMeasureResult
from ..utils.anisotropic_scaling import (
    apply_anisotropic_scaling,
    describe_scaling,
    distortion_index,
    optimize_scaling,
    reference_axes,
)
from ..utils.benchmarking import PerformanceStats, Timer, timer
from ..utils.cancellation import CancellationToken
from ..utils.normalization import normalize_point_set, validate_point_array
from ..utils.progress import ProgressReporter, ProgressSink
from ..utils.seed_alignments import generate_seed_rotations
from ..utils.vector_math import unflatten_matrix4

logger = logging.getLogger(__name__)

# Ligands closer than this to the metal cannot be scored
MIN_LIGAND_DISTANCE = 1e-8

Reference = Union[ReferenceGeometry, Sequence[Sequence[float]], np.ndarray]


class ShapeMeasureService:
    """Service for computing continuous shape measures."""

    def __init__(
        self,
        solver_factory: Optional[Callable[[], AssignmentSolver]] = None,
        aligner: Optional[KabschAligner] = None,
        parameters: Optional[Dict[SearchMode, SearchParameters]] = None,
    ):
        """
        Initialize service with its numerical strategies.

        Args:
            solver_factory: Creates the assignment solver for each computation
                (solvers may hold scratch buffers, so they are not shared)
            aligner: Kabsch aligner used for seed rotations and polishing
            parameters: Overrides of the per-mode search parameters
        """
        self._solver_factory = solver_factory or LinearSumAssignmentSolver
        self._aligner = aligner or KabschAligner()
        self._parameters = dict(parameters or {})

    def parameters_for(self, mode: Union[str, SearchMode]) -> SearchParameters:
        mode = SearchMode.parse(mode)
        return self._parameters.get(mode) or SearchParameters.for_mode(mode)

    def compute(
        self,
        actual: Any,
        reference: Reference,
        mode: Union[str, SearchMode] = SearchMode.DEFAULT,
        progress: Optional[ProgressSink] = None,
        seed_rotations: Optional[Sequence[Any]] = None,
        cancellation: Optional[CancellationToken] = None,
        seed: Optional[int] = None,
        includes_center: bool = False,
        optimal_scaling: Optional[bool] = None,
        stats: Optional[PerformanceStats] = None,
    ) -> ShapeMeasureResult:
        """
        Compute the shape measure of ``actual`` against ``reference``.

        Args:
            actual: Ligand positions relative to the metal, shape (N, 3)
            reference: Reference geometry or raw vertex coordinates
            mode: "fast", "default" or "intensive"
            progress: Callable or bounded queue receiving ProgressEvents
            seed_rotations: Extra candidate rotations (4x4, 3x3 or 16 floats)
            cancellation: Token to abort the computation cooperatively
            seed: Seed for the random generator of the annealing stages
            includes_center: The last actual point is the metal itself
            optimal_scaling: Rescale the reference per candidate (SHAPE
                convention); defaults to the mode's setting
            stats: Collector for per-stage timings

        Returns:
            ShapeMeasureResult

        Raises:
            InvalidInputError: On size mismatch, empty or non-finite input
            DegenerateGeometryError: If a ligand coincides with the metal
            SearchCancelledError: If ``cancellation`` is triggered
        """
        mode = SearchMode.parse(mode)
        params = self.parameters_for(mode)
        if optimal_scaling is not None:
            params = replace(params, optimal_scaling=optimal_scaling)

        actual_points = validate_point_array(actual, "actual coordinates")
        normalized_reference = self._normalized_reference(reference)

        if (
            includes_center
            and isinstance(reference, ReferenceGeometry)
            and not reference.includes_center
            and len(actual_points) == len(normalized_reference) + 1
        ):
            # Ligand-only reference; score the ligands without the metal
            actual_points = actual_points[:-1]
            includes_center = False

        center_appended = False
        vacant = len(actual_points) in (2, 3) and not includes_center
        if len(normalized_reference) == len(actual_points) + 1 and (
            self._lists_center(reference) or vacant
        ):
            # Reference lists the central atom; add the metal to the actual set
            actual_points = np.vstack([actual_points, np.zeros(3)])
            center_appended = True
            includes_center = True

        if len(actual_points) != len(normalized_reference):
            raise InvalidInputError(
                f"Point count mismatch: {len(actual_points)} actual vs "
                f"{len(normalized_reference)} reference points"
            )

        self._check_degenerate(actual_points, includes_center)

        if cancellation is not None:
            cancellation.raise_if_cancelled()

        with Timer("shape_measure") as elapsed:
            normalized_actual = normalize_point_set(actual_points)
            solver = self._solver_factory()
            seeds = generate_seed_rotations(
                normalized_actual.coordinates,
                normalized_reference.coordinates,
                solver,
                self._aligner,
                extra=self._seed_matrices(seed_rotations),
            )

            engine = RotationSearchEngine(
                parameters=params,
                solver=solver,
                rng=np.random.default_rng(seed),
                progress=ProgressReporter(progress),
                cancellation=cancellation,
                stats=stats if stats is not None else PerformanceStats(),
                aligner=self._aligner,
            )
            outcome = engine.search(
                normalized_actual.coordinates,
                normalized_reference.coordinates,
                seeds=seeds,
            )

        rotated = normalized_actual.coordinates @ outcome.rotation[:3, :3].T
        aligned = np.empty_like(rotated)
        aligned[outcome.assignment] = rotated

        logger.info(
            "CShM %.4f (%s mode, %d points, %d evaluations, %.2fs)",
            outcome.measure, mode.value, len(actual_points),
            outcome.evaluations, elapsed.elapsed(),
        )

        return ShapeMeasureResult(
            measure=outcome.measure,
            assignment=assignment_pairs(outcome.assignment),
            rotation=outcome.rotation,
            aligned_coords=aligned,
            reference_coords=np.array(normalized_reference.coordinates),
            mode=mode.value,
            center_appended=center_appended,
            stage_timings=outcome.stage_timings,
        )

    def compute_flexible(
        self,
        actual: Any,
        reference: Reference,
        mode: Union[str, SearchMode] = SearchMode.DEFAULT,
        progress: Optional[ProgressSink] = None,
        cancellation: Optional[CancellationToken] = None,
        seed: Optional[int] = None,
        rigid_result: Optional[ShapeMeasureResult] = None,
        stats: Optional[PerformanceStats] = None,
        **compute_kwargs,
    ) -> FlexibleShapeMeasureResult:
        """
        Compare the rigid shape measure with one allowing anisotropic scaling.

        The reference is stretched or compressed along its principal axes
        while the actual points stay in their rigid alignment. A low flexible
        measure with a high rigid one marks a distorted instance of the
        reference; both measures high mark a different polyhedron.

        Args:
            actual: Ligand positions relative to the metal, shape (N, 3)
            reference: Reference geometry or raw vertex coordinates
            mode: "fast", "default" or "intensive"
            progress: Callable or bounded queue receiving ProgressEvents
            cancellation: Token to abort the computation cooperatively
            seed: Seed for the random generators of both searches
            rigid_result: Rigid result to reuse instead of recomputing it
            stats: Collector for per-stage timings
            **compute_kwargs: Passed through to :meth:`compute`

        Returns:
            FlexibleShapeMeasureResult
        """
        mode = SearchMode.parse(mode)
        params = self.parameters_for(mode)

        rigid = rigid_result
        if rigid is None:
            rigid = self.compute(
                actual,
                reference,
                mode=mode,
                progress=progress,
                cancellation=cancellation,
                seed=seed,
                stats=stats,
                **compute_kwargs,
            )
        if rigid.reference_coords is None:
            raise InvalidInputError("Rigid result lacks reference coordinates")

        aligned = np.asarray(rigid.aligned_coords, dtype=float)
        reference_points = np.asarray(rigid.reference_coords, dtype=float)
        axes = reference_axes(reference_points)
        solver = self._solver_factory()
        identity = np.eye(4)

        def scaled_measure(scales):
            scaled = apply_anisotropic_scaling(reference_points, axes, scales)
            measure, _ = MeasureEvaluator(aligned, scaled, solver)(identity)
            return measure

        with timer("Flexible Scaling", stats):
            scales, _ = optimize_scaling(
                scaled_measure,
                rng=np.random.default_rng(seed),
                min_scale=params.min_scale,
                max_scale=params.max_scale,
                restarts=params.scaling_restarts,
                iterations=params.scaling_iterations,
                initial_temperature=params.scaling_initial_temperature,
                cooling_rate=params.scaling_cooling_rate,
                progress=ProgressReporter(progress),
                cancellation=cancellation,
                cancel_check_interval=params.cancel_check_interval,
            )

        scaled_reference = apply_anisotropic_scaling(reference_points, axes, scales)
        measure, assignment = MeasureEvaluator(aligned, scaled_reference, solver)(identity)
        flexible_aligned = np.empty_like(aligned)
        flexible_aligned[assignment] = aligned

        distortion = distortion_index(*scales)
        delta = rigid.measure - measure
        improvement = 100.0 * delta / rigid.measure if rigid.measure > 0 else 0.0

        logger.info(
            "Flexible CShM %.4f vs rigid %.4f (scales %.3f, %.3f, %.3f)",
            measure, rigid.measure, *scales,
        )

        return FlexibleShapeMeasureResult(
            rigid=rigid,
            measure=measure,
            scaling=AnisotropicScaling(
                sx=scales[0],
                sy=scales[1],
                sz=scales[2],
                distortion=distortion,
                description=describe_scaling(*scales),
            ),
            aligned_coords=flexible_aligned,
            scaled_reference=scaled_reference,
            delta=delta,
            improvement=improvement,
            category=interpret_flexible(rigid.measure, measure, distortion),
        )

    def compute_response(self, request: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """
        Run a computation described by a request dictionary.

        Args:
            request: Dictionary with ``actualCoordinates``,
                ``referenceCoordinates`` or a table ``referenceGeometry``
                code, optional ``mode``,
                ``seedRotations``, ``seed``, ``includesCenter`` and ``flexible``
            **kwargs: Passed through to :meth:`compute` (e.g. progress,
                cancellation)

        Returns:
            Success response ``{measure, alignedCoordinates, rotation}`` (plus
            ``flexible``, ``delta`` and ``improvement`` when the request sets
            ``flexible``) or failure response ``{errorKind, message}``
        """
        try:
            reference = self._request_reference(request)
            if "actualCoordinates" not in request:
                raise InvalidInputError("Request requires actualCoordinates")
            compute = self.compute_flexible if request.get("flexible") else self.compute
            result = compute(
                request["actualCoordinates"],
                reference,
                mode=request.get("mode", SearchMode.DEFAULT),
                seed_rotations=request.get("seedRotations"),
                seed=request.get("seed"),
                includes_center=bool(request.get("includesCenter", False)),
                **kwargs,
            )
        except ShapeMeasureError as e:
            logger.warning("Shape measure failed: %s", e.message)
            return e.to_dict()
        except ValueError as e:
            return InvalidInputError(str(e)).to_dict()
        return result.to_dict()

    @staticmethod
    def _request_reference(request: Dict[str, Any]) -> Reference:
        code = request.get("referenceGeometry")
        if code:
            try:
                return get_geometry(code)
            except KeyError as e:
                raise InvalidInputError(e.args[0]) from None
        if "referenceCoordinates" not in request:
            raise InvalidInputError(
                "Request requires referenceCoordinates or referenceGeometry"
            )
        return request["referenceCoordinates"]

    @staticmethod
    def _seed_matrices(seed_rotations: Optional[Sequence[Any]]) -> list:
        try:
            return [unflatten_matrix4(r) for r in seed_rotations or ()]
        except ValueError as e:
            raise InvalidInputError(f"Malformed seed rotation: {e}") from e

    @staticmethod
    def _normalized_reference(reference: Reference) -> NormalizedPointSet:
        if isinstance(reference, ReferenceGeometry):
            return reference.normalized
        points = validate_point_array(reference, "reference coordinates")
        return normalize_point_set(points)

    @staticmethod
    def _lists_center(reference: Reference) -> bool:
        return isinstance(reference, ReferenceGeometry) and reference.includes_center

    @staticmethod
    def _check_degenerate(points: np.ndarray, includes_center: bool) -> None:
        ligands = points[:-1] if includes_center else points
        distances = np.linalg.norm(ligands, axis=1)
        coincident = np.nonzero(distances < MIN_LIGAND_DISTANCE)[0]
        if len(coincident):
            raise DegenerateGeometryError(
                f"Ligand {int(coincident[0])} coincides with the metal center"
            )


def compute_shape_measure(
    actual: Any,
    reference: Reference,
    mode: Union[str, SearchMode] = SearchMode.DEFAULT,
    **kwargs,
) -> ShapeMeasureResult:
    """Compute a shape measure with a default-configured service."""
    return ShapeMeasureService().compute(actual, reference, mode=mode, **kwargs)


def interpret_measure(value: float) -> str:
    """Qualitative reading of a shape measure value."""
    if not np.isfinite(value):
        return "Invalid"
    if value < 0.1:
        return "Perfect"
    if value < 0.5:
        return "Excellent"
    if value < 1.5:
        return "Very Good"
    if value < 3.0:
        return "Good"
    if value < 7.5:
        return "Moderate"
    if value < 15.0:
        return "Poor"
    return "Very Poor / No Match"


def interpret_flexible(rigid: float, flexible: float, distortion: float) -> str:
    """
    Category of a rigid-versus-flexible comparison.

    Returns one of "wrong_geometry" (poor even with scaling), "rigid_match"
    (scaling barely helps), or "slight_distortion", "moderate_distortion" and
    "high_distortion" by the distortion index.
    """
    delta = rigid - flexible
    improvement = 100.0 * delta / rigid if rigid > 0 else 0.0
    if flexible > 10.0:
        return "wrong_geometry"
    if delta < 1.0 or improvement < 10.0:
        return "rigid_match"
    if distortion < 5.0:
        return "slight_distortion"
    if distortion < 15.0:
        return "moderate_distortion"
    return "high_distortion"
