# src/qshape/core/services/ranking_service.py
"""
Rank candidate reference geometries for one actual structure.

Each (actual, geometry) computation is independent and CPU-bound, so the
geometries are fanned out onto a process (or thread) pool and the results
sorted by ascending shape measure.
"""

import logging
import os
from concurrent.futures import (
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..domain.exceptions import DegenerateGeometryError, SearchCancelledError
from ..domain.models.reference_geometry import ReferenceGeometry
from ..domain.models.search_parameters import SearchMode
from ..domain.models.shape_measure_result import ShapeMeasureResult
from ..utils.cancellation import CancellationToken
from .shape_measure_service import ShapeMeasureService, interpret_measure

logger = logging.getLogger(__name__)


@dataclass
class GeometryRanking:
    """Shape measure of the actual structure against one reference geometry."""

    code: str
    name: str
    coordination_number: int
    point_group: str
    measure: float
    interpretation: str
    result: Optional[ShapeMeasureResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geometry": self.code,
            "name": self.name,
            "coordination_number": self.coordination_number,
            "point_group": self.point_group,
            "measure": self.measure,
            "interpretation": self.interpretation,
        }


def _measure_geometry(
    actual: np.ndarray,
    geometry: ReferenceGeometry,
    mode: str,
    seed: Optional[int],
    cancellation: Optional[CancellationToken] = None,
) -> ShapeMeasureResult:
    """Worker entry point; module-level so process pools can pickle it."""
    service = ShapeMeasureService()
    return service.compute(actual, geometry, mode=mode, seed=seed, cancellation=cancellation)


class GeometryRankingService:
    """Service ranking reference geometries by shape measure."""

    def __init__(self, max_workers: Optional[int] = None, executor: str = "process"):
        """
        Args:
            max_workers: Pool size (defaults to the CPU count)
            executor: "process" for a process pool, "thread" for a thread pool
        """
        if executor not in ("process", "thread"):
            raise ValueError(f"Unknown executor type '{executor}'")
        self.max_workers = max_workers or os.cpu_count() or 1
        self.executor = executor

    def rank(
        self,
        actual: Any,
        geometries: Sequence[ReferenceGeometry],
        mode: Union[str, SearchMode] = SearchMode.DEFAULT,
        seed: Optional[int] = None,
        cancellation: Optional[CancellationToken] = None,
        show_progress: bool = False,
    ) -> List[GeometryRanking]:
        """
        Compute the shape measure against every geometry and sort ascending.

        Args:
            actual: Ligand positions relative to the metal
            geometries: Candidate reference geometries
            mode: Search mode for every computation
            seed: Base random seed; geometry ``i`` uses ``seed + i``
            cancellation: Token aborting pending and running computations
            show_progress: Display a tqdm progress bar

        Returns:
            Rankings sorted by ascending measure

        Raises:
            DegenerateGeometryError: If the actual structure cannot be scored
            SearchCancelledError: If ``cancellation`` is triggered
        """
        mode = SearchMode.parse(mode).value
        actual = np.asarray(actual, dtype=float)
        if not geometries:
            return []

        pool_class = ProcessPoolExecutor if self.executor == "process" else ThreadPoolExecutor
        # Tokens wrap threading primitives and only reach thread workers
        worker_token = cancellation if self.executor == "thread" else None

        rankings: List[GeometryRanking] = []
        with pool_class(max_workers=min(self.max_workers, len(geometries))) as pool:
            futures: Dict[Future, ReferenceGeometry] = {}
            for i, geometry in enumerate(geometries):
                geometry_seed = None if seed is None else seed + i
                future = pool.submit(
                    _measure_geometry, actual, geometry, mode, geometry_seed, worker_token
                )
                futures[future] = geometry

            completed = as_completed(futures)
            if show_progress:
                completed = tqdm(completed, total=len(futures), desc="Geometries")

            try:
                for future in completed:
                    if cancellation is not None and cancellation.cancelled:
                        raise SearchCancelledError()
                    geometry = futures[future]
                    result = future.result()
                    rankings.append(
                        GeometryRanking(
                            code=geometry.code,
                            name=geometry.name,
                            coordination_number=geometry.coordination_number,
                            point_group=geometry.point_group,
                            measure=result.measure,
                            interpretation=interpret_measure(result.measure),
                            result=result,
                        )
                    )
                    logger.info("%s: CShM = %.4f", geometry.code, result.measure)
            except (DegenerateGeometryError, SearchCancelledError):
                for pending in futures:
                    pending.cancel()
                raise

        rankings.sort(key=lambda r: r.measure)
        return rankings


def to_dataframe(rankings: Sequence[GeometryRanking]) -> pd.DataFrame:
    """Tabulate rankings, best match first."""
    columns = [
        "geometry",
        "name",
        "coordination_number",
        "point_group",
        "measure",
        "interpretation",
    ]
    df = pd.DataFrame([r.to_dict() for r in rankings], columns=columns)
    return df.sort_values("measure", kind="stable").reset_index(drop=True)


def write_csv(rankings: Sequence[GeometryRanking], csv_file: str) -> str:
    """Save rankings to a CSV file and return its path."""
    os.makedirs(os.path.dirname(os.path.abspath(csv_file)), exist_ok=True)
    to_dataframe(rankings).to_csv(csv_file, index=False)
    logger.info("Wrote geometry ranking to %s", csv_file)
    return csv_file
