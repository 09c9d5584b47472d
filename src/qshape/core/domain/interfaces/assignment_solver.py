"""Interface for optimal point-to-point assignment strategies."""

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np

from ..exceptions import InvalidInputError


class AssignmentSolver(ABC):
    """Abstract base class for exact assignment problem solvers."""

    @abstractmethod
    def solve(self, cost: np.ndarray) -> np.ndarray:
        """
        Find the permutation minimizing the total assignment cost.

        Args:
            cost: N x N matrix, ``cost[i][j]`` is the cost of pairing actual
                point ``i`` with reference point ``j``

        Returns:
            Integer array ``perm`` of length N where ``perm[i]`` is the
            reference index assigned to actual index ``i``
        """
        pass

    @staticmethod
    def check_cost_matrix(cost) -> np.ndarray:
        """Validate that ``cost`` is a finite square matrix."""
        cost = np.asarray(cost, dtype=float)
        if cost.ndim != 2 or cost.shape[0] != cost.shape[1]:
            raise InvalidInputError(
                f"Cost matrix must be square, got shape {cost.shape}"
            )
        if not np.all(np.isfinite(cost)):
            raise InvalidInputError("Cost matrix contains non-finite entries")
        return cost


def assignment_pairs(perm) -> List[Tuple[int, int]]:
    """Convert a permutation into (actual index, reference index) pairs."""
    return [(int(i), int(j)) for i, j in enumerate(perm)]


def assignment_cost(cost: np.ndarray, perm) -> float:
    """Total cost of the assignment ``perm`` under ``cost``."""
    perm = np.asarray(perm, dtype=int)
    return float(np.asarray(cost)[np.arange(len(perm)), perm].sum())
