"""Assignment solver backed by SciPy's linear_sum_assignment."""

import numpy as np
from scipy.optimize import linear_sum_assignment

from ..interfaces.assignment_solver import AssignmentSolver


class LinearSumAssignmentSolver(AssignmentSolver):
    """Exact assignment via ``scipy.optimize.linear_sum_assignment``.

    This is the default solver inside the rotation search hot loop.
    """

    def __init__(self, validate: bool = False):
        """
        Args:
            validate: Check the cost matrix shape and finiteness on every call
        """
        self._validate = validate

    def solve(self, cost: np.ndarray) -> np.ndarray:
        if self._validate:
            cost = self.check_cost_matrix(cost)
        if len(cost) == 0:
            return np.zeros(0, dtype=int)
        rows, cols = linear_sum_assignment(cost)
        perm = np.empty(len(rows), dtype=int)
        perm[rows] = cols
        return perm
