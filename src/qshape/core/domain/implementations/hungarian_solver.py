"""Self-contained Kuhn-Munkres (Hungarian) assignment solver."""

from typing import Dict

import numpy as np

from ..interfaces.assignment_solver import AssignmentSolver


class _Workspace:
    """Scratch buffers for one problem size, reused between calls."""

    def __init__(self, n: int):
        self.u = np.zeros(n + 1)
        self.v = np.zeros(n + 1)
        self.minv = np.empty(n + 1)
        self.p = np.zeros(n + 1, dtype=int)
        self.way = np.zeros(n + 1, dtype=int)
        self.used = np.zeros(n + 1, dtype=bool)

    def reset(self) -> None:
        self.u.fill(0.0)
        self.v.fill(0.0)
        self.p.fill(0)
        self.way.fill(0)


class HungarianSolver(AssignmentSolver):
    """
    O(N^3) Hungarian algorithm with row and column potentials.

    Rows are inserted one at a time; for each row a shortest augmenting
    path is grown over the reduced costs ``cost[i][j] - u[i] - v[j]``,
    with the inner column scan vectorized in numpy. Column 0 and row 0 are
    sentinels, so all buffers are 1-indexed.

    Instances keep their scratch buffers between calls and are therefore
    not safe to share between threads.
    """

    def __init__(self):
        self._workspaces: Dict[int, _Workspace] = {}

    def _workspace(self, n: int) -> _Workspace:
        ws = self._workspaces.get(n)
        if ws is None:
            ws = _Workspace(n)
            self._workspaces[n] = ws
        else:
            ws.reset()
        return ws

    def solve(self, cost: np.ndarray) -> np.ndarray:
        cost = self.check_cost_matrix(cost)
        n = cost.shape[0]
        if n == 0:
            return np.zeros(0, dtype=int)
        if n == 1:
            return np.zeros(1, dtype=int)

        ws = self._workspace(n)
        u, v, minv, p, way, used = ws.u, ws.v, ws.minv, ws.p, ws.way, ws.used

        for i in range(1, n + 1):
            p[0] = i
            j0 = 0
            minv.fill(np.inf)
            used.fill(False)

            while True:
                used[j0] = True
                i0 = p[j0]
                free = ~used[1:]

                reduced = cost[i0 - 1] - u[i0] - v[1:]
                improve = np.nonzero(free & (reduced < minv[1:]))[0]
                minv[improve + 1] = reduced[improve]
                way[improve + 1] = j0

                candidates = np.where(free, minv[1:], np.inf)
                j1 = int(np.argmin(candidates)) + 1
                delta = candidates[j1 - 1]

                used_cols = np.nonzero(used)[0]
                u[p[used_cols]] += delta
                v[used_cols] -= delta
                minv[1:][free] -= delta

                j0 = j1
                if p[j0] == 0:
                    break

            # Flip the augmenting path
            while j0 != 0:
                j1 = way[j0]
                p[j0] = p[j1]
                j0 = j1

        perm = np.empty(n, dtype=int)
        perm[p[1:] - 1] = np.arange(n)
        return perm
