from .assignment_solver import AssignmentSolver, assignment_cost, assignment_pairs

__all__ = ["AssignmentSolver", "assignment_cost", "assignment_pairs"]
