"""Error taxonomy for shape measure computations."""

from typing import Dict


class ShapeMeasureError(Exception):
    """Base class for failures reported by the shape measure engine."""

    error_kind = "ShapeMeasureError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        """Failure response in wire format."""
        return {"errorKind": self.error_kind, "message": self.message}


class InvalidInputError(ShapeMeasureError, ValueError):
    """Point-count mismatch, empty input or non-finite coordinates."""

    error_kind = "InvalidInput"


class DegenerateGeometryError(ShapeMeasureError):
    """A ligand coincides with the metal center, so no rotation can fix it."""

    error_kind = "DegenerateGeometry"


class SearchCancelledError(ShapeMeasureError):
    """Cooperative cancellation was observed; no partial result exists."""

    error_kind = "Cancelled"

    def __init__(self, message: str = "Shape measure computation was cancelled"):
        super().__init__(message)
