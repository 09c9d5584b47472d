from .reference_geometries import REFERENCE_GEOMETRIES, geometries_for, get_geometry

__all__ = ["REFERENCE_GEOMETRIES", "geometries_for", "get_geometry"]
