"""Numerical helpers: vector math, normalization, seeds, progress and timing."""
