"""Continuous shape measure core."""
