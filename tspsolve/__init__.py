"""Travelling salesman tour solvers for TSPLIB-style coordinate files."""

__version__ = "0.1.0"