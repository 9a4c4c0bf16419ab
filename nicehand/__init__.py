"""Heuristic Texas Hold'em strategy advice, state validation, result caching and tournament helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]