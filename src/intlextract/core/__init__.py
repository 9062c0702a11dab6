"""Core utilities shared across syntax, tree and extraction layers.

This package provides foundational utilities that the ICU syntax layer
(parsing, serialization), the reference tree host (walking) and the
extraction engine depend on. Isolating them here keeps the dependency
graph clean:

    core <- syntax <- extraction
    core <- tree   <- extraction

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]
