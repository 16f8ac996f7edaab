"""Diagnostics package.

- diagnostics.accuracy: error sweeps against numpy references (needs the diagnostics extra)
"""

__all__ = ["accuracy"]
