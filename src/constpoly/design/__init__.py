"""Offline design tools (need the diagnostics extra)."""

__all__ = ["term_counts"]
