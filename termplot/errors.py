from __future__ import annotations


class TermPlotError(Exception):
    """Base class for errors raised by termplot."""


class InvalidArgument(TermPlotError, ValueError):
    """A configuration value cannot be rendered (zero steps, empty grid, degenerate buckets...)."""
