from __future__ import annotations


class IndicatorError(ValueError):
    """Base class for all errors raised by indicators."""


class InvalidParameterError(IndicatorError):
    """Raised when an indicator is created or restored with invalid parameters."""
