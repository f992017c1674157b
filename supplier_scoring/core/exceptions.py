"""
Custom Exceptions - Supplier Scoring Core
supplier_scoring/core/exceptions.py

Exception classes for catalogue and weight loading.
"""


class ScoringCoreException(Exception):
    """Base exception for the scoring core."""

    pass


class CatalogueLoadError(ScoringCoreException):
    """The question source produced no usable questions."""

    def __init__(self, message: str = "Question catalogue could not be loaded", report=None):
        self.message = message
        self.report = report
        super().__init__(message)


class WeightSourceError(ScoringCoreException):
    """The weight source produced no rows."""

    def __init__(self, message: str = "Category weights could not be loaded"):
        self.message = message
        super().__init__(message)


class InvalidCriterionError(ScoringCoreException, ValueError):
    """A criterion definition violates the canonical scale invariants."""

    def __init__(self, criterion: str, reason: str):
        self.criterion = criterion
        self.reason = reason
        super().__init__(f"Criterion {criterion!r} is invalid: {reason}")
