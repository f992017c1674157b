"""
Core Package - Supplier Scoring Core
supplier_scoring/core/__init__.py

Core infrastructure: exceptions, logging setup.
"""

from supplier_scoring.core.exceptions import (
    CatalogueLoadError,
    InvalidCriterionError,
    ScoringCoreException,
    WeightSourceError,
)
from supplier_scoring.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "CatalogueLoadError",
    "InvalidCriterionError",
    "ScoringCoreException",
    "WeightSourceError",
]
