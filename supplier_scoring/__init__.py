"""
Supplier Scoring Core

Normalizes a catalogue of evaluation questions onto a canonical 1-4 answer
scale and computes weighted category scores for evaluated suppliers.

Usage:
    from supplier_scoring import ScoreAggregator, TabularDefinitionLoader, WeightNormalizer, load_weights

    catalogue = TabularDefinitionLoader().load(rows)
    weights = WeightNormalizer().normalize(load_weights(weight_rows))
    result = ScoreAggregator().calculate_all(scores, weights, catalogue.criteria)
"""

from supplier_scoring.scoring.aggregator import CategoryBreakdown, ScoreAggregator, ScoreCalculation
from supplier_scoring.scoring.assessment_results import (
    AssessmentOutcome,
    completion_percentage,
    question_status,
    reduce_results,
)
from supplier_scoring.scoring.definition_loader import (
    DEFAULT_SCALE,
    CatalogueLoadResult,
    TabularDefinitionLoader,
)
from supplier_scoring.scoring.guide_parser import RawOption, ScoringGuideParser
from supplier_scoring.scoring.identifier import IdentifierGenerator
from supplier_scoring.scoring.scale_normalizer import NormalizedScale, ScaleNormalizer
from supplier_scoring.scoring.score_migration import migrate_score, migrate_scores
from supplier_scoring.scoring.weights import (
    DEFAULT_CATEGORY_NAMES,
    WeightNormalizer,
    category_weights,
    default_weights,
    load_weights,
    load_weights_or_default,
)

__version__ = "1.0.0"

__all__ = [
    "AssessmentOutcome",
    "CatalogueLoadResult",
    "CategoryBreakdown",
    "DEFAULT_CATEGORY_NAMES",
    "DEFAULT_SCALE",
    "IdentifierGenerator",
    "NormalizedScale",
    "RawOption",
    "ScaleNormalizer",
    "ScoreAggregator",
    "ScoreCalculation",
    "ScoringGuideParser",
    "TabularDefinitionLoader",
    "WeightNormalizer",
    "category_weights",
    "completion_percentage",
    "default_weights",
    "load_weights",
    "load_weights_or_default",
    "migrate_score",
    "migrate_scores",
    "question_status",
    "reduce_results",
]
