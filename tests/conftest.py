# tests/conftest.py

"""
Pytest Fixtures - Shared catalogue rows, criteria and weights

SAMPLE CATALOGUE ID REFERENCE (sample_question_rows, in row order):
- 1a.1          "1. Material Sourcing", 4-point comma-joined guide
- 1a.2          "1. Material Sourcing", 3-point multi-line guide
- 2b.1          "2. Operations", 5-point guide (raw 3 and 4 collide on 3)
- 2.Energyuse.1 "2. Operations", no guide → default scale, priority CRITICAL
- 3 skipped rows: no category, blank question, no category id
"""

import pytest

from supplier_scoring.config import Settings
from supplier_scoring.scoring.aggregator import ScoreAggregator
from supplier_scoring.scoring.definition_loader import TabularDefinitionLoader


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings without the 60-question expectation."""
    return Settings(EXPECTED_MIN_QUESTIONS=0)


# =============================================================================
# CATALOGUE ROW FIXTURES
# =============================================================================

@pytest.fixture
def sample_question_rows():
    """Seven decoded catalogue rows: four loadable, three skippable."""
    return [
        {
            "CATEGORY": "1. Material Sourcing",
            "SUB-CATEGORY": "1a",
            "PRIORITY": "HIGH",
            "KEY EVALUATION QUESTIONS": "Can the supplier repair returned components?",
            "SCORING GUIDE": "1=No, 2=Limited, 3=Partial, 4=Fully repairable",
        },
        {
            "CATEGORY": "1. Material Sourcing",
            "SUB-CATEGORY": "1a",
            "PRIORITY": "",
            "KEY EVALUATION QUESTIONS": "Are recycled inputs tracked?",
            "SCORING GUIDE": "3 = Always\n2 = Sometimes\n1 = Never",
        },
        {
            "CATEGORY": "2. Operations",
            "SUB-CATEGORY": "2b",
            "PRIORITY": "low",
            "KEY EVALUATION QUESTIONS": "How is water use monitored?",
            "SCORING GUIDE": "1=Poor, 2=Weak, 3=Average, 4=Good, 5=Excellent",
        },
        {
            "CATEGORY": "2. Operations",
            "SUB-CATEGORY": "Energy use",
            "PRIORITY": "critical",
            "KEY EVALUATION QUESTIONS": "Is energy consumption reported?",
            "SCORING GUIDE": "",
        },
        {
            "CATEGORY": "",
            "SUB-CATEGORY": "",
            "PRIORITY": "",
            "KEY EVALUATION QUESTIONS": "Orphan question without a category",
            "SCORING GUIDE": "1=No, 2=Yes",
        },
        {
            "CATEGORY": "3. Product Design & Lifecycle",
            "SUB-CATEGORY": "3a",
            "PRIORITY": "HIGH",
            "KEY EVALUATION QUESTIONS": "   ",
            "SCORING GUIDE": "1=No, 2=Yes",
        },
        {
            "CATEGORY": "Product Design & Lifecycle",
            "SUB-CATEGORY": "3a",
            "PRIORITY": "HIGH",
            "KEY EVALUATION QUESTIONS": "Is the product designed for disassembly?",
            "SCORING GUIDE": "1=No, 2=Yes",
        },
    ]


@pytest.fixture
def catalogue(sample_question_rows, test_settings):
    """CatalogueLoadResult for sample_question_rows."""
    return TabularDefinitionLoader(test_settings).load(sample_question_rows)


@pytest.fixture
def criteria(catalogue):
    """Criterion definitions keyed by identifier."""
    return catalogue.criteria


# =============================================================================
# SCORE / WEIGHT FIXTURES
# =============================================================================

@pytest.fixture
def aggregator():
    return ScoreAggregator()


@pytest.fixture
def sample_weights():
    """Weights for categories 1 and 2, already summing to 1."""
    return {"1": 0.6, "2": 0.4}


@pytest.fixture
def partial_scores():
    """Three answered questions, one unanswered."""
    return {
        "1a.1": 4,
        "1a.2": 2,
        "2b.1": 3,
        "2.Energyuse.1": None,
    }
