"""
scoring/ - Supplier Scoring Core

Modules:
    utils.py                - Rounding, averaging and category-text helpers
    guide_parser.py         - Scoring guide text → raw (value, label) pairs
    scale_normalizer.py     - Raw options → canonical 1-4 options
    identifier.py           - Criterion identifier generation
    definition_loader.py    - Catalogue rows → criterion definitions
    weights.py              - Weight loading and normalization
    aggregator.py           - Total / category / weighted scores
    score_migration.py      - Stored 3/5-point scores → 1-4
    assessment_results.py   - AI-assistant answers → score map, completion
"""
