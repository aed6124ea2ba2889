"""Deterministic scoring modules: business classification and quality scoring."""

from siteprofile.scorers.business_classifier import (
    BusinessClassifier,
    build_text_corpus,
    count_keyword_hits,
)
from siteprofile.scorers.quality_scorer import (
    QualityScorer,
    calculate_quality_score,
)

__all__ = [
    "BusinessClassifier",
    "build_text_corpus",
    "count_keyword_hits",
    "QualityScorer",
    "calculate_quality_score",
]
