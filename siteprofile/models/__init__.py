"""Pydantic models for content bundles, business profiles and quality scores."""

from .business_profile import (
    BusinessProfile,
    BusinessType,
    ConflictRecord,
    ContactInfo,
    ExtractionSource,
)
from .content_bundle import ContentBundle
from .quality import ComponentStatus, QualityAssessment, ScoreComponent

__all__ = [
    "BusinessProfile",
    "BusinessType",
    "ComponentStatus",
    "ConflictRecord",
    "ContactInfo",
    "ContentBundle",
    "ExtractionSource",
    "QualityAssessment",
    "ScoreComponent",
]
