"""
siteprofile - homepage content bundle to business profile.

Usage:
    from siteprofile import ProfilePipeline, load_config, prepare_generation_fields

    pipeline = ProfilePipeline(load_config())
    result = pipeline.run(bundle)
    if result.admitted:
        fields = prepare_generation_fields(result.profile)
"""

from .config import ExtractionConfig, load_config
from .errors import ConfigError, InvalidContentBundleError, SiteProfileError
from .models import (
    BusinessProfile,
    BusinessType,
    ConflictRecord,
    ContactInfo,
    ContentBundle,
    ExtractionSource,
    QualityAssessment,
)
from .services import PipelineResult, ProfilePipeline, extract_profile, prepare_generation_fields
from .utils.html_parsing import bundle_from_html
from .validators import GateDecision, QualityGate

__version__ = "0.1.0"

__all__ = [
    "ExtractionConfig",
    "load_config",
    "ConfigError",
    "InvalidContentBundleError",
    "SiteProfileError",
    "BusinessProfile",
    "BusinessType",
    "ConflictRecord",
    "ContactInfo",
    "ContentBundle",
    "ExtractionSource",
    "QualityAssessment",
    "PipelineResult",
    "ProfilePipeline",
    "extract_profile",
    "prepare_generation_fields",
    "bundle_from_html",
    "GateDecision",
    "QualityGate",
]
