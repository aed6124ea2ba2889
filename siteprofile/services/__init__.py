"""
Services for the extraction pipeline.

- reconciler: merges per-source partial profiles by source reliability
- finalize: de-duplication and placeholders for the merged profile
- pipeline: end-to-end bundle -> profile orchestration
- generation_payload: flattens a final profile for the document generator
"""

from .finalize import finalize_profile
from .generation_payload import format_contact_lines, infer_domain, numbered_lines, prepare_generation_fields
from .pipeline import PipelineResult, ProfilePipeline, coerce_bundle, extract_profile
from .reconciler import Reconciler, has_conflict, merge_profiles

__all__ = [
    "Reconciler",
    "has_conflict",
    "merge_profiles",
    "finalize_profile",
    "PipelineResult",
    "ProfilePipeline",
    "coerce_bundle",
    "extract_profile",
    "format_contact_lines",
    "infer_domain",
    "numbered_lines",
    "prepare_generation_fields",
]
