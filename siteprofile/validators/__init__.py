"""
Validators for the extraction pipeline.

This module provides:
- Content policy filtering (pricing, credentials, confidential terms)
- Quality gating before generation
"""

from .policy_filter import PolicyFilter
from .quality_gate import GateDecision, QualityGate

__all__ = [
    # Content policy
    "PolicyFilter",
    # Admission control
    "GateDecision",
    "QualityGate",
]
