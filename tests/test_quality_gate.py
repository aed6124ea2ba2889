"""Tests for the admission gate in front of generation."""

import pytest
from siteprofile.validators.quality_gate import GateDecision, QualityGate


class TestQualityGate:
    """score >= min_score is admitted; rejection is a value, not an error."""

    def test_threshold_inclusive(self):
        gate = QualityGate(20)
        assert gate.evaluate(20).admitted is True
        assert gate.evaluate(19).admitted is False

    def test_default_threshold(self):
        assert QualityGate().min_score == 20

    def test_rejection_reason(self):
        decision = QualityGate(50).evaluate(10)
        assert decision.admitted is False
        assert decision.reason.startswith("Quality score 10 is below minimum 50")

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            QualityGate(101)
        with pytest.raises(ValueError):
            QualityGate(-1)

    def test_to_dict(self):
        decision = QualityGate(20).evaluate(40)
        assert decision.to_dict() == {
            "admitted": True,
            "score": 40,
            "min_score": 20,
            "reason": "Quality score 40 meets minimum 20",
        }
        assert isinstance(decision, GateDecision)
