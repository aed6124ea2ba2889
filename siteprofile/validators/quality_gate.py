"""Quality gate - admission control before generation.

Profiles scoring below the minimum are rejected so the generation step is
never run on near-empty input. Rejection is a policy decision reported as a
GateDecision, not an exception.
"""

from dataclasses import dataclass
from typing import Any

from ..constants import MIN_QUALITY_SCORE


@dataclass
class GateDecision:
    """Result of checking a profile against the quality gate.

    Attributes:
        admitted: Whether the profile may proceed to generation
        score: The profile's quality score
        min_score: Threshold that was applied
        reason: Human-readable explanation
    """

    admitted: bool
    score: int
    min_score: int
    reason: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "admitted": self.admitted,
            "score": self.score,
            "min_score": self.min_score,
            "reason": self.reason,
        }


class QualityGate:
    """Admits profiles whose quality score meets a minimum."""

    def __init__(self, min_score: int = MIN_QUALITY_SCORE):
        if not 0 <= min_score <= 100:
            raise ValueError(f"min_score must be between 0 and 100, got {min_score}")
        self.min_score = min_score

    def evaluate(self, score: int) -> GateDecision:
        """
        Decide whether a score is high enough for generation.

        Args:
            score: Quality score (0-100)

        Returns:
            GateDecision
        """
        if score >= self.min_score:
            return GateDecision(
                admitted=True,
                score=score,
                min_score=self.min_score,
                reason=f"Quality score {score} meets minimum {self.min_score}",
            )
        return GateDecision(
            admitted=False,
            score=score,
            min_score=self.min_score,
            reason=f"Quality score {score} is below minimum {self.min_score}; not enough data to generate from",
        )
