"""Quality score schemas - per-component breakdown of a profile's score."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ComponentStatus(str, Enum):
    """Data availability for a scoring component."""

    FULL = "full"
    PARTIAL = "partial"
    MISSING = "missing"


class ScoreComponent(BaseModel):
    """Atomic scoring unit - one contribution to the quality score."""

    name: str = Field(description="Component name (e.g., 'Company Name', 'Services')")
    scored: int = Field(description="Points earned for this component")
    possible: int = Field(description="Maximum possible points for this component")
    evidence: str = Field(description="Short explanation of the score")
    status: ComponentStatus = Field(description="Data availability: full, partial, or missing")


class QualityAssessment(BaseModel):
    """Quality score for a final profile, with its breakdown and diagnostic issues."""

    score: int = Field(ge=0, le=100, description="Sum of component points, capped at 100")
    components: List[ScoreComponent] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list, description="Human-readable gaps in the extraction")

    def component(self, name: str) -> Optional[ScoreComponent]:
        for c in self.components:
            if c.name == name:
                return c
        return None
