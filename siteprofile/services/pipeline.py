"""
Profile pipeline - turns one content bundle into a scored business profile.

Stages, strictly in order:
1. Extract: one partial profile per source (structured, meta, text)
2. Reconcile: fold partials least reliable first
3. Filter: drop denylisted services/products
4. Classify: assign a business archetype
5. Finalize: de-duplicate and fill placeholders
6. Score: quality assessment, then the quality gate

Every call is independent: no state carries over between bundles, and the
same bundle always yields the same profile.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from ..config import ExtractionConfig
from ..errors import InvalidContentBundleError
from ..extractors.meta_tags import MetaSourceExtractor
from ..extractors.structured_data import StructuredSourceExtractor
from ..extractors.text_patterns import TextSourceExtractor
from ..models.business_profile import BusinessProfile, ConflictRecord, ExtractionSource
from ..models.content_bundle import ContentBundle
from ..models.quality import QualityAssessment
from ..utils.logger import PipelineLogger, get_logger
from ..scorers.business_classifier import BusinessClassifier
from ..scorers.quality_scorer import QualityScorer
from ..validators.policy_filter import PolicyFilter
from ..validators.quality_gate import GateDecision, QualityGate
from .finalize import finalize_profile
from .reconciler import Reconciler


@dataclass
class PipelineResult:
    """Everything the pipeline learned about one bundle.

    Attributes:
        profile: Final profile (merged, filtered, classified, finalized, scored)
        assessment: Quality score breakdown and issues
        gate: Whether the profile may proceed to generation
        conflicts: Fields where sources disagreed, with the winning source
        partials: Per-source partial profiles, for audit
    """

    profile: BusinessProfile
    assessment: QualityAssessment
    gate: GateDecision
    conflicts: list[ConflictRecord] = field(default_factory=list)
    partials: dict[ExtractionSource, BusinessProfile] = field(default_factory=dict)

    @property
    def admitted(self) -> bool:
        return self.gate.admitted

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "profile": self.profile.model_dump(mode="json"),
            "assessment": self.assessment.model_dump(mode="json"),
            "gate": self.gate.to_dict(),
            "conflicts": [c.model_dump(mode="json") for c in self.conflicts],
        }


def coerce_bundle(bundle: Union[ContentBundle, Mapping[str, Any]]) -> ContentBundle:
    """
    Accept a ContentBundle or a plain mapping in the retrieval layer's shape.

    Raises:
        InvalidContentBundleError: If the mapping fails validation
    """
    if isinstance(bundle, ContentBundle):
        return bundle
    if not isinstance(bundle, Mapping):
        raise InvalidContentBundleError(f"Expected a ContentBundle or mapping, got {type(bundle).__name__}")
    try:
        return ContentBundle.model_validate(dict(bundle))
    except ValidationError as e:
        raise InvalidContentBundleError(f"Invalid content bundle: {e}") from e


class ProfilePipeline:
    """Composes extractors, reconciler, filter, classifier and scorer."""

    def __init__(self, config: Optional[ExtractionConfig] = None, logger: Optional[PipelineLogger] = None):
        """
        Initialize the pipeline from configuration.

        Args:
            config: Extraction configuration (defaults to built-in values)
            logger: PipelineLogger for run summaries, rejections and failures
                (defaults to the shared "siteprofile.pipeline" logger)
        """
        self.config = config or ExtractionConfig()
        self.logger = logger or get_logger(name="siteprofile.pipeline")

        self.policy = PolicyFilter(self.config.excluded_terms)
        self.structured = StructuredSourceExtractor(
            policy=self.policy,
            social_platforms=self.config.social_platforms,
            default_team_role=self.config.default_team_role,
        )
        self.meta = MetaSourceExtractor()
        self.text = TextSourceExtractor(
            policy=self.policy,
            webmail_domains=self.config.webmail_domains,
            contact_email_markers=self.config.contact_email_markers,
            api_doc_markers=self.config.api_doc_markers,
        )
        self.reconciler = Reconciler()
        self.classifier = BusinessClassifier(self.config.business_type_keywords)
        self.scorer = QualityScorer(
            placeholder_company_name=self.config.placeholder_company_name,
            placeholder_description=self.config.placeholder_description,
        )
        self.gate = QualityGate(self.config.min_quality_score)

    def run(self, bundle: Union[ContentBundle, Mapping[str, Any]]) -> PipelineResult:
        """
        Process one content bundle end to end.

        Args:
            bundle: ContentBundle, or a mapping validated into one

        Returns:
            PipelineResult; a gate rejection is reported, never raised

        Raises:
            InvalidContentBundleError: If the bundle fails validation
        """
        bundle = coerce_bundle(bundle)
        with self.logger.time_operation("extraction", bundle.final_url):
            return self._run(bundle)

    def _run(self, bundle: ContentBundle) -> PipelineResult:
        partials = self.extract_partials(bundle)
        conflicts = self.reconciler.detect_conflicts(partials)

        merged = self.reconciler.reconcile(partials)
        self.policy.apply(merged)
        merged.business_type = self.classifier.classify(merged)

        profile = finalize_profile(
            merged,
            placeholder_company_name=self.config.placeholder_company_name,
            placeholder_description=self.config.placeholder_description,
        )
        assessment = self.scorer.evaluate(profile)
        profile.quality_score = assessment.score
        gate = self.gate.evaluate(assessment.score)

        self.logger.info(f"Extracted profile from {bundle.final_url}", **profile.to_summary())
        if assessment.issues:
            self.logger.debug(f"Extraction issues for {bundle.final_url}: {'; '.join(assessment.issues)}")
        if not gate.admitted:
            self.logger.warning(
                "Quality gate rejected profile", url=bundle.final_url, score=gate.score, min_score=gate.min_score
            )

        return PipelineResult(
            profile=profile,
            assessment=assessment,
            gate=gate,
            conflicts=conflicts,
            partials=partials,
        )

    def extract_partials(self, bundle: ContentBundle) -> dict[ExtractionSource, BusinessProfile]:
        """
        Run the three source extractors.

        The extractors share no state, so running them on a thread pool
        gives the same result as running them in sequence.
        """
        tasks: dict[ExtractionSource, Callable[[], BusinessProfile]] = {
            ExtractionSource.STRUCTURED: lambda: self.structured.extract(bundle.json_ld),
            ExtractionSource.META: lambda: self.meta.extract(bundle.meta_tags),
            ExtractionSource.TEXT: lambda: self.text.extract(bundle.text_content, bundle.html),
        }

        if not self.config.parallel_sources:
            return {source: self._run_extractor(source, task) for source, task in tasks.items()}

        partials: dict[ExtractionSource, BusinessProfile] = {}
        with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
            future_to_source = {
                executor.submit(self._run_extractor, source, task): source for source, task in tasks.items()
            }
            for future in as_completed(future_to_source):
                partials[future_to_source[future]] = future.result()

        # Keep source order stable for audit output
        return {source: partials[source] for source in tasks}

    def _run_extractor(self, source: ExtractionSource, task: Callable[[], BusinessProfile]) -> BusinessProfile:
        """A failing source degrades to an empty partial; the other sources still count."""
        try:
            return task()
        except Exception as e:
            self.logger.error(f"{source.value} extraction failed", exception=e)
            return BusinessProfile()


def extract_profile(
    bundle: Union[ContentBundle, Mapping[str, Any]],
    config: Optional[ExtractionConfig] = None,
) -> BusinessProfile:
    """
    Functional entry point: bundle in, final profile out.

    Args:
        bundle: ContentBundle or mapping in the retrieval layer's shape
        config: Optional configuration (defaults to built-in values)

    Returns:
        Final BusinessProfile with business_type and quality_score set
    """
    return ProfilePipeline(config).run(bundle).profile
