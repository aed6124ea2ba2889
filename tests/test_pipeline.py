"""End-to-end tests: content bundle in, scored profile out."""

import io
import json

import pytest
from siteprofile.config import ExtractionConfig
from siteprofile.errors import InvalidContentBundleError
from siteprofile.models import BusinessType, ContentBundle, ExtractionSource
from siteprofile.services.pipeline import ProfilePipeline, extract_profile
from siteprofile.utils.logger import PipelineLogger

# ─── Worked examples ────────────────────────────────────────────────────────


class TestWorkedExamples:
    """Examples that pin observable behaviour."""

    def test_structured_name_wins_over_meta(self):
        bundle = ContentBundle(
            json_ld=[
                {
                    "@type": "Organization",
                    "name": "Acme Corp - Official",
                    "sameAs": ["https://facebook.com/acme"],
                }
            ],
            meta_tags={"og:site_name": "Acme"},
            final_url="https://acme.com/",
        )
        profile = extract_profile(bundle)

        assert profile.company_name == "Acme Corp - Official"
        assert profile.contact_info.social_media == {"facebook": "https://facebook.com/acme"}

    def test_mission_from_text(self):
        bundle = ContentBundle(
            text_content="Our mission:   To deliver excellence in logistics.  ",
            final_url="https://acme.com/",
        )
        assert extract_profile(bundle).mission == "To deliver excellence in logistics."

    def test_name_description_and_record_scores_forty(self):
        bundle = ContentBundle(
            json_ld=[{"@type": "Organization", "name": "Acme", "description": "Acme builds things."}],
            final_url="https://acme.com/",
        )
        profile = extract_profile(bundle)
        assert profile.quality_score == 40


# ─── Full bundle ────────────────────────────────────────────────────────────


class TestProfilePipeline:
    """All three sources together."""

    def test_sample_bundle(self, sample_bundle):
        result = ProfilePipeline().run(sample_bundle)
        profile = result.profile

        assert profile.company_name == "Acme Logistics"
        assert profile.description == "Acme moves freight across North America."
        assert profile.tagline == "Freight, handled"
        assert profile.mission == "To deliver excellence in logistics."
        assert profile.services == ["Freight Consulting", "Warehousing", "Customs Brokerage", "Last-mile Delivery"]
        assert profile.products == ["Route Planner", "Fleet Tracker"]
        assert profile.team_info == ["Jane Doe — CEO", "John Roe — Team Member"]
        assert profile.api_docs is True

        contact = profile.contact_info
        assert contact.email == "info@acme-logistics.com"
        assert contact.phone == "+1-555-123-4567"
        assert contact.address == "1 Main St, Springfield, IL, 62701, US"
        assert set(contact.social_media) == {"facebook", "linkedin"}

        assert profile.business_type == BusinessType.CATALOG
        assert profile.quality_score == 92
        assert result.assessment.score == 92
        assert result.admitted is True

    def test_conflicts_reported(self, sample_bundle):
        result = ProfilePipeline().run(sample_bundle)
        assert [c.field_name for c in result.conflicts] == [
            "tagline",
            "description",
            "contact_info.email",
            "contact_info.phone",
        ]
        assert {c.selected_source for c in result.conflicts} == {"structured"}

    def test_partials_kept(self, sample_bundle):
        result = ProfilePipeline().run(sample_bundle)
        assert list(result.partials) == [ExtractionSource.STRUCTURED, ExtractionSource.META, ExtractionSource.TEXT]
        assert result.partials[ExtractionSource.META].company_name == "Acme Logistics"
        assert result.partials[ExtractionSource.TEXT].contact_info.email == "contact@acme-logistics.com"

    def test_mapping_input(self, sample_bundle_dict, sample_bundle):
        """camelCase mappings from the retrieval layer are accepted."""
        from_dict = extract_profile(sample_bundle_dict)
        from_model = extract_profile(sample_bundle)
        assert from_dict == from_model

    def test_deterministic(self, sample_bundle):
        pipeline = ProfilePipeline()
        first = pipeline.run(sample_bundle).profile
        second = pipeline.run(sample_bundle).profile
        assert first == second

    def test_parallel_matches_sequential(self, sample_bundle):
        sequential = ProfilePipeline(ExtractionConfig(parallel_sources=False)).run(sample_bundle)
        parallel = ProfilePipeline(ExtractionConfig(parallel_sources=True)).run(sample_bundle)
        assert parallel.profile == sequential.profile
        assert list(parallel.partials) == list(sequential.partials)

    def test_denylist_holds_after_pipeline(self):
        bundle = ContentBundle(
            text_content="Services: Consulting, Payment Gateway, Support.",
            json_ld=[{"@type": "Product", "name": "Password Manager"}, {"@type": "Product", "name": "Router"}],
            final_url="https://acme.com/",
        )
        profile = extract_profile(bundle, ExtractionConfig())
        assert profile.services == ["Consulting", "Support"]
        assert profile.products == ["Router"]

    def test_config_injected(self, sample_bundle):
        config = ExtractionConfig(excluded_terms=["warehous"], min_quality_score=95)
        result = ProfilePipeline(config).run(sample_bundle)
        assert "Warehousing" not in result.profile.services
        assert result.admitted is False
        assert result.gate.min_score == 95

    def test_result_serializable(self, sample_bundle):
        payload = ProfilePipeline().run(sample_bundle).to_dict()
        decoded = json.loads(json.dumps(payload))
        assert decoded["profile"]["business_type"] == "catalog"
        assert decoded["gate"]["admitted"] is True


# ─── Sparse and invalid input ───────────────────────────────────────────────


class TestSparseInput:
    """Pipeline always terminates with a profile."""

    def test_empty_bundle_rejected_by_gate(self, empty_bundle):
        result = ProfilePipeline().run(empty_bundle)

        assert result.profile.company_name == "Company Name"
        assert result.profile.description == "No description available."
        assert result.profile.quality_score == 0
        assert result.admitted is False
        assert len(result.assessment.issues) == 4
        assert result.conflicts == []

    def test_invalid_url(self, sample_bundle_dict):
        sample_bundle_dict["finalUrl"] = "not a url"
        with pytest.raises(InvalidContentBundleError):
            ProfilePipeline().run(sample_bundle_dict)

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/search?q=a,b",
            "https://example.com/page;jsessionid=1",
            "http://localhost:8080/",
            "https://example.com/it's",
        ],
    )
    def test_unusual_valid_urls_processed(self, url):
        """Punctuation in the path or a bare host never aborts the run."""
        bundle = {"jsonLd": [{"@type": "Organization", "name": "Acme"}], "finalUrl": url}
        profile = extract_profile(bundle)
        assert profile.company_name == "Acme"

    def test_missing_url(self):
        with pytest.raises(InvalidContentBundleError):
            extract_profile({"html": "<p>hi</p>"})

    def test_not_a_mapping(self):
        with pytest.raises(InvalidContentBundleError):
            extract_profile(["https://acme.com"])

    def test_null_fields_coerced(self):
        bundle = {"html": None, "textContent": None, "metaTags": None, "jsonLd": None, "finalUrl": "https://a.io"}
        assert extract_profile(bundle).quality_score == 0

    def test_failing_source_degrades(self, sample_bundle):
        """One broken extractor leaves the other sources' data intact."""
        stream = io.StringIO()
        log = PipelineLogger(name="test.pipeline.failing", stream=stream)
        pipeline = ProfilePipeline(logger=log)

        def broken(meta_tags):
            raise RuntimeError("meta parser exploded")

        pipeline.meta.extract = broken
        result = pipeline.run(sample_bundle)

        assert result.profile.company_name == "Acme Logistics"
        assert len(log.errors) == 1
        assert log.errors[0]["exception"] == "meta parser exploded"
        output = stream.getvalue()
        assert "meta extraction failed | Exception: meta parser exploded" in output
        assert "Traceback" in output


# ─── Logging ────────────────────────────────────────────────────────────────


class TestPipelineLogging:
    def test_summary_logged(self, sample_bundle):
        stream = io.StringIO()
        pipeline = ProfilePipeline(logger=PipelineLogger(name="test.pipeline.summary", stream=stream))
        pipeline.run(sample_bundle)

        output = stream.getvalue()
        assert "Extracted profile from https://www.acme-logistics.com/" in output
        assert "quality_score=92" in output

    def test_rejection_tracked(self, empty_bundle):
        stream = io.StringIO()
        log = PipelineLogger(name="test.pipeline.rejection", stream=stream)
        result = ProfilePipeline(logger=log).run(empty_bundle)

        assert result.admitted is False
        assert len(log.warnings) == 1
        assert log.warnings[0]["data"]["score"] == 0
        assert log.warnings[0]["data"]["min_score"] == 20
        assert "Quality gate rejected profile" in stream.getvalue()

    def test_admitted_profile_not_warned(self, sample_bundle):
        log = PipelineLogger(name="test.pipeline.admitted", stream=io.StringIO())
        ProfilePipeline(logger=log).run(sample_bundle)
        assert log.warnings == []
        assert log.errors == []

    def test_stage_failure_logged_and_raised(self, sample_bundle):
        """An error past extraction is recorded with the bundle URL, then propagates."""
        log = PipelineLogger(name="test.pipeline.stage_failure", stream=io.StringIO())
        pipeline = ProfilePipeline(logger=log)

        def broken(profile):
            raise RuntimeError("scorer exploded")

        pipeline.scorer.evaluate = broken
        with pytest.raises(RuntimeError, match="scorer exploded"):
            pipeline.run(sample_bundle)

        assert len(log.errors) == 1
        assert log.errors[0]["message"].startswith("Failed extraction | Exception: scorer exploded")
        assert log.errors[0]["data"]["url"] == "https://www.acme-logistics.com/"
