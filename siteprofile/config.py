"""
Central configuration for profile extraction.

All tunable data (denylist terms, archetype keywords, social platform table,
quality threshold) lives in ExtractionConfig and is passed to each component
through its constructor. Defaults come from constants.py; a YAML file can
override any field.

Configure via environment variables:
  - SITEPROFILE_CONFIG (path to a YAML file; default: config/extraction.yaml)
  - SITEPROFILE_MIN_QUALITY_SCORE (overrides min_quality_score)
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from . import constants
from .errors import ConfigError

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class ExtractionConfig:
    """Configuration for the extraction pipeline.

    Attributes:
        excluded_terms: Policy denylist, matched as case-insensitive substrings
        business_type_keywords: Archetype -> keywords (catalog, specialist, ecosystem)
        social_platforms: Domain substring -> platform name
        webmail_domains: Email domain fragments that are never company contacts
        contact_email_markers: Local-part fragments that mark a contact address
        api_doc_markers: Link target/label fragments that indicate API docs
        placeholder_company_name: Filled in when no source resolves a name
        placeholder_description: Filled in when no source resolves a description
        default_team_role: Role used for people listed without a job title
        min_quality_score: Profiles scoring below this are not admitted to generation
        parallel_sources: Run the three source extractors on a thread pool
    """

    excluded_terms: list[str] = field(default_factory=lambda: list(constants.EXCLUDED_CONTENT))
    business_type_keywords: dict[str, list[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in constants.BUSINESS_TYPE_KEYWORDS.items()}
    )
    social_platforms: dict[str, str] = field(default_factory=lambda: dict(constants.SOCIAL_PLATFORMS))
    webmail_domains: list[str] = field(default_factory=lambda: list(constants.WEBMAIL_DOMAINS))
    contact_email_markers: list[str] = field(default_factory=lambda: list(constants.CONTACT_EMAIL_MARKERS))
    api_doc_markers: list[str] = field(default_factory=lambda: list(constants.API_DOC_MARKERS))

    placeholder_company_name: str = constants.PLACEHOLDER_COMPANY_NAME
    placeholder_description: str = constants.PLACEHOLDER_DESCRIPTION
    default_team_role: str = constants.DEFAULT_TEAM_ROLE

    min_quality_score: int = constants.MIN_QUALITY_SCORE
    parallel_sources: bool = False

    def __post_init__(self):
        if not 0 <= self.min_quality_score <= constants.MAX_QUALITY_SCORE:
            raise ConfigError(
                f"min_quality_score must be between 0 and {constants.MAX_QUALITY_SCORE}, got {self.min_quality_score}"
            )
        for archetype in ("catalog", "specialist", "ecosystem"):
            if not self.business_type_keywords.get(archetype):
                raise ConfigError(f"business_type_keywords.{archetype} must be a non-empty list")
        unknown = set(self.business_type_keywords) - {"catalog", "specialist", "ecosystem"}
        if unknown:
            raise ConfigError(f"Unknown business types in business_type_keywords: {sorted(unknown)}")

        # Matching is lowercase throughout
        self.excluded_terms = [t.strip().lower() for t in self.excluded_terms if t and t.strip()]
        self.business_type_keywords = {
            k: [kw.strip().lower() for kw in v if kw and kw.strip()] for k, v in self.business_type_keywords.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractionConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        extra = set(data) - known
        if extra:
            raise ConfigError(f"Unknown configuration keys: {sorted(extra)}")
        return cls(**data)


def get_config_path() -> Path:
    """
    Get the configuration file path.

    Uses SITEPROFILE_CONFIG environment variable if set, otherwise defaults
    to config/extraction.yaml at the repository root.

    Returns:
        Path to the YAML configuration file
    """
    env_path = os.environ.get("SITEPROFILE_CONFIG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path(__file__).parent.parent / "config" / "extraction.yaml"


def load_config(path: Optional[Path] = None) -> ExtractionConfig:
    """
    Load extraction configuration from YAML, falling back to built-in defaults.

    Args:
        path: Optional explicit path; defaults to get_config_path()

    Returns:
        ExtractionConfig

    Raises:
        ConfigError: If the file is not a mapping or contains unknown/invalid values
    """
    config_path = Path(path) if path is not None else get_config_path()

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(raw).__name__}")
        data.update(raw)
        logger.debug(f"Loaded extraction config from {config_path}")
    else:
        logger.warning(f"Extraction config not found at {config_path}, using defaults")

    env_min_score = os.environ.get("SITEPROFILE_MIN_QUALITY_SCORE")
    if env_min_score:
        try:
            data["min_quality_score"] = int(env_min_score)
        except ValueError as e:
            raise ConfigError(f"SITEPROFILE_MIN_QUALITY_SCORE must be an integer, got {env_min_score!r}") from e

    return ExtractionConfig.from_dict(data)
