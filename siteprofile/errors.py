"""
Exception types for the profile extraction pipeline.

Extraction itself never raises on bad page content: malformed records and
pattern misses degrade to "nothing found". These exceptions cover caller
mistakes only (bad configuration, a bundle that fails validation).
"""


class SiteProfileError(Exception):
    """Base class for all siteprofile errors."""


class ConfigError(SiteProfileError, ValueError):
    """Raised when extraction configuration is invalid."""


class InvalidContentBundleError(SiteProfileError, ValueError):
    """Raised when a content bundle handed to the pipeline fails validation."""
