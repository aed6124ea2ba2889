"""
Default constants for profile extraction.

Centralizes the denylist, keyword sets and lookup tables used throughout
the pipeline. Components never read these directly at call time; they are
copied into ExtractionConfig and injected through constructors.
"""

# Content Policy
# Case-insensitive substrings that must never reach generated output
EXCLUDED_CONTENT = [
    "pricing",
    "price",
    "cost",
    "fee",
    "payment",
    "credit card",
    "api key",
    "password",
    "secret",
    "private",
    "confidential",
]

# Business Classification
# Ties resolve catalog > ecosystem > specialist (see BusinessClassifier)
BUSINESS_TYPE_KEYWORDS = {
    "catalog": ["marketplace", "platform", "directory", "listing", "catalog", "database"],
    "specialist": ["agency", "consultant", "expert", "specialist", "professional", "service"],
    "ecosystem": ["suite", "ecosystem", "integrated", "all-in-one", "complete solution"],
}

# Social Platforms
# Domain substring -> platform name; first match wins
SOCIAL_PLATFORMS = {
    "facebook.com": "facebook",
    "twitter.com": "twitter",
    "x.com": "twitter",
    "linkedin.com": "linkedin",
    "instagram.com": "instagram",
    "youtube.com": "youtube",
    "github.com": "github",
}

# Text Extraction
WEBMAIL_DOMAINS = ["gmail.", "yahoo.", "hotmail."]  # Consumer mailboxes, never a company contact
CONTACT_EMAIL_MARKERS = ["contact", "info", "support", "sales"]
API_DOC_MARKERS = ["api", "developer", "docs"]

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
PHONE_PATTERN = r"(\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})"
SERVICES_PATTERN = r"(?:services|what we do|our solutions)[:\s]+([^.]+\.)"
MISSION_PATTERN = r"(?:our mission|mission statement)[:\s]+([^.]+\.)"

# Placeholders
PLACEHOLDER_COMPANY_NAME = "Company Name"
PLACEHOLDER_DESCRIPTION = "No description available."
DEFAULT_TEAM_ROLE = "Team Member"

# Quality Thresholds
MIN_QUALITY_SCORE = 20  # Below this, generation is not worth running
MAX_QUALITY_SCORE = 100
