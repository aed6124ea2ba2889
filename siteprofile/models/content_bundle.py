"""
Pydantic model for the content bundle produced by the retrieval layer.

The bundle is the only input to the extraction pipeline: raw markup, visible
text, meta tags, parsed JSON-LD records and the final URL after redirects.
"""

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentBundle(BaseModel):
    """Immutable snapshot of one fetched homepage."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "html": '<html><head><meta name="description" content="Logistics experts"></head></html>',
                "textContent": "Acme Logistics. Our mission: To deliver excellence in logistics.",
                "metaTags": {"description": "Logistics experts", "og:site_name": "Acme"},
                "jsonLd": [{"@type": "Organization", "name": "Acme Logistics"}],
                "finalUrl": "https://acme.example.com/",
            }
        },
    )

    html: str = Field("", description="Raw page markup")
    text_content: str = Field("", alias="textContent", description="Visible text with scripts/styles removed")
    meta_tags: dict[str, str] = Field(
        default_factory=dict, alias="metaTags", description="Meta tag name/property -> content"
    )
    json_ld: list[Any] = Field(default_factory=list, alias="jsonLd", description="Parsed JSON-LD records, in page order")
    final_url: str = Field(..., alias="finalUrl", description="URL after redirects")

    @field_validator("html", "text_content", mode="before")
    @classmethod
    def none_to_empty_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("meta_tags", mode="before")
    @classmethod
    def none_to_empty_mapping(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("json_ld", mode="before")
    @classmethod
    def none_to_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("final_url")
    @classmethod
    def validate_final_url(cls, v: str) -> str:
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"final_url must be an http(s) URL, got {v!r}")
        return v
