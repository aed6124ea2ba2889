"""
Extractors module for homepage profile extraction.

This module contains one extractor per content source, most reliable first:
- structured_data: JSON-LD records
- meta_tags: description/title meta tags
- text_patterns: regex extraction over visible text and markup
"""

from .meta_tags import MetaSourceExtractor, clean_company_name
from .structured_data import StructuredSourceExtractor, format_address, identify_social_platform
from .text_patterns import TextSourceExtractor

__all__ = [
    "StructuredSourceExtractor",
    "MetaSourceExtractor",
    "TextSourceExtractor",
    "clean_company_name",
    "format_address",
    "identify_social_platform",
]
