"""Utility modules: logging and markup parsing."""

from .html_parsing import bundle_from_html, extract_json_ld, extract_meta_tags, extract_visible_text
from .logger import MillisecondsFormatter, PipelineLogger, configure_global_logging, get_logger

__all__ = [
    "bundle_from_html",
    "extract_json_ld",
    "extract_meta_tags",
    "extract_visible_text",
    "MillisecondsFormatter",
    "PipelineLogger",
    "configure_global_logging",
    "get_logger",
]
