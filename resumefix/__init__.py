"""
SmartResumeFix

Turns a pasted plain-text resume into a formatted, downloadable PDF after
a Razorpay payment has been verified.
"""

from .extractor import extract_fields, ExtractedFields, ResumeFieldExtractor
from .renderer import render_labeled_text, parse_labeled_text, to_markup, labeled_text_to_markup
from .pipeline import ResumePipeline, GenerationRequest, GenerationResult
from .config import Settings, load_settings

__version__ = "1.0.0"
__all__ = [
    "extract_fields",
    "render_labeled_text",
    "parse_labeled_text",
    "to_markup",
    "labeled_text_to_markup",
    "load_settings",
    "ExtractedFields",
    "ResumeFieldExtractor",
    "ResumePipeline",
    "GenerationRequest",
    "GenerationResult",
    "Settings",
]
