"""
Document renderer.
Turns extracted resume fields into the labeled plain-text document and into
the styled HTML page handed to the PDF engine.
"""

import logging
import re
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Dict, List, Tuple

from jinja2 import Environment, FileSystemLoader

from .extractor import DEFAULT_NAME, ExtractedFields, default_summary

logger = logging.getLogger(__name__)

DEFAULT_RESUME_TYPE = "Modern Professional"

# Label vocabulary shared by render_labeled_text and parse_labeled_text.
# Order is the order sections are written in.
SECTION_LABELS: List[Tuple[str, str]] = [
    ("name", "NAME"),
    ("contact", "CONTACT"),
    ("summary", "PROFESSIONAL SUMMARY"),
    ("skills", "SKILLS"),
    ("experience", "WORK EXPERIENCE"),
    ("education", "EDUCATION"),
    ("languages", "LANGUAGES"),
]

# Written even when the underlying field is empty, with a fallback value
ALWAYS_PRESENT = ("name", "summary")

_BASE_CSS = """
      body{font-family:%(font)s; max-width:800px; margin:24px auto; color:#111}
      h1{font-size:%(title_size)s;margin:0}
      .contact{margin-bottom:14px;color:#555}
      .section{margin-top:%(section_gap)s}
      .section h2{font-size:14px;border-bottom:1px solid %(rule)s;padding-bottom:6px;color:#333}
      .bullet{margin-left:18px}
      pre{white-space:pre-wrap;font-family:inherit}
"""

RESUME_STYLES: Dict[str, str] = {
    "Modern Professional": _BASE_CSS % {
        "font": "Arial,Helvetica,sans-serif",
        "title_size": "20px",
        "section_gap": "12px",
        "rule": "#eee",
    },
    "Classic": _BASE_CSS % {
        "font": "Georgia,'Times New Roman',serif",
        "title_size": "22px",
        "section_gap": "14px",
        "rule": "#333",
    },
    "Compact": _BASE_CSS % {
        "font": "Arial,Helvetica,sans-serif",
        "title_size": "18px",
        "section_gap": "6px",
        "rule": "#ddd",
    },
}

_TEMPLATE_DIR = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)), autoescape=True)


def resolve_style(resume_type: str) -> str:
    """Stylesheet for a resume type, falling back to the default look."""
    if resume_type in RESUME_STYLES:
        return RESUME_STYLES[resume_type]
    if resume_type:
        logger.warning(f"Unknown resume type '{resume_type}', using {DEFAULT_RESUME_TYPE}")
    return RESUME_STYLES[DEFAULT_RESUME_TYPE]


def render_labeled_text(resume: ExtractedFields) -> str:
    """Write the fields as labeled lines in fixed order, skipping empty optional sections."""
    fallbacks = {"name": DEFAULT_NAME, "summary": default_summary()}
    lines = []
    for field_name, label in SECTION_LABELS:
        value = getattr(resume, field_name)
        if field_name in ALWAYS_PRESENT:
            value = value or fallbacks[field_name]
        elif not value:
            continue
        lines.append(f"{label}: {value}\n")
    return "".join(lines)


def _label_pattern(label: str) -> re.Pattern:
    stops = "|".join(re.escape(other) for _, other in SECTION_LABELS)
    return re.compile(
        rf'(?:^|\n){re.escape(label)}: ?(.*?)(?=\n(?:{stops}):|\Z)',
        re.IGNORECASE | re.DOTALL,
    )


_LABEL_PATTERNS = {field_name: _label_pattern(label) for field_name, label in SECTION_LABELS}


def parse_labeled_text(text: str) -> ExtractedFields:
    """Recover the fields from labeled text. A missing NAME becomes 'Applicant'."""
    values = {}
    for field_name, pattern in _LABEL_PATTERNS.items():
        match = pattern.search(text or "")
        values[field_name] = match.group(1).rstrip("\n") if match else ""

    if not values["name"].strip():
        values["name"] = DEFAULT_NAME

    return ExtractedFields(**values)


def to_markup(resume: ExtractedFields, resume_type: str = DEFAULT_RESUME_TYPE) -> str:
    """Render the fields into the HTML page template."""
    template = env.get_template("resume.html")
    context = {f.name: getattr(resume, f.name) for f in dataclass_fields(resume)}
    context["name"] = context["name"] or DEFAULT_NAME
    return template.render(r=context, css=resolve_style(resume_type))


def labeled_text_to_markup(text: str, resume_type: str = DEFAULT_RESUME_TYPE) -> str:
    """Render an HTML page straight from labeled text."""
    return to_markup(parse_labeled_text(text), resume_type)
