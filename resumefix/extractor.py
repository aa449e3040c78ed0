"""
Rule-based field extractor for pasted resume text.
Pulls name, contact, skills, experience, education, languages and a summary
out of unstructured text using label patterns and section boundaries.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import EmptyResumeError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Applicant"
BULLET = "•"

MAX_SKILLS = 12
MAX_EDUCATION = 3
MAX_EXPERIENCE_BLOCKS = 5
MIN_SUMMARY_LENGTH = 5

NAME_PATTERN = r'Name[\s:]*([A-Za-z\s]+?)(?:\n|,|$)'
EMAIL_PATTERN = r'([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})'
PHONE_PATTERN = r'(\+?\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9})'
SUMMARY_PATTERN = r'(?:Objective|Summary)[\s:]*(.*?)(?=\n|\Z)'

# Each section runs from its label to the next line starting with one of the
# stop labels, or to the end of the text.
SECTION_STOPS = {
    'Skills': ('Experience', 'Education', 'Languages', 'Objective'),
    'Education': ('Skills', 'Experience', 'Languages'),
    'Experience': ('Education', 'Skills', 'Languages'),
    'Languages': ('Skills', 'Experience', 'Education'),
}

LIST_SPLIT_PATTERN = r'[,;]|\n'
EXPERIENCE_BLOCK_PATTERN = r'\n(?=[A-Z])'


@dataclass
class ExtractedFields:
    """Structured fields pulled out of a resume. Every field is a plain string."""
    name: str = ""
    contact: str = ""
    summary: str = ""
    skills: str = ""
    experience: str = ""
    education: str = ""
    languages: str = ""


def _section_pattern(label: str, stops: tuple) -> str:
    return rf'(?:{label})[\s:]*(.*?)(?=\n(?:{"|".join(stops)})|\Z)'


def default_summary(target_role: str = "") -> str:
    """Summary line used when the resume has no usable objective."""
    return f"Dedicated professional with strong expertise in {target_role or 'multiple areas'}."


class ResumeFieldExtractor:
    """Extract structured fields from plain resume text."""

    def __init__(self):
        self.name_pattern = re.compile(NAME_PATTERN, re.IGNORECASE)
        self.email_pattern = re.compile(EMAIL_PATTERN)
        self.phone_pattern = re.compile(PHONE_PATTERN)
        self.summary_pattern = re.compile(SUMMARY_PATTERN, re.IGNORECASE | re.DOTALL)
        self.section_patterns = {
            label: re.compile(_section_pattern(label, stops), re.IGNORECASE | re.DOTALL)
            for label, stops in SECTION_STOPS.items()
        }

    def extract(self, text: str, target_role: str = "") -> ExtractedFields:
        """Extract all fields. Raises EmptyResumeError for blank text."""
        if not text or not text.strip():
            raise EmptyResumeError("Resume text cannot be empty")

        target_role = (target_role or "").strip()

        fields = ExtractedFields(
            name=self._extract_name(text),
            contact=self._extract_contact(text),
            summary=self._extract_summary(text, target_role),
            skills=self._extract_skills(text),
            experience=self._extract_experience(text),
            education=self._extract_education(text),
            languages=self._extract_languages(text),
        )

        logger.info(f"Resume fields extracted for: {fields.name}")
        return fields

    def _section(self, label: str, text: str) -> str:
        """Raw text following a section label, or empty string."""
        match = self.section_patterns[label].search(text)
        return match.group(1) if match else ""

    def _extract_name(self, text: str) -> str:
        match = self.name_pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
        return DEFAULT_NAME

    def _extract_contact(self, text: str) -> str:
        """First e-mail and first phone number, joined with a pipe."""
        parts = []
        email = self.email_pattern.search(text)
        if email:
            parts.append(email.group(1))
        phone = self.phone_pattern.search(text)
        if phone:
            parts.append(phone.group(1))
        return " | ".join(parts)

    def _split_list(self, raw: str) -> List[str]:
        items = [item.strip() for item in re.split(LIST_SPLIT_PATTERN, raw)]
        return [item for item in items if item]

    def _extract_skills(self, text: str) -> str:
        skills = self._split_list(self._section('Skills', text))
        return f"\n{BULLET} ".join(skills[:MAX_SKILLS])

    def _extract_education(self, text: str) -> str:
        lines = [line for line in self._section('Education', text).split('\n') if line.strip()]
        return f"\n{BULLET} ".join(lines[:MAX_EDUCATION])

    def _extract_experience(self, text: str) -> str:
        """Group experience lines into bulleted entries with indented details."""
        raw = self._section('Experience', text)
        blocks = [b for b in re.split(EXPERIENCE_BLOCK_PATTERN, raw) if b.strip()]

        entries = []
        for block in blocks[:MAX_EXPERIENCE_BLOCKS]:
            lines = block.strip().split('\n')
            formatted = [f"{BULLET} {lines[0]}"]
            for line in lines[1:]:
                formatted.append(line if line.startswith(BULLET) else f"  - {line}")
            entries.append('\n'.join(formatted))

        return '\n'.join(entries)

    def _extract_languages(self, text: str) -> str:
        return ", ".join(self._split_list(self._section('Languages', text)))

    def _extract_summary(self, text: str, target_role: str) -> str:
        summary = default_summary(target_role)

        match = self.summary_pattern.search(text)
        if match and len(match.group(1)) > MIN_SUMMARY_LENGTH:
            summary = match.group(1).strip()

        # Add career goal
        if 'role' not in summary and target_role:
            summary += (
                f" Seeking {target_role} role to apply technical skills"
                " and contribute to organizational growth."
            )

        return summary


def extract_fields(text: str, target_role: Optional[str] = "") -> ExtractedFields:
    """Convenience function to extract resume fields from text."""
    extractor = ResumeFieldExtractor()
    return extractor.extract(text, target_role or "")
