#!/usr/bin/env python3
"""
SmartResumeFix - CLI Entry Point

Reformats a plain-text resume offline (no payment) and writes the labeled
text, the HTML page or the PDF.

Usage:
    python -m resumefix.main --input resume.txt --role "Backend Engineer" --output resume.pdf
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .exceptions import ResumeFixError
from .extractor import extract_fields
from .pdf import HtmlPdfRenderer
from .renderer import DEFAULT_RESUME_TYPE, RESUME_STYLES, render_labeled_text, to_markup


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SmartResumeFix - Turn pasted resume text into a formatted resume",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m resumefix.main -i resume.txt --text
    python -m resumefix.main -i resume.txt -r "Data Analyst" --html -o resume.html
    python -m resumefix.main -i resume.txt -t Classic -o resume.pdf
        """
    )

    parser.add_argument(
        "-i", "--input",
        type=str,
        required=True,
        help="Path to plain-text resume file"
    )

    parser.add_argument(
        "-r", "--role",
        type=str,
        default="",
        help="Target role used in the professional summary"
    )

    parser.add_argument(
        "-t", "--type",
        type=str,
        default=DEFAULT_RESUME_TYPE,
        choices=sorted(RESUME_STYLES),
        help=f"Resume style (default: {DEFAULT_RESUME_TYPE})"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default="resume.pdf",
        help="Output file (default: resume.pdf)"
    )

    output_format = parser.add_mutually_exclusive_group()
    output_format.add_argument(
        "--text",
        action="store_true",
        help="Print the labeled text instead of writing a file"
    )
    output_format.add_argument(
        "--html",
        action="store_true",
        help="Write the HTML page instead of a PDF"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def load_file(path: str) -> str:
    """Load content from a file."""
    file_path = Path(path)
    if not file_path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    resume_text = load_file(args.input)

    try:
        fields = extract_fields(resume_text, args.role)

        if args.text:
            print(render_labeled_text(fields), end="")
            return 0

        html = to_markup(fields, args.type)
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if args.html:
            output_path.write_text(html, encoding="utf-8")
        else:
            output_path.write_bytes(asyncio.run(HtmlPdfRenderer().render(html)))
    except ResumeFixError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1

    print(f"Resume for {fields.name} saved to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
