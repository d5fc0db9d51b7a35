"""Text handling rules for the materials list format.

Policy:
- Split lines on CRLF; bare LF is accepted too, a lone CR is not a break.
- Keys are taken exactly as written (no case folding, no trimming).
- Values are trimmed of surrounding whitespace.
- A flag is true only for the literal "true", ignoring case and padding.
"""

from __future__ import annotations

from typing import List


def split_lines(text: str) -> List[str]:
    """Split raw file content into lines, keeping empty ones so indexes match the file."""
    return (text or "").replace("\r\n", "\n").split("\n")


def clean_value(text: str) -> str:
    return (text or "").strip()


def parse_flag(text: str) -> bool:
    """Map free text to a boolean. Anything other than "true" is False, never an error."""
    return clean_value(text).lower() == "true"
