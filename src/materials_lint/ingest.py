"""Reader for the line-based materials list.

Format (one entry per list item, CRLF line endings):

    -
    name: Some course
    recommended: true
    reference: https://example.com/course

A line that is exactly ``-`` starts a new entry. Any other line containing a
``:`` after trimming is a key/value pair; everything else is skipped. This is
not YAML and is not parsed as such.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import ReadFailure
from .normalize import clean_value, parse_flag, split_lines

MATERIAL_FIELDS = ("name", "recommended", "why", "where", "price", "duration", "reference")

LIST_MARKER = "list-marker"
KEY_VALUE = "key-value"
UNRECOGNIZED = "unrecognized"


@dataclass
class Material:
    name: str = ""
    recommended: bool = False
    why: str = ""
    where: str = ""
    price: str = ""
    duration: str = ""
    reference: str = ""
    source_line: int = 0  # 0-based line where the entry began (diagnostics only)


@dataclass
class LineToken:
    kind: str
    key: str = ""
    value: str = ""


def classify_line(line: str) -> LineToken:
    """Classify one raw line as a list marker, a key/value pair, or noise.

    The marker must be exactly ``-``; surrounding whitespace makes it noise.
    Keys keep whatever whitespace sits between them and the colon.
    """
    if line == "-":
        return LineToken(LIST_MARKER)
    stripped = line.strip()
    key, sep, value = stripped.partition(":")
    if not sep:
        return LineToken(UNRECOGNIZED)
    return LineToken(KEY_VALUE, key=key, value=clean_value(value))


def _apply_field(material: Material, key: str, value: str) -> None:
    if key == "recommended":
        material.recommended = parse_flag(value)
    elif key in MATERIAL_FIELDS:
        setattr(material, key, value)
    # Unknown keys are ignored.


def parse_materials(text: str) -> List[Material]:
    """Parse list content into materials, in input order.

    Never fails: malformed lines are skipped and repeated keys overwrite.
    A key/value line seen before any marker opens an entry on its own, and
    that entry's source_line points at the key/value line instead of a marker.
    """
    materials: List[Material] = []
    current: Optional[Material] = None
    for idx, line in enumerate(split_lines(text)):
        token = classify_line(line)
        if token.kind == LIST_MARKER:
            if current is not None:
                materials.append(current)
            current = Material(source_line=idx)
        elif token.kind == KEY_VALUE:
            if current is None:
                current = Material(source_line=idx)
            _apply_field(current, token.key, token.value)
    if current is not None:
        materials.append(current)
    return materials


def read_materials(path: str | Path) -> List[Material]:
    path = Path(path)
    try:
        # newline="" keeps a lone CR inside its line; split_lines handles CRLF.
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ReadFailure(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise ReadFailure(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ReadFailure(path, e.strerror or str(e)) from e
    return parse_materials(text)
