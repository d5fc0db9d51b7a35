"""Table export and console reporting for materials."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .detect_duplicates import Repetition
from .errors import WriteFailure
from .ingest import MATERIAL_FIELDS, Material

DEFAULT_HEADERS = ["Nome", "Recomendado", "Por quê", "Onde", "Preço", "Duração", "Referência"]


@dataclass
class ExportLabels:
    """Localized text used in the exported table.

    Attributes:
        headers: Column titles, one per entry of MATERIAL_FIELDS, in that order
        recommended_true: Token written when a material is recommended
        recommended_false: Token written otherwise
    """
    headers: List[str] = field(default_factory=lambda: list(DEFAULT_HEADERS))
    recommended_true: str = "Sim"
    recommended_false: str = "Não"

    @classmethod
    def from_config(cls, data: Optional[dict]) -> "ExportLabels":
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Labels must be a mapping, got {type(data).__name__}")
        labels = cls()
        if "headers" in data:
            if not isinstance(data["headers"], list):
                raise ValueError(f"Headers must be a list, got {type(data['headers']).__name__}")
            headers = list(data["headers"])
            if len(headers) != len(MATERIAL_FIELDS):
                raise ValueError(
                    f"Expected {len(MATERIAL_FIELDS)} headers ({', '.join(MATERIAL_FIELDS)}), got {len(headers)}"
                )
            labels.headers = headers
        labels.recommended_true = data.get("recommended_true", labels.recommended_true)
        labels.recommended_false = data.get("recommended_false", labels.recommended_false)
        return labels


def materials_to_rows(materials: Iterable[Material], labels: ExportLabels) -> List[List[str]]:
    rows = []
    for m in materials:
        row = []
        for name in MATERIAL_FIELDS:
            if name == "recommended":
                row.append(labels.recommended_true if m.recommended else labels.recommended_false)
            else:
                row.append(getattr(m, name))
        rows.append(row)
    return rows


def write_materials_csv(
    path: str | Path,
    materials: Iterable[Material],
    delimiter: str = ";",
    labels: Optional[ExportLabels] = None,
) -> None:
    """Write materials as a delimited table with a localized header row.

    Args:
        path: Output file path (parent directories are created)
        materials: Materials in the order they should appear
        delimiter: Single-character field separator
        labels: Header and recommended tokens (defaults to Portuguese)

    Note:
        Values are written verbatim; fields containing the delimiter, quotes
        or line breaks are quoted by the csv writer.
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    labels = labels or ExportLabels()
    path = Path(path)
    rows = materials_to_rows(materials, labels)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(labels.headers)
            writer.writerows(rows)
    except OSError as e:
        raise WriteFailure(path, e.strerror or str(e)) from e


def print_repetitions(repetitions: Iterable[Repetition]) -> None:
    for r in repetitions:
        print(r)


def print_summary(materials: Sequence[Material], repetitions: Sequence[Repetition]) -> None:
    """Print counts of materials and repetitions per field."""
    counts = {"name": 0, "reference": 0}
    for r in repetitions:
        counts[r.field] = counts.get(r.field, 0) + 1
    recommended = sum(1 for m in materials if m.recommended)

    print("Materials Summary:")
    print(f"  materials  : {len(materials)}")
    print(f"  recommended: {recommended}")
    print("Repetition Summary:")
    for name, count in counts.items():
        print(f"  {name:>9}: {count}")
    print(f"  {'total':>9}: {len(repetitions)}")
