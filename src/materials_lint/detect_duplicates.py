"""Repetition detection over parsed materials.

Every unordered pair of entries is compared, so every colliding pair is
reported rather than only the first one seen. Lists are hand-maintained and
small, so the quadratic scan is fine.

Checked fields (in report order per pair):
- name
- reference

Two empty values are equal and therefore collide unless skip_empty is set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .ingest import MATERIAL_FIELDS, Material

DEFAULT_FIELDS = ("name", "reference")


@dataclass
class Repetition:
    field: str  # "name" | "reference"
    first_line: int
    second_line: int
    value: str

    def __str__(self) -> str:
        return f"({self.first_line}, {self.second_line}) {self.field} repetition: {self.value}"


def find_repetitions(
    materials: Sequence[Material],
    fields: Iterable[str] = DEFAULT_FIELDS,
    skip_empty: bool = False,
) -> List[Repetition]:
    """Compare all pairs (i, j), i < j, and report each shared field value.

    Args:
        materials: Parsed materials in input order
        fields: Field names to compare, in the order reports are emitted per pair
        skip_empty: Do not report two entries that both leave a field empty

    Returns:
        Repetitions ordered by i, then j, then field order
    """
    fields = list(fields)
    unknown = [f for f in fields if f not in MATERIAL_FIELDS]
    if unknown:
        raise ValueError(f"Unknown duplicate fields: {unknown}")

    results: List[Repetition] = []
    for i in range(len(materials)):
        for j in range(i + 1, len(materials)):
            first, second = materials[i], materials[j]
            for name in fields:
                value = getattr(first, name)
                if value != getattr(second, name):
                    continue
                if skip_empty and value in ("", None):
                    continue
                results.append(
                    Repetition(
                        field=name,
                        first_line=first.source_line,
                        second_line=second.source_line,
                        value=str(value),
                    )
                )
    return results


def format_repetitions(repetitions: Iterable[Repetition]) -> List[str]:
    return [str(r) for r in repetitions]
