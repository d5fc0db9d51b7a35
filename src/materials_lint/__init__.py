"""materials-lint package.

Focus: lint a hand-maintained list of study materials for repeated names or
references, then export it as a delimited table.

Modules are intentionally lightweight to enable quick iteration.
"""

__all__ = [
    "errors",
    "normalize",
    "ingest",
    "detect_duplicates",
    "report",
]
