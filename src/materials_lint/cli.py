"""CLI entrypoint for materials-lint.

Usage:
  python -m materials_lint.cli check --input materials.yaml
  python -m materials_lint.cli export --input materials.yaml --out out/materials.csv --delimiter ";"
"""

from __future__ import annotations

import argparse
import copy
import json
from pathlib import Path
from typing import List

from .detect_duplicates import DEFAULT_FIELDS, find_repetitions
from .errors import MaterialsError
from .ingest import read_materials
from .report import ExportLabels, print_repetitions, print_summary, write_materials_csv

DEFAULT_CONFIG = {
    "input_path": "materials.yaml",
    "output_path": "materials.csv",
    "delimiter": ";",
    "duplicate_fields": list(DEFAULT_FIELDS),
    "skip_empty_duplicates": False,
    "labels": {},
}


def load_config(path: str | Path) -> dict:
    """Load config.json over the defaults; a missing file means defaults only."""
    path = Path(path)
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if not path.exists():
        return cfg
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")
    cfg.update(data)
    _check_config(cfg, path)
    return cfg


def _check_config(cfg: dict, path: Path) -> None:
    expected = {
        "input_path": str,
        "output_path": str,
        "delimiter": str,
        "duplicate_fields": list,
        "skip_empty_duplicates": bool,
        "labels": dict,
    }
    for key, kind in expected.items():
        if not isinstance(cfg[key], kind):
            raise ValueError(
                f"Invalid config file {path}: '{key}' must be a {kind.__name__}, got {type(cfg[key]).__name__}"
            )


def _load_and_detect(args: argparse.Namespace, cfg: dict):
    input_path = args.input or cfg["input_path"]
    materials = read_materials(input_path)
    print(f"Loaded {len(materials)} materials from: {input_path}")
    skip_empty = args.skip_empty or bool(cfg.get("skip_empty_duplicates", False))
    repetitions = find_repetitions(
        materials,
        fields=cfg.get("duplicate_fields", DEFAULT_FIELDS),
        skip_empty=skip_empty,
    )
    return materials, repetitions


def cmd_check(args: argparse.Namespace) -> int:
    """Report repetitions without exporting."""
    try:
        cfg = load_config(args.config)
        materials, repetitions = _load_and_detect(args, cfg)
    except (MaterialsError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print_repetitions(repetitions)
    print_summary(materials, repetitions)
    return 1 if repetitions else 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write the table, unless any repetition was found."""
    try:
        cfg = load_config(args.config)
        labels = ExportLabels.from_config(cfg.get("labels"))
        materials, repetitions = _load_and_detect(args, cfg)
    except (MaterialsError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if repetitions:
        print_repetitions(repetitions)
        print(f"Export skipped: {len(repetitions)} repetitions found")
        return 1

    out = args.out or cfg["output_path"]
    delimiter = args.delimiter if args.delimiter is not None else cfg["delimiter"]
    try:
        write_materials_csv(out, materials, delimiter=delimiter, labels=labels)
    except (MaterialsError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Wrote table: {out}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """List parsed entries, to see what the lenient parser actually picked up."""
    try:
        cfg = load_config(args.config)
        input_path = args.input or cfg["input_path"]
        materials = read_materials(input_path)
    except (MaterialsError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    for m in materials:
        flag = "*" if m.recommended else " "
        print(f"{m.source_line:>5} {flag} {m.name or '<no name>'} | {m.reference or '<no reference>'}")
    print(f"{len(materials)} materials")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="materials-lint", description="Materials list linter and exporter")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--input", help="Path to materials list (default from config: materials.yaml)")
        sp.add_argument(
            "--config",
            default="resources/config.json",
            help="Path to config.json (optional; defaults will be used if missing)",
        )

    check = sub.add_parser("check", help="Report repeated names and references")
    add_common(check)
    check.add_argument(
        "--skip-empty",
        action="store_true",
        help="Do not report entries that both leave a name or reference empty",
    )
    check.set_defaults(func=cmd_check)

    export = sub.add_parser("export", help="Export materials as a delimited table if no repetitions exist")
    add_common(export)
    export.add_argument("--out", help="Path to output table (default from config: materials.csv)")
    export.add_argument("--delimiter", help="Field delimiter (default from config: ';')")
    export.add_argument(
        "--skip-empty",
        action="store_true",
        help="Do not report entries that both leave a name or reference empty",
    )
    export.set_defaults(func=cmd_export)

    show = sub.add_parser("show", help="List parsed materials with their source lines")
    add_common(show)
    show.set_defaults(func=cmd_show)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
