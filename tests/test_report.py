"""Tests for table export and console reporting."""

import csv

import pytest

from materials_lint.detect_duplicates import Repetition
from materials_lint.errors import WriteFailure
from materials_lint.ingest import Material
from materials_lint.report import (
    DEFAULT_HEADERS,
    ExportLabels,
    materials_to_rows,
    print_repetitions,
    print_summary,
    write_materials_csv,
)


@pytest.fixture
def materials():
    return [
        Material(
            name="Course A",
            recommended=True,
            why="basics; then more",
            where="online",
            price="R$ 10,00",
            duration="10h",
            reference="https://a.example",
            source_line=0,
        ),
        Material(name="Book B", reference='the "book"', source_line=8),
    ]


def read_rows(path, delimiter):
    with path.open("r", encoding="utf-8", newline="") as f:
        return list(csv.reader(f, delimiter=delimiter))


class TestExportLabels:
    """Test label configuration."""

    def test_defaults(self):
        labels = ExportLabels()
        assert labels.headers == DEFAULT_HEADERS
        assert labels.recommended_true == "Sim"
        assert labels.recommended_false == "Não"

    def test_from_config(self):
        labels = ExportLabels.from_config(
            {
                "headers": ["Name", "Recommended", "Why", "Where", "Price", "Duration", "Reference"],
                "recommended_true": "Yes",
                "recommended_false": "No",
            }
        )
        assert labels.headers[0] == "Name"
        assert labels.recommended_true == "Yes"
        assert labels.recommended_false == "No"

    def test_from_empty_config(self):
        assert ExportLabels.from_config(None) == ExportLabels()

    def test_wrong_header_count(self):
        with pytest.raises(ValueError):
            ExportLabels.from_config({"headers": ["Nome"]})

    @pytest.mark.parametrize("data", [["Sim"], {"headers": "Nome"}])
    def test_wrong_types(self, data):
        with pytest.raises(ValueError):
            ExportLabels.from_config(data)


class TestMaterialsToRows:
    """Test row conversion."""

    def test_column_order_and_tokens(self, materials):
        rows = materials_to_rows(materials, ExportLabels())
        assert rows[0] == [
            "Course A",
            "Sim",
            "basics; then more",
            "online",
            "R$ 10,00",
            "10h",
            "https://a.example",
        ]
        assert rows[1] == ["Book B", "Não", "", "", "", "", 'the "book"']


class TestWriteMaterialsCsv:
    """Test writing the table."""

    def test_round_trip_preserves_values(self, tmp_path, materials):
        out = tmp_path / "out" / "materials.csv"
        write_materials_csv(out, materials, delimiter=";")
        rows = read_rows(out, ";")
        assert rows[0] == DEFAULT_HEADERS
        assert rows[1] == materials_to_rows(materials, ExportLabels())[0]
        assert rows[2][6] == 'the "book"'
        assert len(rows) == 3

    def test_custom_delimiter(self, tmp_path, materials):
        out = tmp_path / "materials.tsv"
        write_materials_csv(out, materials, delimiter="\t")
        assert out.read_text(encoding="utf-8").splitlines()[0] == "\t".join(DEFAULT_HEADERS)
        assert read_rows(out, "\t")[1][4] == "R$ 10,00"

    def test_empty_materials_writes_header(self, tmp_path):
        out = tmp_path / "materials.csv"
        write_materials_csv(out, [])
        assert read_rows(out, ";") == [DEFAULT_HEADERS]

    def test_invalid_delimiter(self, tmp_path, materials):
        with pytest.raises(ValueError):
            write_materials_csv(tmp_path / "x.csv", materials, delimiter=";;")
        with pytest.raises(ValueError):
            write_materials_csv(tmp_path / "x.csv", materials, delimiter=5)
        assert not (tmp_path / "x.csv").exists()

    def test_write_failure(self, tmp_path, materials):
        """Writing over a directory fails as WriteFailure."""
        with pytest.raises(WriteFailure):
            write_materials_csv(tmp_path, materials)


class TestConsoleReport:
    """Test console output."""

    def test_print_repetitions(self, capsys):
        print_repetitions(
            [
                Repetition(field="name", first_line=1, second_line=5, value="X"),
                Repetition(field="reference", first_line=1, second_line=5, value="r"),
            ]
        )
        out = capsys.readouterr().out.splitlines()
        assert out == ["(1, 5) name repetition: X", "(1, 5) reference repetition: r"]

    def test_print_summary(self, capsys, materials):
        print_summary(materials, [Repetition(field="name", first_line=0, second_line=8, value="")])
        out = capsys.readouterr().out
        assert "materials  : 2" in out
        assert "recommended: 1" in out
        assert "     name: 1" in out
        assert "reference: 0" in out
        assert "    total: 1" in out
