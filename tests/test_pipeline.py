"""Tests for the conversion pipeline."""

import csv

import pytest

from cleantable import (
    CleaningOptions,
    FileLoadError,
    convert_file,
    convert_table,
    convert_text,
)

PEOPLE = [
    ["Name", "Age", "City"],
    ["Alice", "24", "London"],
    ["Bob", "30", "Madrid"],
    ["Carla", "28", "Barcelona"],
]


class TestConvertText:
    def test_auto_detect(self, messy_text):
        result = convert_text(messy_text)
        assert result.strategy == "pipe"
        assert result.table == PEOPLE
        assert result.has_table
        assert result.row_count == 4
        assert result.column_count == 3

    def test_csv_classification(self):
        result = convert_text('id,name\n1,"Smith, J"\n\n2,\n')
        assert result.strategy == "csv"
        assert result.table == [["id", "name"], ["1", "Smith, J"], ["2", ""]]

    def test_csv_oversized_field(self):
        long_cell = "x" * 200_000
        result = convert_text(f"a,b\n{long_cell},c\n")
        assert result.strategy == "csv"
        assert result.table == [["a", "b"], [long_cell, "c"]]

    def test_csv_error_falls_back_to_inference(self, monkeypatch):
        def broken_reader(text):
            raise csv.Error("field larger than field limit")

        monkeypatch.setattr("cleantable.pipeline.read_csv_table", broken_reader)
        result = convert_text("a,b  c\nd,e  f")
        assert result.strategy == "spaces"
        assert result.table == [["a,b", "c"], ["d,e", "f"]]

    def test_commas_with_pipes_are_not_csv(self):
        result = convert_text("a,b | c\nd,e | f")
        assert result.strategy == "pipe"
        assert result.table == [["a,b", "c"], ["d,e", "f"]]

    def test_explicit_delimiter(self):
        result = convert_text("a::b\nc::d", delimiter="::")
        assert result.strategy == "custom(::)"
        assert result.table == [["a", "b"], ["c", "d"]]

    def test_explicit_delimiter_beats_csv(self):
        result = convert_text("a,b;c\nd,e;f", delimiter=";")
        assert result.table == [["a,b", "c"], ["d,e", "f"]]

    def test_no_table(self):
        result = convert_text("just some words here")
        assert result.strategy == "spaces"
        assert not result.has_table
        assert result.table == [["just some words here"]]

    def test_blank_input(self):
        result = convert_text("   \n\n")
        assert result.table == []
        assert not result.has_table

    def test_options_respected(self):
        opts = CleaningOptions(collapse_spaces=False, remove_empty_columns=False)
        result = convert_text("a | b\n c|d", options=opts)
        assert result.table == [["a ", " b"], [" c", "d"]]

    def test_repeatable(self, messy_text):
        assert convert_text(messy_text) == convert_text(messy_text)

    def test_export_rows(self, messy_text):
        result = convert_text(messy_text)
        assert result.export_rows() == PEOPLE
        assert result.export_rows(exclude_header=True) == PEOPLE[1:]


class TestConvertTable:
    def test_prebuilt_table(self):
        raw = [["a", "", ""], ["", "", ""], ["b", "", "c"]]
        result = convert_table(raw)
        assert result.strategy == "xlsx"
        assert result.table == [["a", ""], ["b", "c"]]


class TestConvertFile:
    def test_text_file(self, text_file):
        result = convert_file(text_file)
        assert result.strategy == "pipe"
        assert result.table == PEOPLE
        assert result.source == "Loaded: people.txt"

    def test_csv_file(self, csv_file):
        result = convert_file(csv_file)
        assert result.strategy == "csv"
        assert result.table == [
            ["name", "city", "notes"],
            ["Alice", "London", "likes tea, biscuits"],
            ["Bob", "Madrid", ""],
        ]

    def test_xlsx_file(self, xlsx_file):
        result = convert_file(xlsx_file, delimiter="|")
        assert result.strategy == "xlsx"
        assert "Sheet: People" in result.source
        assert result.table == [
            ["Name", "Age", "Active"],
            ["Alice", "24", "TRUE"],
            ["Bob", "30.5", "FALSE"],
        ]

    def test_rejected_file(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("a | b")
        with pytest.raises(FileLoadError):
            convert_file(str(path))
