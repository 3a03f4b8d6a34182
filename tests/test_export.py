"""Tests for table export."""

import pytest

from cleantable import export_table, serialize_csv, serialize_markdown, serialize_tsv


class TestSerializeTsv:
    def test_basic(self):
        assert serialize_tsv([["a", "b"], ["c", "d"]]) == "a\tb\nc\td"

    def test_empty(self):
        assert serialize_tsv([]) == ""


class TestSerializeMarkdown:
    def test_pipe_escaped(self):
        md = serialize_markdown([["H1", "H2"], ["v|1", "v2"]])
        lines = md.split("\n")
        assert len(lines) == 3
        assert lines[0] == "| H1 | H2 |"
        assert lines[1] == "| --- | --- |"
        assert lines[2] == "| v\\|1 | v2 |"

    def test_ragged_rows_padded(self):
        md = serialize_markdown([["a", "b"], ["c"]])
        assert md == "| a | b |\n| --- | --- |\n| c |  |"

    def test_short_header_padded(self):
        md = serialize_markdown([["a"], ["b", "c"]])
        assert md.split("\n")[1] == "| --- | --- |"

    def test_newlines_collapsed(self):
        md = serialize_markdown([["h"], ["x\ny"], ["p\r\nq"]])
        assert md == "| h |\n| --- |\n| x y |\n| p q |"

    def test_header_only(self):
        assert serialize_markdown([["a", "b"]]) == "| a | b |\n| --- | --- |"

    def test_empty(self):
        assert serialize_markdown([]) == ""


class TestSerializeCsv:
    def test_quoting(self):
        out = serialize_csv([["a", "b,c"], ['say "hi"', "x"]])
        assert out == 'a,"b,c"\r\n"say ""hi""",x'

    def test_empty(self):
        assert serialize_csv([]) == ""


class TestExportTable:
    TABLE = [["Name", "Age"], ["Alice", "24"]]

    def test_formats(self):
        assert export_table(self.TABLE, "tsv") == "Name\tAge\nAlice\t24"
        assert export_table(self.TABLE, "csv") == "Name,Age\r\nAlice,24"
        assert export_table(self.TABLE, "markdown").startswith("| Name | Age |")

    def test_exclude_header(self):
        assert export_table(self.TABLE, "tsv", exclude_header=True) == "Alice\t24"

    def test_exclude_header_on_empty(self):
        assert export_table([], "tsv", exclude_header=True) == ""

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown format"):
            export_table(self.TABLE, "html")
