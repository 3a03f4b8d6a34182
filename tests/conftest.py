"""Shared test fixtures for cleantable."""

import pytest


MESSY_TEXT = (
    "Name  |  Age |   City\n"
    "\n"
    "Alice | 24 | London\n"
    "Bob   | 30 |  Madrid \n"
    "Carla | 28 | Barcelona\n"
)


@pytest.fixture
def messy_text():
    """Pipe-delimited text with uneven spacing and a blank line."""
    return MESSY_TEXT


@pytest.fixture
def text_file(tmp_path):
    """Write the messy pipe text to a .txt file."""
    path = tmp_path / "people.txt"
    path.write_text(MESSY_TEXT, encoding="utf-8")
    return str(path)


@pytest.fixture
def csv_file(tmp_path):
    """Create a small comma-delimited file with a quoted field."""
    path = tmp_path / "people.csv"
    path.write_text(
        'name,city,notes\n'
        'Alice,London,"likes tea, biscuits"\n'
        '\n'
        'Bob,Madrid,\n',
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def xlsx_file(tmp_path):
    """Create a workbook whose first sheet has a blank row and mixed types."""
    openpyxl = pytest.importorskip("openpyxl")

    path = tmp_path / "people.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "People"
    ws.append(["Name", "Age", "Active"])
    ws.append(["Alice", 24, True])
    ws.append([])
    ws.append(["Bob", 30.5, False])
    wb.create_sheet("Ignored").append(["not", "read"])
    wb.save(path)
    return str(path)
