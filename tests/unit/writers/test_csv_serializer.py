"""Tests for the cell model and CSV serializer."""

import pytest

from src.writers.csv_serializer import (
    EMPTY,
    Cell,
    empty_cells,
    hours_cell,
    pad_row,
    parse_report,
    plain,
    serialize_report,
    text,
)


class TestCell:
    """Test cell rendering."""

    def test_text_is_quoted(self):
        assert text("Design").render() == '"Design"'

    def test_inner_quotes_are_doubled(self):
        assert text('Say "hi"').render() == '"Say ""hi"""'

    def test_plain_is_not_quoted(self):
        assert plain("Name").render() == "Name"

    def test_empty_cell_renders_nothing(self):
        assert EMPTY.render() == ""

    def test_quoted_empty_string(self):
        assert text("").render() == '""'


class TestHoursCell:
    """Test numeric formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, "0.00"), (1.5, "1.50"), (2.0 / 3.0, "0.67"), (-0.25, "-0.25"), (12, "12.00")],
    )
    def test_two_decimals(self, value, expected):
        cell = hours_cell(value)
        assert cell.value == expected
        assert cell.quoted is False


class TestPadRow:
    """Test row padding."""

    def test_pads_with_empty_cells(self):
        row = pad_row([text("Title")], 5)
        assert len(row) == 5
        assert row[1:] == empty_cells(4)

    def test_exact_width_unchanged(self):
        cells = [plain("a"), plain("b")]
        assert pad_row(cells, 2) == cells

    def test_too_wide_raises(self):
        with pytest.raises(ValueError):
            pad_row(empty_cells(3), 2)


class TestSerializeReport:
    """Test report serialization."""

    def test_rows_end_with_newline(self):
        report = [
            [text("Title"), EMPTY],
            [plain("A"), plain("B")],
        ]
        assert serialize_report(report) == '"Title",\nA,B\n'

    def test_empty_report(self):
        assert serialize_report([]) == ""

    def test_mixed_cells(self):
        row = [text("Ann"), text('a "b"'), hours_cell(3.5), EMPTY]
        assert serialize_report([row]) == '"Ann","a ""b""",3.50,\n'


class TestParseReport:
    """Test reading serialized reports back."""

    def test_round_trip_recovers_values(self):
        report = [
            [text("Monthly report"), EMPTY, EMPTY],
            [plain("Name"), plain("Task"), plain("Hours")],
            [text("Ann"), text('Say "hi"'), hours_cell(1.25)],
            [EMPTY, text("Fix bug|again"), hours_cell(0)],
        ]

        parsed = parse_report(serialize_report(report))

        assert parsed == [[c.value for c in row] for row in report]

    def test_every_row_has_same_field_count(self):
        report = [pad_row([text("x")], 4), empty_cells(4), [plain("1")] * 4]
        parsed = parse_report(serialize_report(report))
        assert {len(row) for row in parsed} == {4}

    def test_lone_quote_is_kept(self):
        assert parse_report('"\n') == [['"']]

    def test_carriage_return_stays_inside_cell(self):
        report = [
            [text("Ann"), text("one\r|two"), hours_cell(1)],
            [EMPTY, text("three"), hours_cell(2)],
        ]

        parsed = parse_report(serialize_report(report))

        assert parsed == [["Ann", "one\r|two", "1.00"], ["", "three", "2.00"]]
