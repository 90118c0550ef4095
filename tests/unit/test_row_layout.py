"""Unit tests for row layout planning."""

from filterdeck.core.models import FilterFieldSchema
from filterdeck.core.row_layout import group_fields_by_row, row_column_count


def _half(key: str) -> FilterFieldSchema:
    return FilterFieldSchema(key=key, label=key.title())


def _full(key: str) -> FilterFieldSchema:
    return FilterFieldSchema(key=key, label=key.title(), width_hint=2)


def _keys(rows: list[list[FilterFieldSchema]]) -> list[list[str]]:
    return [[schema.key for schema in row] for row in rows]


class TestGroupFieldsByRow:
    """Tests for group_fields_by_row."""

    def test_empty_fields_give_no_rows(self) -> None:
        assert group_fields_by_row([]) == []

    def test_half_width_fields_pair_up(self) -> None:
        rows = group_fields_by_row([_half("a"), _half("b"), _half("c"), _half("d")])

        assert _keys(rows) == [["a", "b"], ["c", "d"]]

    def test_trailing_half_width_field_gets_own_row(self) -> None:
        rows = group_fields_by_row([_half("a"), _half("b"), _half("c")])

        assert _keys(rows) == [["a", "b"], ["c"]]

    def test_full_width_field_flushes_pending_half(self) -> None:
        """A full-width field never shares a row with a pending half field."""
        rows = group_fields_by_row([_half("a"), _full("b"), _half("c")])

        assert _keys(rows) == [["a"], ["b"], ["c"]]

    def test_consecutive_full_width_fields(self) -> None:
        rows = group_fields_by_row([_full("a"), _full("b")])

        assert _keys(rows) == [["a"], ["b"]]

    def test_typical_entity_layout(self) -> None:
        """Search, two selects, a date range and two numbers."""
        fields = [
            _full("search"),
            _half("status"),
            _half("genre"),
            _half("artist"),
            _half("dateFrom"),
            _half("dateTo"),
        ]

        rows = group_fields_by_row(fields)

        assert _keys(rows) == [
            ["search"],
            ["status", "genre"],
            ["artist", "dateFrom"],
            ["dateTo"],
        ]

    def test_flattening_rows_preserves_order(self) -> None:
        """Concatenated rows equal the input order for mixed widths."""
        fields = [
            _half("a"),
            _full("b"),
            _half("c"),
            _half("d"),
            _half("e"),
            _full("f"),
            _full("g"),
            _half("h"),
        ]

        rows = group_fields_by_row(fields)
        flattened = [schema for row in rows for schema in row]

        assert flattened == fields
        assert all(1 <= len(row) <= 2 for row in rows)
        assert all(len(row) == 1 for row in rows if any(s.is_full_width for s in row))

    def test_accepts_generator(self) -> None:
        rows = group_fields_by_row(_half(k) for k in "ab")

        assert _keys(rows) == [["a", "b"]]


class TestRowColumnCount:
    """Tests for row_column_count."""

    def test_full_width_row_spans_one_column(self) -> None:
        assert row_column_count([_full("search")]) == 1

    def test_pair_uses_two_columns(self) -> None:
        assert row_column_count([_half("a"), _half("b")]) == 2

    def test_leftover_half_keeps_half_width(self) -> None:
        assert row_column_count([_half("a")]) == 2
