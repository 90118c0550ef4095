"""Row layout planning for filter panel fields."""

from __future__ import annotations

from typing import Iterable

from filterdeck.core.models import FilterFieldSchema


def group_fields_by_row(
    fields: Iterable[FilterFieldSchema],
) -> list[list[FilterFieldSchema]]:
    """Group fields into presentation rows from their width hints.

    Fields are walked in declared order. Two consecutive half-width fields
    share a row. A full-width field flushes any pending half-width field
    into a row of its own and then occupies a row by itself. A trailing
    unpaired half-width field becomes the last row.

    Args:
        fields: Field descriptors in declared order.

    Returns:
        Ordered rows, each an ordered list of fields. Concatenating the rows
        reproduces the input order.
    """
    rows: list[list[FilterFieldSchema]] = []
    pending: list[FilterFieldSchema] = []

    for schema in fields:
        if schema.is_full_width:
            if pending:
                rows.append(pending)
                pending = []
            rows.append([schema])
            continue

        pending.append(schema)
        if len(pending) == 2:
            rows.append(pending)
            pending = []

    if pending:
        rows.append(pending)

    return rows


def row_column_count(row: list[FilterFieldSchema]) -> int:
    """Number of grid columns a planned row is laid out in.

    A lone full-width field spans a single column; every other row uses two
    columns so a leftover half-width field keeps its half width.
    """
    if len(row) == 1 and row[0].is_full_width:
        return 1
    return 2
