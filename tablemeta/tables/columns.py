# ==============================================
# Column Resolution
# ==============================================
#
# FUNCTION:
# ---------
# - resolve_column(table, column) -> Hashable
#     Turn a user column reference into the canonical column name.
#
# RULES:
# ------
#   1. int (not bool)  → 1-based position; 1..ncol else ColumnNotFound
#   2. exact name      → returned as-is
#   3. str(name) match → the column whose string form equals the
#                        reference (names that went through TOML,
#                        e.g. integer pandas labels, resolve back)
#   4. anything else   → ColumnNotFound
#
# ==============================================

import numbers
from typing import Any, Hashable

from tablemeta.errors import ColumnNotFound


def resolve_column(table, column: Any) -> Hashable:
    """
    Resolve a column reference against `table`.

    Args:
        table: Any MetadataTable
        column: 1-based integer position or column name

    Returns:
        The canonical column name

    Raises:
        ColumnNotFound: if the reference matches no column
    """
    names = list(table.column_names())

    if isinstance(column, numbers.Integral) and not isinstance(column, bool):
        if 1 <= column <= len(names):
            return names[int(column) - 1]
        raise ColumnNotFound(column)

    if column in names:
        return names[names.index(column)]

    if isinstance(column, str):
        for name in names:
            if str(name) == column:
                return name

    raise ColumnNotFound(column)
