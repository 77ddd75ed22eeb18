# ==============================================
# Label Accessor / Mutator
# ==============================================
#
# PURPOSE:
#   A column "label" is a human-readable name kept as column-level
#   metadata under the "label" key with the "note" style, e.g. for
#   axis titles or report headers. Columns without one fall back to
#   their own name.
#
# FUNCTIONS:
# ----------
# - label(table, column) -> str
# - set_label(table, column, value) -> None
# - labels(table) -> list[str]
# - set_labels(table, mapping) -> None
# - delete_label(table, column) -> None
#
#   `column` is a 1-based position or a column name everywhere.
#   Key and style come from tablemeta.config (LabelConfig).
#
# EXAMPLE:
# --------
#   table = MemoryTable(ctry=["Poland", "Canada"], gdp=[41685, 57812])
#   set_label(table, "gdp", "GDP per capita (USD PPP, 2022)")
#   label(table, "gdp")   → "GDP per capita (USD PPP, 2022)"
#   label(table, 1)       → "ctry"
#
# ==============================================

from typing import Any, Hashable, List, Mapping

from tablemeta.config import get_config
from tablemeta.tables.columns import resolve_column


def label(table, column: Any) -> str:
    """
    Return the label of `column`, or the column name when it has none.

    Args:
        table: Any MetadataTable
        column: 1-based position or column name

    Returns:
        String form of the "label" metadata value, else str(column name)

    Raises:
        ColumnNotFound: if `column` does not resolve
    """
    name = resolve_column(table, column)
    key = get_config().labels.key

    if key in table.col_metadata_keys(name):
        return str(table.get_col_metadata(name, key).value)
    return str(name)


def set_label(table, column: Any, value: Any) -> None:
    """
    Store str(value) as the label of `column` with the "note" style,
    replacing any previous label.
    """
    _write_label(table, resolve_column(table, column), value)


def labels(table) -> List[str]:
    """Labels of all columns, in column order."""
    return [label(table, position) for position in range(1, len(table.column_names()) + 1)]


def set_labels(table, mapping: Mapping[Any, Any]) -> None:
    """
    Set several labels at once.

    Every column is resolved before anything is written, so an unknown
    column raises ColumnNotFound without touching the table.
    """
    resolved: List[Hashable] = [resolve_column(table, column) for column in mapping]
    for name, value in zip(resolved, mapping.values()):
        _write_label(table, name, value)


def delete_label(table, column: Any) -> None:
    """Remove the label of `column`; a no-op if it has none."""
    name = resolve_column(table, column)
    table.delete_col_metadata(name, get_config().labels.key)


def _write_label(table, name: Hashable, value: Any) -> None:
    config = get_config().labels
    table.set_col_metadata(name, config.key, str(value), style=config.style)
