# ==============================================
# MetadataTable (Capability Interface)
# ==============================================
#
# PURPOSE:
#   Everything the label and codec modules need from a table.
#   Any object with ordered, named columns and a two-scope
#   key-value metadata store satisfies it; no base class needed.
#
# SCOPES:
# -------
#   table scope   → key                 → MetadataEntry
#   column scope  → (column name, key)  → MetadataEntry
#
#   `column` arguments below are canonical column names, i.e. what
#   column_names() returns. Use resolve_column() to turn a user
#   reference (position or name) into one.
#
# ==============================================

from typing import Any, Hashable, Iterable, List, Optional, Protocol, runtime_checkable

from tablemeta.tables.entry import MetadataEntry


@runtime_checkable
class MetadataTable(Protocol):
    """Ordered named columns plus table-level and column-level metadata."""

    def column_names(self) -> List[Hashable]:
        ...

    # --- table scope ---

    def metadata_keys(self) -> Iterable[str]:
        ...

    def get_metadata(self, key: str) -> MetadataEntry:
        ...

    def set_metadata(self, key: str, value: Any, style: Optional[str] = None) -> None:
        ...

    def delete_metadata(self, key: str) -> None:
        ...

    def empty_metadata(self) -> None:
        ...

    # --- column scope ---

    def col_metadata_keys(self, column: Optional[Hashable] = None) -> Iterable:
        """
        Without `column`: (column_name, keys) pairs for every column that has
        column-level metadata. With `column`: the keys for that column.
        """
        ...

    def get_col_metadata(self, column: Hashable, key: str) -> MetadataEntry:
        ...

    def set_col_metadata(
        self, column: Hashable, key: str, value: Any, style: Optional[str] = None
    ) -> None:
        ...

    def delete_col_metadata(self, column: Hashable, key: str) -> None:
        ...

    def empty_col_metadata(self) -> None:
        ...
