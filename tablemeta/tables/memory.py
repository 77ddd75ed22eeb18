# ==============================================
# MemoryTable
# ==============================================
#
# PURPOSE:
#   A plain in-memory table: ordered columns of Python lists plus
#   the two-scope metadata store. Reference implementation of
#   MetadataTable, and the table used when no dataframe library
#   is involved.
#
# CLASS: MemoryTable
# ------------------
#   Constructor:
#   ------------
#   - __init__(columns: Mapping[name, Sequence] | None = None, **kwargs)
#       MemoryTable({"ctry": [...], "gdp": [...]})
#       MemoryTable(ctry=[...], gdp=[...])
#       All columns must have the same length.
#
#   Data access:
#   ------------
#   - column_names(), __getitem__(name), __len__(), ncol
#   - copy() -> MemoryTable   → same columns, NO metadata
#
#   Metadata: see tablemeta.tables.protocol.MetadataTable
#
# ==============================================

import logging
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence

from tablemeta.config import get_config
from tablemeta.errors import ColumnNotFound
from tablemeta.tables.entry import MetadataEntry

logger = logging.getLogger(__name__)


class MemoryTable:
    """
    In-memory table with table-level and column-level metadata.

    Metadata insertion order is kept, so metadata_keys() and
    col_metadata_keys() report keys in the order they were first set.
    """

    def __init__(self, columns: Optional[Mapping[Hashable, Sequence]] = None, **kwargs: Sequence):
        data: Dict[Hashable, List[Any]] = {}
        for source in (columns or {}, kwargs):
            for name, values in source.items():
                data[name] = list(values)

        lengths = {len(values) for values in data.values()}
        if len(lengths) > 1:
            raise ValueError(f"all columns must have the same length, got {sorted(lengths)}")

        self._columns = data
        self._metadata: Dict[str, MetadataEntry] = {}
        self._colmetadata: Dict[Hashable, Dict[str, MetadataEntry]] = {}

    # --- data access ---

    def column_names(self) -> List[Hashable]:
        return list(self._columns)

    @property
    def ncol(self) -> int:
        return len(self._columns)

    def __len__(self) -> int:
        for values in self._columns.values():
            return len(values)
        return 0

    def __getitem__(self, name: Hashable) -> List[Any]:
        if name not in self._columns:
            raise ColumnNotFound(name)
        return self._columns[name]

    def copy(self) -> "MemoryTable":
        """Return a table with the same columns and no metadata."""
        return MemoryTable({name: list(values) for name, values in self._columns.items()})

    def __repr__(self) -> str:
        return (
            f"MemoryTable(columns={self.column_names()!r}, rows={len(self)}, "
            f"metadata={len(self._metadata)}, colmetadata={len(self._colmetadata)})"
        )

    # --- table scope ---

    def metadata_keys(self) -> Iterable[str]:
        return list(self._metadata)

    def get_metadata(self, key: str) -> MetadataEntry:
        return self._metadata[key]

    def set_metadata(self, key: str, value: Any, style: Optional[str] = None) -> None:
        if style is None:
            style = get_config().codec.default_style
        self._metadata[key] = MetadataEntry(value=value, style=style)

    def delete_metadata(self, key: str) -> None:
        self._metadata.pop(key, None)

    def empty_metadata(self) -> None:
        logger.debug("Clearing %d table-level metadata entries", len(self._metadata))
        self._metadata.clear()

    # --- column scope ---

    def col_metadata_keys(self, column: Optional[Hashable] = None) -> Iterable:
        if column is not None:
            self._check_column(column)
            return list(self._colmetadata.get(column, {}))
        return [
            (name, list(entries))
            for name, entries in self._colmetadata.items()
            if entries
        ]

    def get_col_metadata(self, column: Hashable, key: str) -> MetadataEntry:
        self._check_column(column)
        return self._colmetadata.get(column, {})[key]

    def set_col_metadata(
        self, column: Hashable, key: str, value: Any, style: Optional[str] = None
    ) -> None:
        self._check_column(column)
        if style is None:
            style = get_config().codec.default_style
        self._colmetadata.setdefault(column, {})[key] = MetadataEntry(value=value, style=style)

    def delete_col_metadata(self, column: Hashable, key: str) -> None:
        self._check_column(column)
        entries = self._colmetadata.get(column)
        if entries is not None:
            entries.pop(key, None)
            if not entries:
                del self._colmetadata[column]

    def empty_col_metadata(self) -> None:
        logger.debug("Clearing column-level metadata for %d columns", len(self._colmetadata))
        self._colmetadata.clear()

    def _check_column(self, column: Hashable) -> None:
        if column not in self._columns:
            raise ColumnNotFound(column)
