# ==============================================
# DataFrameTable — pandas adapter
# ==============================================
#
# PURPOSE:
#   Give a pandas.DataFrame the MetadataTable interface. Metadata
#   lives in DataFrame.attrs so it follows the frame wherever
#   pandas propagates attrs (copies, most column-wise operations).
#
# LAYOUT IN attrs:
# ----------------
#   df.attrs["metadata"]    → {key: MetadataEntry}
#   df.attrs["colmetadata"] → {column_name: {key: MetadataEntry}}
#
#   Column metadata of a column that has since been dropped from
#   the frame is ignored by every read.
#
# ==============================================

import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional

import pandas as pd

from tablemeta.config import get_config
from tablemeta.errors import ColumnNotFound
from tablemeta.tables.entry import MetadataEntry

logger = logging.getLogger(__name__)

METADATA_ATTR = "metadata"
COLMETADATA_ATTR = "colmetadata"


class DataFrameTable:
    """
    Wraps a DataFrame without copying it; all writes land in `frame.attrs`.

    Usage:
        table = DataFrameTable(df)
        set_label(table, "gdp", "GDP per capita")
        df.attrs["colmetadata"]["gdp"]["label"].value  # "GDP per capita"
    """

    def __init__(self, frame: pd.DataFrame):
        if not isinstance(frame, pd.DataFrame):
            raise TypeError(f"expected a pandas DataFrame, got {type(frame).__name__}")
        self.frame = frame

    def __repr__(self) -> str:
        return f"DataFrameTable(columns={self.column_names()!r})"

    def column_names(self) -> List[Hashable]:
        return list(self.frame.columns)

    def copy(self) -> "DataFrameTable":
        """Return an adapter over a copy of the frame with no metadata."""
        frame = self.frame.copy()
        frame.attrs = {}
        return DataFrameTable(frame)

    # --- storage helpers ---

    def _table_store(self) -> Dict[str, MetadataEntry]:
        return self.frame.attrs.setdefault(METADATA_ATTR, {})

    def _column_store(self) -> Dict[Hashable, Dict[str, MetadataEntry]]:
        return self.frame.attrs.setdefault(COLMETADATA_ATTR, {})

    def _check_column(self, column: Hashable) -> None:
        if column not in self.column_names():
            raise ColumnNotFound(column)

    def _default_style(self, style: Optional[str]) -> str:
        return get_config().codec.default_style if style is None else style

    # --- table scope ---

    def metadata_keys(self) -> Iterable[str]:
        return list(self.frame.attrs.get(METADATA_ATTR, {}))

    def get_metadata(self, key: str) -> MetadataEntry:
        return self.frame.attrs.get(METADATA_ATTR, {})[key]

    def set_metadata(self, key: str, value: Any, style: Optional[str] = None) -> None:
        self._table_store()[key] = MetadataEntry(value=value, style=self._default_style(style))

    def delete_metadata(self, key: str) -> None:
        self._table_store().pop(key, None)

    def empty_metadata(self) -> None:
        store = self._table_store()
        logger.debug("Clearing %d table-level metadata entries from DataFrame attrs", len(store))
        store.clear()

    # --- column scope ---

    def col_metadata_keys(self, column: Optional[Hashable] = None) -> Iterable:
        store = self.frame.attrs.get(COLMETADATA_ATTR, {})
        if column is not None:
            self._check_column(column)
            return list(store.get(column, {}))
        present = set(self.column_names())
        return [
            (name, list(entries))
            for name, entries in store.items()
            if entries and name in present
        ]

    def get_col_metadata(self, column: Hashable, key: str) -> MetadataEntry:
        self._check_column(column)
        return self.frame.attrs.get(COLMETADATA_ATTR, {}).get(column, {})[key]

    def set_col_metadata(
        self, column: Hashable, key: str, value: Any, style: Optional[str] = None
    ) -> None:
        self._check_column(column)
        entry = MetadataEntry(value=value, style=self._default_style(style))
        self._column_store().setdefault(column, {})[key] = entry

    def delete_col_metadata(self, column: Hashable, key: str) -> None:
        self._check_column(column)
        store = self._column_store()
        entries = store.get(column)
        if entries is not None:
            entries.pop(key, None)
            if not entries:
                del store[column]

    def empty_col_metadata(self) -> None:
        store = self._column_store()
        logger.debug("Clearing column-level metadata for %d columns from DataFrame attrs", len(store))
        store.clear()
