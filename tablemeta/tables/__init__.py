# ==============================================
# TOPIC 1: TABLES
# ==============================================
#
# This package defines what a "table" is to the rest of
# tablemeta: ordered named columns plus a metadata store at
# table scope and column scope.
#
# Modules:
# --------
# - entry.py      → MetadataEntry (value + style), well-known styles
# - protocol.py   → MetadataTable capability interface
# - columns.py    → resolve_column (position / name → column name)
# - memory.py     → MemoryTable, plain in-memory implementation
# - dataframe.py  → DataFrameTable, pandas adapter (metadata in attrs)
#
# ==============================================

from .entry import MetadataEntry, DEFAULT_STYLE, NOTE_STYLE
from .protocol import MetadataTable
from .columns import resolve_column
from .memory import MemoryTable
from .dataframe import DataFrameTable

__all__ = [
    "MetadataEntry",
    "DEFAULT_STYLE",
    "NOTE_STYLE",
    "MetadataTable",
    "resolve_column",
    "MemoryTable",
    "DataFrameTable",
]
