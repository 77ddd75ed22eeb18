# ==============================================
# tablemeta — Table Metadata Tools
# ==============================================
#
# Package Structure (3 Topics):
#
# tablemeta/
# ├── tables/      # Topic 1: Table capability interface + implementations
# ├── labels/      # Topic 2: Column "label" accessor / mutator
# ├── codec/       # Topic 3: Metadata <-> TOML round-trip
# ├── config.py    # Configuration management
# └── errors.py    # Exception hierarchy
#
# ==============================================

from tablemeta.errors import TableMetaError, ColumnNotFound, MalformedDocument, KeyCollision
from tablemeta.tables import (
    MetadataTable,
    MetadataEntry,
    MemoryTable,
    DataFrameTable,
    DEFAULT_STYLE,
    NOTE_STYLE,
    resolve_column,
)
from tablemeta.labels import label, set_label, labels, set_labels, delete_label
from tablemeta.codec import meta_to_dict, meta_to_toml, dict_to_meta, toml_to_meta

__version__ = "0.1.0"

__all__ = [
    "TableMetaError",
    "ColumnNotFound",
    "MalformedDocument",
    "KeyCollision",
    "MetadataTable",
    "MetadataEntry",
    "MemoryTable",
    "DataFrameTable",
    "DEFAULT_STYLE",
    "NOTE_STYLE",
    "resolve_column",
    "label",
    "set_label",
    "labels",
    "set_labels",
    "delete_label",
    "meta_to_dict",
    "meta_to_toml",
    "dict_to_meta",
    "toml_to_meta",
]
