# ==============================================
# Metadata Codec (TOML)
# ==============================================
#
# PURPOSE:
#   Save all table-level and column-level metadata of a table to
#   TOML text, and load it back, replacing whatever was there.
#
# DOCUMENT SHAPE:
# ---------------
#   [metadata.title]
#   style = "note"
#   value = "GDP per country"
#
#   [colmetadata.ctry.label]
#   style = "note"
#   value = "Country"
#
#   - metadata     → {key: {value, style}}
#   - colmetadata  → {str(column name): {key: {value, style}}}
#   - keys, values and styles are written with str(); only the
#     string form of a value survives the round-trip. Native TOML
#     types (int, float, bool, dates) are stringified too, unlike
#     writers that keep them typed
#   - two keys or columns with the same str() form raise KeyCollision
#   - keys are sorted at every level so equal metadata always
#     produces byte-identical text
#
# FUNCTIONS:
# ----------
# - meta_to_dict(table) -> dict
# - meta_to_toml(table) -> str
# - dict_to_meta(document, table) -> table
# - toml_to_meta(text, table) -> table
#
# LOADING ORDER:
# --------------
#   1. parse + validate the whole document (nothing written yet)
#   2. empty table-level metadata
#   3. empty column-level metadata
#   4. write table-level entries
#   5. write column-level entries
#
#   Step 2-3 is unconditional: metadata missing from the document
#   is lost. A document that fails step 1 leaves the table as is.
#
# ==============================================

import logging
import tomllib
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Tuple

import tomli_w

from tablemeta.errors import KeyCollision, MalformedDocument
from tablemeta.tables.columns import resolve_column
from tablemeta.tables.entry import MetadataEntry

logger = logging.getLogger(__name__)

METADATA_SECTION = "metadata"
COLMETADATA_SECTION = "colmetadata"


# ----------------------------------------------
# Saving
# ----------------------------------------------

def meta_to_dict(table) -> Dict[str, Dict[str, Any]]:
    """
    Collect all metadata of `table` into the two-section mapping.

    Args:
        table: Any MetadataTable

    Returns:
        {"metadata": {...}, "colmetadata": {...}} with string keys, values
        and styles

    Raises:
        KeyCollision: two keys (or two columns) share the same str() form
    """
    document: Dict[str, Dict[str, Any]] = {METADATA_SECTION: {}, COLMETADATA_SECTION: {}}

    document[METADATA_SECTION] = _stringify_keys(
        ((key, table.get_metadata(key).to_dict()) for key in table.metadata_keys()),
        METADATA_SECTION,
    )

    columns: Dict[str, Hashable] = {}
    for column, keys in table.col_metadata_keys():
        where = f"{COLMETADATA_SECTION}.{column}"
        column_entries = _stringify_keys(
            ((key, table.get_col_metadata(column, key).to_dict()) for key in keys), where
        )
        if not column_entries:
            continue
        text = str(column)
        if text in columns:
            raise KeyCollision(columns[text], column, COLMETADATA_SECTION)
        columns[text] = column
        document[COLMETADATA_SECTION][text] = column_entries

    return document


def _stringify_keys(items: Iterable[Tuple[Any, Any]], where: str) -> Dict[str, Any]:
    originals: Dict[str, Any] = {}
    result: Dict[str, Any] = {}
    for key, value in items:
        text = str(key)
        if text in originals:
            raise KeyCollision(originals[text], key, where)
        originals[text] = key
        result[text] = value
    return result


def meta_to_toml(table) -> str:
    """
    Serialize all metadata of `table` to TOML with sorted keys.

    Args:
        table: Any MetadataTable

    Returns:
        TOML text; the table is not modified
    """
    document = meta_to_dict(table)
    logger.debug(
        "Serializing %d table-level keys and column metadata for %d columns",
        len(document[METADATA_SECTION]),
        len(document[COLMETADATA_SECTION]),
    )
    return tomli_w.dumps(_sorted(document))


def _sorted(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        key: _sorted(value) if isinstance(value, Mapping) else value
        for key, value in sorted(mapping.items())
    }


# ----------------------------------------------
# Loading
# ----------------------------------------------

def toml_to_meta(text: str, table):
    """
    Replace all metadata of `table` with the metadata stored in `text`.

    `text` should come from meta_to_toml() or have the same shape.

    Args:
        text: TOML document
        table: Any MetadataTable

    Returns:
        `table`, for chaining

    Raises:
        MalformedDocument: invalid TOML or wrong document shape
        ColumnNotFound: a column named in the document is not in `table`
    """
    if not isinstance(text, str):
        raise MalformedDocument(f"expected TOML text, got {type(text).__name__}")

    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise MalformedDocument(f"invalid TOML: {exc}") from exc

    return dict_to_meta(document, table)


def dict_to_meta(document: Mapping[str, Any], table):
    """
    Replace all metadata of `table` with the entries of `document`.

    The document is fully validated before the table is emptied.

    Returns:
        `table`, for chaining
    """
    table_entries, column_entries = _validate(document, table)

    table.empty_metadata()
    table.empty_col_metadata()

    for key, entry in table_entries:
        table.set_metadata(key, entry.value, style=entry.style)

    for column, key, entry in column_entries:
        table.set_col_metadata(column, key, entry.value, style=entry.style)

    logger.debug(
        "Restored %d table-level and %d column-level metadata entries",
        len(table_entries),
        len(column_entries),
    )
    return table


def _validate(
    document: Any, table
) -> Tuple[List[Tuple[str, MetadataEntry]], List[Tuple[Hashable, str, MetadataEntry]]]:
    """
    Check the document shape and resolve its columns.

    Returns:
        (table-level entries, column-level entries) ready to be written
    """
    if not isinstance(document, Mapping):
        raise MalformedDocument(f"expected a mapping, got {type(document).__name__}")

    for section in (METADATA_SECTION, COLMETADATA_SECTION):
        if section not in document:
            raise MalformedDocument(f"missing [{section}] section")
        if not isinstance(document[section], Mapping):
            raise MalformedDocument(f"[{section}] must be a table")

    table_entries = [
        (key, _entry(data, f"{METADATA_SECTION}.{key}"))
        for key, data in document[METADATA_SECTION].items()
    ]

    column_entries = []
    for column, entries in document[COLMETADATA_SECTION].items():
        where = f"{COLMETADATA_SECTION}.{column}"
        if not isinstance(entries, Mapping):
            raise MalformedDocument(f"[{where}] must be a table")
        name = resolve_column(table, column)
        for key, data in entries.items():
            column_entries.append((name, key, _entry(data, f"{where}.{key}")))

    return table_entries, column_entries


def _entry(data: Any, where: str) -> MetadataEntry:
    if not isinstance(data, Mapping):
        raise MalformedDocument(f"[{where}] must be a table with value and style")
    for field in ("value", "style"):
        if field not in data:
            raise MalformedDocument(f"[{where}] has no {field!r}")
    return MetadataEntry.from_dict(data)
