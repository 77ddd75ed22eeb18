# ==============================================
# Errors
# ==============================================
#
# CLASSES:
# --------
# - TableMetaError(Exception)
#     Base class for everything raised by this package.
#
# - ColumnNotFound(TableMetaError, KeyError)
#     A column reference (1-based position or name) did not
#     resolve to any column of the table.
#
# - MalformedDocument(TableMetaError, ValueError)
#     Text handed to the deserializer is not valid TOML, or does
#     not have the metadata / colmetadata shape.
#
# - KeyCollision(TableMetaError, ValueError)
#     Two metadata keys or column names turn into the same string
#     when serialized (e.g. column 7 and column "7").
#
# ==============================================

from typing import Any


class TableMetaError(Exception):
    """Base class for tablemeta errors."""


class ColumnNotFound(TableMetaError, KeyError):
    """Raised when a column reference does not match any column."""

    def __init__(self, column: Any):
        self.column = column
        super().__init__(f"column {column!r} not found in table")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MalformedDocument(TableMetaError, ValueError):
    """Raised when serialized metadata cannot be parsed or has the wrong shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"malformed metadata document: {reason}")


class KeyCollision(TableMetaError, ValueError):
    """Raised when two distinct keys or column names share the same text form."""

    def __init__(self, first: Any, second: Any, where: str):
        self.first = first
        self.second = second
        super().__init__(f"{where}: {first!r} and {second!r} are both written as {str(second)!r}")
