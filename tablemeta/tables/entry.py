# ==============================================
# Metadata Entry (Data Class)
# ==============================================
#
# PURPOSE:
#   The value + style pair stored under every metadata key, at
#   both table scope and column scope.
#
# STYLES:
# -------
#   Styles are an open set of string tags. Two are well known:
#   - DEFAULT_STYLE ("default") → structural / derived metadata
#   - NOTE_STYLE    ("note")    → free-form annotation (labels, titles)
#
# CLASSES:
# --------
# - MetadataEntry (dataclass, frozen)
#     value: Any
#     style: str
#
#     Methods:
#     --------
#     - to_dict() -> dict            → {"value": str, "style": str}
#     - from_dict(data) -> MetadataEntry  (classmethod)
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_STYLE = "default"
NOTE_STYLE = "note"


@dataclass(frozen=True)
class MetadataEntry:
    """A single metadata value together with its style tag."""

    value: Any
    style: str = DEFAULT_STYLE

    def to_dict(self) -> Dict[str, str]:
        """
        Serialize the entry for the text codec.

        Both fields are coerced to str; only the string form of a value
        is guaranteed to survive a round-trip. This includes values TOML
        could hold natively (int, float, bool, dates): 2022 comes back
        as "2022".
        """
        return {"value": str(self.value), "style": str(self.style)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataEntry":
        """Rebuild an entry from a {"value": ..., "style": ...} mapping."""
        return cls(value=data["value"], style=str(data["style"]))
