"""Domain types and aliases."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, TypedDict

Timestamp = datetime

# JSON-serializable types (recursive)
if TYPE_CHECKING:
    JsonValue = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
else:
    JsonValue = str | int | float | bool | None | dict | list

# Raw values submitted for a wizard step, keyed by field name
StepInput = dict[str, JsonValue]


# External catalog record structure
class CatalogExtraDict(TypedDict):
    """Key/value pair in a catalog record's extras or harvest array."""
    key: str
    value: JsonValue


class CatalogRecordDict(TypedDict, total=False):
    """Catalog record (package) structure."""
    id: str
    name: str
    title: str
    notes: str
    extras: list[CatalogExtraDict]
    harvest: list[CatalogExtraDict]
    resources: list[dict[str, JsonValue]]
