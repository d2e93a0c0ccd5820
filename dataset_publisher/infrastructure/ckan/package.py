"""Read-only wrappers for external catalog (CKAN) records."""

from functools import cached_property

from dataset_publisher.domain.types import CatalogExtraDict, CatalogRecordDict, JsonValue


def _to_map(pairs: list[CatalogExtraDict]) -> dict[str, JsonValue]:
    return {pair["key"]: pair["value"] for pair in pairs}


class CatalogResource:
    """Resource (file) attached to a catalog record."""

    def __init__(self, resource: dict[str, JsonValue]) -> None:
        self._resource = resource

    def get(self, key: str) -> JsonValue:
        return self._resource.get(key)


class CatalogPackage:
    """Catalog record with key lookups into its extras and harvest arrays.

    The key/value maps and resource wrappers are built on first access and
    then kept for the life of the instance.
    """

    def __init__(self, record: CatalogRecordDict) -> None:
        self._record = record

    def get(self, key: str) -> JsonValue:
        """Top-level record field, or None."""
        return self._record.get(key)

    def get_extra(self, key: str) -> JsonValue:
        """Value of an ``extras`` entry, or None."""
        return self._extras.get(key)

    def get_harvest(self, key: str) -> JsonValue:
        """Value of a ``harvest`` entry, or None."""
        return self._harvest.get(key)

    @cached_property
    def _extras(self) -> dict[str, JsonValue]:
        return _to_map(self._record.get("extras") or [])

    @cached_property
    def _harvest(self) -> dict[str, JsonValue]:
        return _to_map(self._record.get("harvest") or [])

    @cached_property
    def resources(self) -> list[CatalogResource]:
        return [CatalogResource(resource) for resource in self._record.get("resources") or []]
