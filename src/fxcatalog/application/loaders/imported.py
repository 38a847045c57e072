"""Loader for resources the user imported at runtime."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ...domain.models import Resource, ResourceSource, ResourceType
from ...errors import CatalogImportError
from ...utils.jsonio import read_json
from .base import ALL_TYPES, SourceLoader, records_to_resources

LOGGER = logging.getLogger(__name__)


class ImportedLoader(SourceLoader):
    """Holds imported resources until the catalog (re)loads the source.

    Importing a resource whose id already exists for that kind replaces it in
    place.
    """

    source = ResourceSource.IMPORTED

    def __init__(self, kinds: Sequence[ResourceType] = ALL_TYPES) -> None:
        super().__init__(kinds)
        self._imported: Dict[ResourceType, Dict[str, Resource]] = {kind: {} for kind in self._kinds}

    def _validate(self, resource_type: ResourceType | str, records: Any, origin: str) -> tuple[ResourceType, List[Resource]]:
        kind = ResourceType.parse(resource_type)
        if kind not in self._imported:
            raise CatalogImportError(f"{origin}: {kind.value} cannot be imported")
        return kind, records_to_resources(kind, records, origin=origin)

    def _commit(self, kind: ResourceType, resources: List[Resource], origin: str) -> int:
        bucket = self._imported[kind]
        for resource in resources:
            bucket[resource.id] = resource
        LOGGER.info("Imported %d %s from %s", len(resources), kind.value, origin)
        return len(resources)

    def import_records(self, resource_type: ResourceType | str, records: Any, origin: str = "import") -> int:
        kind, resources = self._validate(resource_type, records, origin)
        return self._commit(kind, resources, origin)

    def import_file(self, path: Path) -> Dict[ResourceType, int]:
        """Import a JSON file.

        The file holds either ``{"<kind>": [records...], ...}`` or a bare array
        whose kind is taken from the file stem (``effects.json``).
        """
        path = Path(path)
        try:
            payload = read_json(path)
        except (OSError, ValueError) as exc:
            raise CatalogImportError(f"{path}: {exc}") from exc

        if isinstance(payload, list):
            payload = {path.stem: payload}
        if not isinstance(payload, dict):
            raise CatalogImportError(f"{path}: expected an object or an array")

        # Every kind is validated before any of them is stored.
        validated = [self._validate(kind_name, records, str(path)) for kind_name, records in payload.items()]
        return {kind: self._commit(kind, resources, str(path)) for kind, resources in validated}

    def remove(self, resource_type: ResourceType, resource_id: str) -> bool:
        return self._imported.get(ResourceType(resource_type), {}).pop(resource_id, None) is not None

    def clear(self) -> None:
        for bucket in self._imported.values():
            bucket.clear()

    async def _load_kind(self, resource_type: ResourceType) -> List[Resource]:
        return list(self._imported.get(resource_type, {}).values())
