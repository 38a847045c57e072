"""In-memory implementation of :class:`IResourceStore`."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from ..domain.models import Resource, ResourceSource, ResourceType, store_key
from ..domain.repositories import IResourceStore

LOGGER = logging.getLogger(__name__)


class InMemoryResourceStore(IResourceStore):
    """Plain dict keyed by ``"{type}:{source}"``.

    Deletions build the list of doomed keys first and then drop them in one
    pass, so a reader on the same loop never observes a half-cleared type or
    source.
    """

    def __init__(self) -> None:
        self._slots: Dict[str, List[Resource]] = {}

    def get(self, resource_type: ResourceType, source: ResourceSource) -> Optional[List[Resource]]:
        return self._slots.get(store_key(resource_type, source))

    def set(self, resource_type: ResourceType, source: ResourceSource, resources: List[Resource]) -> None:
        self._slots[store_key(resource_type, source)] = list(resources)

    def delete_type(self, resource_type: ResourceType) -> int:
        prefix = f"{ResourceType(resource_type).value}:"
        return self._drop([key for key in self._slots if key.startswith(prefix)])

    def delete_source(self, source: ResourceSource) -> int:
        suffix = f":{ResourceSource(source).value}"
        return self._drop([key for key in self._slots if key.endswith(suffix)])

    def clear(self) -> None:
        self._slots = {}

    def keys(self) -> Iterator[str]:
        return iter(list(self._slots))

    def snapshot(self) -> dict:
        return {
            key: [resource.to_dict() for resource in resources]
            for key, resources in self._slots.items()
        }

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def _drop(self, keys: List[str]) -> int:
        if keys:
            self._slots = {k: v for k, v in self._slots.items() if k not in keys}
            LOGGER.debug("Dropped store keys: %s", ", ".join(keys))
        return len(keys)
