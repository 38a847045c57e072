from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from .models import Resource, ResourceSource, ResourceType


class IResourceStore(ABC):
    """Keyed map from ``(type, source)`` to the resources of that slot."""

    @abstractmethod
    def get(self, resource_type: ResourceType, source: ResourceSource) -> Optional[List[Resource]]:
        """Return the stored list, or None when the key does not exist"""
        pass

    @abstractmethod
    def set(self, resource_type: ResourceType, source: ResourceSource, resources: List[Resource]) -> None:
        """Replace the slot wholesale"""
        pass

    @abstractmethod
    def delete_type(self, resource_type: ResourceType) -> int:
        """Remove every key of a type, return the number of keys removed"""
        pass

    @abstractmethod
    def delete_source(self, source: ResourceSource) -> int:
        """Remove every key of a source, return the number of keys removed"""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def keys(self) -> Iterator[str]:
        pass

    @abstractmethod
    def snapshot(self) -> dict:
        """Plain-data copy of the whole store (key -> list of dicts)"""
        pass
