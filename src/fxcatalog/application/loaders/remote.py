"""Loader delegating to an injected asynchronous fetcher."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Sequence

from ...domain.models import Resource, ResourceSource, ResourceType
from .base import ALL_TYPES, SourceLoader, records_to_resources

Fetcher = Callable[[ResourceType], Awaitable[Any]]


class RemoteLoader(SourceLoader):
    """Without a fetcher the remote source is an empty catalog."""

    source = ResourceSource.REMOTE

    def __init__(self, fetch: Optional[Fetcher] = None, kinds: Sequence[ResourceType] = ALL_TYPES) -> None:
        super().__init__(kinds)
        self._fetch = fetch

    async def _load_kind(self, resource_type: ResourceType) -> List[Resource]:
        if self._fetch is None:
            return []
        payload = await self._fetch(resource_type)
        return records_to_resources(resource_type, payload, origin=f"remote:{resource_type.value}")
