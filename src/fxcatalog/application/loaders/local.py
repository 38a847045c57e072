"""Loader for user catalogs stored as JSON files in a directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ...domain.models import Resource, ResourceSource, ResourceType
from ...utils.jsonio import read_json
from .base import ALL_TYPES, SourceLoader, records_to_resources

LOGGER = logging.getLogger(__name__)


class LocalLoader(SourceLoader):
    """Reads ``<directory>/<kind>.json`` (an array of catalog records).

    A missing directory or a missing kind file is an empty catalog, not an
    error. Files are read off the event loop.
    """

    source = ResourceSource.LOCAL

    def __init__(self, directory: Optional[Path] = None, kinds: Sequence[ResourceType] = ALL_TYPES) -> None:
        super().__init__(kinds)
        self._directory = Path(directory).expanduser() if directory else None

    @property
    def directory(self) -> Optional[Path]:
        return self._directory

    def set_directory(self, directory: Optional[Path]) -> None:
        self._directory = Path(directory).expanduser() if directory else None

    async def _load_kind(self, resource_type: ResourceType) -> List[Resource]:
        if self._directory is None:
            return []
        path = self._directory / f"{resource_type.value}.json"
        if not path.is_file():
            return []
        payload = await asyncio.to_thread(read_json, path)
        resources = records_to_resources(resource_type, payload, origin=str(path))
        LOGGER.debug("Loaded %d local %s from %s", len(resources), resource_type.value, path)
        return resources
