"""Loader for the static catalogs shipped with the package."""

from __future__ import annotations

import asyncio
import importlib
import logging
from types import ModuleType
from typing import Callable, Dict, List, Optional, Sequence

from ...domain.cancellation import AbortSignal, check_signal
from ...domain.models import LoadResult, Resource, ResourceSource, ResourceType
from ...errors import CatalogImportError, UnknownResourceTypeError
from .base import ALL_TYPES, SourceLoader, records_to_resources

LOGGER = logging.getLogger(__name__)

BUILTIN_PACKAGE = "fxcatalog.catalog.builtin"


class BuiltInLoader(SourceLoader):
    """Lazily imports ``<package>.<kind>`` and reads its ``RECORDS``.

    The import happens on first use of a kind, never at construction time.
    ``importer`` defaults to :func:`importlib.import_module`; tests swap it to
    simulate broken catalogs.
    """

    source = ResourceSource.BUILT_IN

    def __init__(
        self,
        package: str = BUILTIN_PACKAGE,
        kinds: Sequence[ResourceType] = ALL_TYPES,
        importer: Callable[[str], ModuleType] = importlib.import_module,
    ) -> None:
        super().__init__(kinds)
        self._package = package
        self._importer = importer

    async def _load_kind(self, resource_type: ResourceType) -> List[Resource]:
        module_name = f"{self._package}.{resource_type.value}"
        # Suspension point standing in for the lazy import.
        await asyncio.sleep(0)
        try:
            module = self._importer(module_name)
        except ImportError as exc:
            raise CatalogImportError(f"cannot import {module_name}: {exc}") from exc
        records = getattr(module, "RECORDS", None)
        if records is None:
            raise CatalogImportError(f"{module_name} has no RECORDS")
        resources = records_to_resources(resource_type, records, origin=module_name)
        LOGGER.debug("Loaded %d built-in %s", len(resources), resource_type.value)
        return resources

    # -- per-kind shortcuts ----------------------------------------------

    async def load_effects(self) -> LoadResult:
        return await self.load(ResourceType.EFFECTS)

    async def load_filters(self) -> LoadResult:
        return await self.load(ResourceType.FILTERS)

    async def load_transitions(self) -> LoadResult:
        return await self.load(ResourceType.TRANSITIONS)

    async def load_templates(self) -> LoadResult:
        return await self.load(ResourceType.TEMPLATES)

    async def load_music(self) -> LoadResult:
        return await self.load(ResourceType.MUSIC)

    async def load_subtitle_styles(self) -> LoadResult:
        return await self.load(ResourceType.SUBTITLES)

    # -- queries ---------------------------------------------------------

    async def load_resources_by_category(
        self,
        resource_type: ResourceType | str,
        category: str,
        signal: Optional[AbortSignal] = None,
    ) -> LoadResult:
        """Load a whole kind and keep only the exact *category* matches.

        Raises :class:`LoadAbortedError` when *signal* is already aborted.
        """
        check_signal(signal)
        try:
            kind = ResourceType.parse(resource_type)
        except UnknownResourceTypeError as exc:
            return LoadResult.failure(str(exc), self.source)

        result = await self.load(kind, signal)
        if not result.success:
            return result
        matching = [resource for resource in result.data if resource.category == category]
        return LoadResult.ok(matching, self.source)

    async def load_all_resources_lazy(self, signal: Optional[AbortSignal] = None) -> Dict[ResourceType, LoadResult]:
        return await self.load_all(signal)
