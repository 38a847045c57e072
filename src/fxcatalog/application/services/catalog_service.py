"""Resource catalog: source orchestration, cache and query facade.

The catalog owns one :class:`SourceConfig` per logical source, delegates the
actual reading to a :class:`SourceLoader` per source, writes successful
results into an :class:`IResourceStore` and notifies subscribers.

Everything runs on a single asyncio event loop. Loads of different sources
may interleave freely because they write disjoint store keys; a second load
of a source that is already in the loading queue is rejected immediately.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ...config import DEFAULT_SOURCE_CONFIGS, default_loading_config
from ...domain.cancellation import AbortSignal
from ...domain.models import (
    LoadingConfig,
    LoadingState,
    LoadResult,
    Resource,
    ResourceSource,
    ResourceStats,
    ResourceType,
    SourceConfig,
)
from ...domain.query import SearchOptions
from ...domain.repositories import IResourceStore
from ...errors import SourceLoadError, UnknownSourceError
from ...errors.handler import ErrorHandler, ErrorSeverity
from ...events.bus import EventBus
from ...events.catalog_events import LoadingStateChangedEvent, ResourcesUpdatedEvent
from ...events.signal import Signal
from ...infrastructure.memory_store import InMemoryResourceStore
from ...query.accessors import resource_searchable_text
from ...query.engine import FilterOptions, filter_items
from ..loaders.base import SourceLoader, failed_kinds, flatten
from ..loaders.builtin import BuiltInLoader
from ..loaders.imported import ImportedLoader
from ..loaders.local import LocalLoader
from ..loaders.remote import RemoteLoader

LOGGER = logging.getLogger(__name__)

ALREADY_LOADING = "Source is already loading"


def default_loaders() -> List[SourceLoader]:
    return [BuiltInLoader(), LocalLoader(), RemoteLoader(), ImportedLoader()]


class ResourceCatalog:
    """Loads, caches and queries creative resources from several sources."""

    def __init__(
        self,
        store: Optional[IResourceStore] = None,
        loaders: Optional[Iterable[SourceLoader]] = None,
        config: Optional[LoadingConfig] = None,
        source_configs: Optional[Dict[ResourceSource, SourceConfig]] = None,
        event_bus: Optional[EventBus] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._store = store if store is not None else InMemoryResourceStore()
        self._loaders: Dict[ResourceSource, SourceLoader] = {
            loader.source: loader for loader in (default_loaders() if loaders is None else loaders)
        }
        self._config = config or default_loading_config()
        self._source_configs: Dict[ResourceSource, SourceConfig] = {
            source: replace(cfg) for source, cfg in (source_configs or DEFAULT_SOURCE_CONFIGS).items()
        }
        self._events = event_bus
        self._error_handler = error_handler
        self._state = LoadingState()
        self._background_task: Optional[asyncio.Task] = None

        self.loading_state_changed = Signal("loading_state_changed")
        self.resources_updated = Signal("resources_updated")
        self.error_raised = Signal("error_raised")

    # ------------------------------------------------------------------
    # Catalog accessors
    # ------------------------------------------------------------------
    @property
    def config(self) -> LoadingConfig:
        return self._config

    def loader(self, source: ResourceSource) -> Optional[SourceLoader]:
        return self._loaders.get(ResourceSource(source))

    def get_resources(self, resource_type: ResourceType | str, source: Optional[ResourceSource | str] = None) -> List[Resource]:
        """Resources of one type, from one source or merged across loaded sources.

        Merged listings follow source registration order (built-in, local,
        remote, imported), independent of the order in which loads finished.
        """
        kind = ResourceType.parse(resource_type)
        if source is not None:
            return list(self._store.get(kind, ResourceSource.parse(source)) or [])

        merged: List[Resource] = []
        for loaded in self._state.loaded_sources:
            merged.extend(self._store.get(kind, loaded) or [])
        return merged

    def get_effects(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.EFFECTS, source)

    def get_filters(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.FILTERS, source)

    def get_transitions(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.TRANSITIONS, source)

    def get_templates(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.TEMPLATES, source)

    def get_music(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.MUSIC, source)

    def get_subtitle_styles(self, source: Optional[ResourceSource] = None) -> List[Resource]:
        return self.get_resources(ResourceType.SUBTITLES, source)

    def get_resource_by_id(self, resource_type: ResourceType | str, resource_id: str) -> Optional[Resource]:
        for resource in self.get_resources(resource_type):
            if resource.id == resource_id:
                return resource
        return None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search_resources(
        self,
        resource_type: ResourceType | str,
        options: Optional[SearchOptions] = None,
    ) -> List[Resource]:
        options = options or SearchOptions()
        resources = self.get_resources(resource_type, options.source)

        if options.query:
            resources = filter_items(
                resources,
                FilterOptions(search_query=options.query),
                resource_searchable_text,
            )
        if options.category:
            resources = [r for r in resources if r.category == options.category]
        if options.tags:
            wanted = set(options.tags)
            resources = [r for r in resources if wanted & r.tags]
        if options.complexity:
            resources = [r for r in resources if r.complexity == options.complexity]

        if options.offset or options.limit:
            start = options.offset or 0
            end = start + options.limit if options.limit else None
            resources = resources[start:end]
        return resources

    def get_resources_by_category(self, resource_type: ResourceType | str, category: str) -> List[Resource]:
        return self.search_resources(resource_type, SearchOptions(category=category))

    def get_resources_by_tags(self, resource_type: ResourceType | str, tags: Sequence[str]) -> List[Resource]:
        return self.search_resources(resource_type, SearchOptions(tags=list(tags)))

    def get_resources_by_complexity(self, resource_type: ResourceType | str, complexity: str) -> List[Resource]:
        return self.search_resources(resource_type, SearchOptions(complexity=complexity))

    # ------------------------------------------------------------------
    # Source management
    # ------------------------------------------------------------------
    async def load_source(self, source: ResourceSource | str) -> LoadResult:
        try:
            source = ResourceSource.parse(source)
        except UnknownSourceError as exc:
            LOGGER.warning("%s", exc)
            return LoadResult.failure(str(exc), ResourceSource.BUILT_IN)

        if source in self._state.loading_queue:
            return LoadResult.failure(ALREADY_LOADING, source)

        config = self._source_configs.get(source)
        if config is None or not config.enabled:
            LOGGER.info("Skipping disabled source %s", source.value)
            return LoadResult.failure(f"Source is disabled: {source.value}", source)

        self._update_state(
            is_loading=True,
            loading_queue=[*self._state.loading_queue, source],
            error=None,
        )
        LOGGER.debug("Loading source %s", source.value)

        try:
            results = await self._run_loader(source, config)
        except asyncio.CancelledError:
            self._leave_queue(source)
            raise
        except asyncio.TimeoutError:
            return self._fail(source, f"Loading timed out after {config.timeout}ms")
        except Exception as exc:
            LOGGER.exception("Loader for %s raised", source.value)
            return self._fail(source, str(exc) or exc.__class__.__name__)

        # Successful kinds are cached even when a sibling kind failed; the
        # source as a whole is only marked loaded when every kind succeeded.
        for kind, result in results.items():
            if result.success:
                self._store.set(kind, source, result.data)

        errors = failed_kinds(results)
        if errors:
            return self._fail(source, f"Failed to load {source.value} resources: {', '.join(errors)}")

        loaded = {s: None for s in ResourceSource if s in self._state.loaded_sources or s == source}
        queue = [s for s in self._state.loading_queue if s != source]
        self._update_state(
            loaded_sources=loaded,
            loading_queue=queue,
            is_loading=bool(queue),
            progress=self._progress(loaded),
        )
        self._check_cache_budget()

        for kind, result in results.items():
            resources = self.get_resources(kind, source)
            self.resources_updated.emit(kind, resources)
            if self._events is not None:
                self._events.publish(ResourcesUpdatedEvent(resource_type=kind, source=source, resources=resources))

        total = flatten(results.values())
        LOGGER.info("Loaded %d resources from %s", len(total), source.value)
        return LoadResult.ok(total, source)

    async def load_sources(self, sources: Iterable[ResourceSource | str]) -> Dict[ResourceSource, LoadResult]:
        """Load several sources concurrently, highest priority first.

        Results are collected all-settled: one source failing never hides the
        outcome of the others.
        """
        parsed = [ResourceSource.parse(source) for source in sources]
        ordered = sorted(
            dict.fromkeys(parsed),
            key=lambda s: self._source_configs[s].priority if s in self._source_configs else 0,
            reverse=True,
        )
        outcomes = await asyncio.gather(*(self.load_source(s) for s in ordered), return_exceptions=True)
        results: Dict[ResourceSource, LoadResult] = {}
        for source, outcome in zip(ordered, outcomes):
            if isinstance(outcome, LoadResult):
                results[source] = outcome
            elif isinstance(outcome, asyncio.CancelledError):
                raise outcome
            else:
                results[source] = LoadResult.failure(str(outcome), source)
        return results

    async def refresh_source(self, source: ResourceSource | str) -> LoadResult:
        source = ResourceSource.parse(source)
        self.clear_source_cache(source)
        if source in self._state.loaded_sources:
            loaded = {s: None for s in self._state.loaded_sources if s != source}
            self._update_state(loaded_sources=loaded, progress=self._progress(loaded))
        return await self.load_source(source)

    async def preload_category(
        self,
        resource_type: ResourceType | str,
        category: str,
        signal: Optional[AbortSignal] = None,
    ) -> LoadResult:
        loader = self._loaders.get(ResourceSource.BUILT_IN)
        if not isinstance(loader, BuiltInLoader):
            return LoadResult.failure("No built-in loader configured", ResourceSource.BUILT_IN)
        return await loader.load_resources_by_category(resource_type, category, signal)

    def is_source_loaded(self, source: ResourceSource | str) -> bool:
        return ResourceSource.parse(source) in self._state.loaded_sources

    def get_source_config(self, source: ResourceSource | str) -> Optional[SourceConfig]:
        config = self._source_configs.get(ResourceSource.parse(source))
        return replace(config) if config is not None else None

    def update_source_config(self, source: ResourceSource | str, **changes) -> SourceConfig:
        source = ResourceSource.parse(source)
        changes.pop("source", None)
        current = self._source_configs.get(source) or SourceConfig(source)
        self._source_configs[source] = replace(current, **changes)
        LOGGER.debug("Source config for %s updated: %s", source.value, changes)
        return replace(self._source_configs[source])

    # ------------------------------------------------------------------
    # Background loading
    # ------------------------------------------------------------------
    async def initialize(self) -> Dict[ResourceSource, LoadResult]:
        """Load the initial sources, then schedule the background sources."""
        results = await self.load_sources(self._config.initial_sources)
        if self._config.background_sources:
            self._background_task = asyncio.get_running_loop().create_task(self._load_background())
        return results

    async def wait_for_background(self) -> None:
        if self._background_task is not None:
            await asyncio.gather(self._background_task, return_exceptions=True)

    async def _load_background(self) -> None:
        await asyncio.sleep(self._config.background_load_delay)
        pending = [s for s in self._config.background_sources if not self.is_source_loaded(s)]
        results = await self.load_sources(pending)
        for source, result in results.items():
            if not result.success:
                LOGGER.warning("Background loading failed for %s: %s", source.value, result.error)

    # ------------------------------------------------------------------
    # State & statistics
    # ------------------------------------------------------------------
    def get_loading_state(self) -> LoadingState:
        return self._state.copy()

    def get_stats(self) -> ResourceStats:
        stats = ResourceStats(cache_size=self.get_cache_size())
        for kind in ResourceType:
            stats.by_type[kind] = len(self.get_resources(kind))
        stats.total = sum(stats.by_type.values())
        for source in ResourceSource:
            stats.by_source[source] = 0
        for source in self._state.loaded_sources:
            stats.by_source[source] = sum(len(self.get_resources(kind, source)) for kind in ResourceType)
        stats.memory_usage = sum(
            sys.getsizeof(resource)
            for kind in ResourceType
            for resource in self.get_resources(kind)
        )
        return stats

    def get_cache_size(self) -> int:
        """Approximate cache size: byte length of the serialized store."""
        return len(json.dumps(self._store.snapshot(), ensure_ascii=False, default=str).encode("utf-8"))

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------
    def clear_cache(self, resource_type: Optional[ResourceType | str] = None) -> None:
        if resource_type is not None:
            dropped = self._store.delete_type(ResourceType.parse(resource_type))
            LOGGER.info("Cleared %d cache entries for %s", dropped, resource_type)
        else:
            self._store.clear()
            LOGGER.info("Cleared resource cache")

    def clear_source_cache(self, source: ResourceSource | str) -> None:
        dropped = self._store.delete_source(ResourceSource.parse(source))
        LOGGER.info("Cleared %d cache entries for source %s", dropped, source)

    def invalidate_cache(self) -> None:
        self.clear_cache()
        self._update_state(loaded_sources={}, progress=0.0)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def on_loading_state_change(self, callback: Callable[[LoadingState], None]) -> Callable[[], None]:
        return self.loading_state_changed.connect(callback)

    def on_resources_update(self, callback: Callable[[ResourceType, List[Resource]], None]) -> Callable[[], None]:
        return self.resources_updated.connect(callback)

    def on_error(self, callback: Callable[[str, Optional[ResourceSource]], None]) -> Callable[[], None]:
        return self.error_raised.connect(callback)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Cancel background work, drop listeners and forget all state."""
        if self._background_task is not None and not self._background_task.done():
            self._background_task.cancel()
        self._background_task = None
        self.loading_state_changed.disconnect_all()
        self.resources_updated.disconnect_all()
        self.error_raised.disconnect_all()
        self._store.clear()
        self._state = LoadingState()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    async def _run_loader(self, source: ResourceSource, config: SourceConfig) -> Dict[ResourceType, LoadResult]:
        loader = self._loaders.get(source)
        if loader is None:
            raise SourceLoadError(f"No loader registered for source: {source.value}")
        timeout = config.timeout / 1000 if config.timeout and config.timeout > 0 else None
        return await asyncio.wait_for(loader.load_all(), timeout=timeout)

    def _fail(self, source: ResourceSource, message: str) -> LoadResult:
        queue = [s for s in self._state.loading_queue if s != source]
        self._update_state(loading_queue=queue, is_loading=bool(queue), error=message)
        self.error_raised.emit(message, source)
        if self._error_handler is not None:
            self._error_handler.handle(
                SourceLoadError(message),
                ErrorSeverity.WARNING,
                context={"source": source.value},
            )
        else:
            LOGGER.warning("Loading %s failed: %s", source.value, message)
        return LoadResult.failure(message, source)

    def _leave_queue(self, source: ResourceSource) -> None:
        queue = [s for s in self._state.loading_queue if s != source]
        self._update_state(loading_queue=queue, is_loading=bool(queue))

    def _progress(self, loaded: Dict[ResourceSource, None]) -> float:
        configured = len(self._source_configs)
        return len(loaded) / configured * 100 if configured else 0.0

    def _check_cache_budget(self) -> None:
        if not self._config.enable_caching:
            return
        size = self.get_cache_size()
        if size > self._config.max_cache_size:
            LOGGER.warning(
                "Resource cache is %d bytes, above the %d byte budget",
                size,
                self._config.max_cache_size,
            )

    def _update_state(self, **changes) -> None:
        self._state = self._state.copy(**changes)
        snapshot = self._state.copy()
        self.loading_state_changed.emit(snapshot)
        if self._events is not None:
            self._events.publish(LoadingStateChangedEvent(state=snapshot))
