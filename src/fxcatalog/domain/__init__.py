from .cancellation import AbortController, AbortSignal
from .models import (
    Complexity,
    LoadingConfig,
    LoadingState,
    LoadResult,
    Resource,
    ResourceSource,
    ResourceStats,
    ResourceType,
    SourceConfig,
    store_key,
)
from .query import SearchOptions

__all__ = [
    "AbortController",
    "AbortSignal",
    "Complexity",
    "LoadResult",
    "LoadingConfig",
    "LoadingState",
    "Resource",
    "ResourceSource",
    "ResourceStats",
    "ResourceType",
    "SearchOptions",
    "SourceConfig",
    "store_key",
]
