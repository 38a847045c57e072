from .catalog_service import ResourceCatalog, default_loaders
from .chunked_loader import ChunkedResourceLoader, load_resources_in_chunks
from .timeline_resources import (
    AddEffect,
    AddFilter,
    AddMusic,
    AddSubtitle,
    AddTemplate,
    AddTransition,
    ClearResources,
    LoadResources,
    RemoveResource,
    ResourceKind,
    TimelineResource,
    TimelineResourceBinder,
    TimelineResourcesState,
    UpdateResource,
    dispatch,
)

__all__ = [
    "AddEffect",
    "AddFilter",
    "AddMusic",
    "AddSubtitle",
    "AddTemplate",
    "AddTransition",
    "ChunkedResourceLoader",
    "ClearResources",
    "LoadResources",
    "RemoveResource",
    "ResourceCatalog",
    "ResourceKind",
    "TimelineResource",
    "TimelineResourceBinder",
    "TimelineResourcesState",
    "UpdateResource",
    "default_loaders",
    "dispatch",
    "load_resources_in_chunks",
]
