"""Companion context giving UI code access to the active catalog.

The context is explicit: a provider installs it for the duration of a
``with`` block and consumers fetch it with :func:`use_catalog`. Calling
:func:`use_catalog` with no provider active is a programming error and
raises immediately.
"""

from __future__ import annotations

from contextlib import asynccontextmanager, contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import AsyncIterator, Iterator, Optional

from .application.services.catalog_service import ResourceCatalog
from .application.services.timeline_resources import TimelineResourceBinder
from .errors import ProviderNotAvailableError


@dataclass
class CatalogContext:
    catalog: ResourceCatalog
    binder: TimelineResourceBinder = field(default_factory=TimelineResourceBinder)
    is_initialized: bool = False


_current: ContextVar[Optional[CatalogContext]] = ContextVar("fxcatalog_context", default=None)


@contextmanager
def catalog_provider(
    catalog: ResourceCatalog,
    binder: Optional[TimelineResourceBinder] = None,
) -> Iterator[CatalogContext]:
    """Install a context without loading anything."""

    context = CatalogContext(catalog=catalog, binder=binder or TimelineResourceBinder())
    token = _current.set(context)
    try:
        yield context
    finally:
        _current.reset(token)


@asynccontextmanager
async def initialized_catalog(
    catalog: ResourceCatalog,
    binder: Optional[TimelineResourceBinder] = None,
) -> AsyncIterator[CatalogContext]:
    """Install a context, run the catalog's initial loads and close it on exit."""

    with catalog_provider(catalog, binder) as context:
        try:
            await catalog.initialize()
            context.is_initialized = True
            yield context
        finally:
            catalog.close()


def use_catalog() -> CatalogContext:
    context = _current.get()
    if context is None:
        raise ProviderNotAvailableError("use_catalog must be used within a catalog_provider")
    return context


__all__ = ["CatalogContext", "catalog_provider", "initialized_catalog", "use_catalog"]
