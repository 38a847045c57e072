from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .container import Container
from .lifetime import Lifetime
from ..application.loaders import BuiltInLoader, ImportedLoader, LocalLoader, RemoteLoader
from ..application.services.catalog_service import ResourceCatalog
from ..application.services.timeline_resources import TimelineResourceBinder
from ..config import ENV_LOCAL_DIR
from ..domain.repositories import IResourceStore
from ..errors.handler import ErrorHandler
from ..events.bus import EventBus
from ..infrastructure.memory_store import InMemoryResourceStore
from ..settings.manager import SettingsManager


def _local_dir(container: Container) -> Optional[Path]:
    env = os.environ.get(ENV_LOCAL_DIR)
    if env:
        return Path(env)
    if container.is_registered(SettingsManager):
        configured = container.resolve(SettingsManager).get("local_catalog_dir")
        if configured:
            return Path(configured)
    return None


def _create_catalog(container: Container) -> ResourceCatalog:
    return ResourceCatalog(
        store=container.resolve(IResourceStore),
        loaders=[
            BuiltInLoader(),
            LocalLoader(_local_dir(container)),
            RemoteLoader(),
            container.resolve(ImportedLoader),
        ],
        event_bus=container.resolve(EventBus),
        error_handler=container.resolve(ErrorHandler),
    )


def bootstrap(container: Container, settings: Optional[SettingsManager] = None) -> Container:
    """Register all catalog services in the DI container."""
    container.register_singleton(EventBus, EventBus)
    container.register_factory(
        ErrorHandler,
        lambda c: ErrorHandler(logging.getLogger("fxcatalog"), c.resolve(EventBus)),
        lifetime=Lifetime.SINGLETON,
    )
    container.register_singleton(IResourceStore, InMemoryResourceStore)
    container.register_singleton(ImportedLoader, ImportedLoader)
    if settings is not None:
        container.register_instance(SettingsManager, settings)
    container.register_factory(ResourceCatalog, _create_catalog, lifetime=Lifetime.SINGLETON)
    container.register_factory(
        TimelineResourceBinder,
        lambda c: TimelineResourceBinder(event_bus=c.resolve(EventBus)),
        lifetime=Lifetime.SINGLETON,
    )
    return container
