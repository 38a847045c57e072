import pytest
from abc import ABC, abstractmethod

from fxcatalog.application.loaders import ImportedLoader
from fxcatalog.application.services.catalog_service import ResourceCatalog
from fxcatalog.application.services.timeline_resources import TimelineResourceBinder
from fxcatalog.di.bootstrap import bootstrap
from fxcatalog.di.container import Container
from fxcatalog.di.lifetime import Lifetime
from fxcatalog.domain.repositories import IResourceStore
from fxcatalog.errors import CircularDependencyError, ResolutionError
from fxcatalog.errors.handler import ErrorHandler
from fxcatalog.events.bus import EventBus
from fxcatalog.infrastructure.memory_store import InMemoryResourceStore
from fxcatalog.settings.manager import SettingsManager


class IService(ABC):
    @abstractmethod
    def do_something(self):
        pass


class ServiceImpl(IService):
    def do_something(self):
        return "done"


class ServiceWithArgs(IService):
    def __init__(self, value):
        self.value = value

    def do_something(self):
        return self.value


class Closable:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_register_resolve_transient():
    container = Container()
    container.register_transient(IService, ServiceImpl)

    s1 = container.resolve(IService)
    s2 = container.resolve(IService)

    assert isinstance(s1, ServiceImpl)
    assert s1 is not s2


def test_register_resolve_singleton():
    container = Container()
    container.register_singleton(IService, ServiceImpl)

    assert container.resolve(IService) is container.resolve(IService)


def test_reregistering_drops_cached_singleton():
    container = Container()
    container.register_singleton(IService, ServiceImpl)
    first = container.resolve(IService)

    container.register_singleton(IService, ServiceImpl)

    assert container.resolve(IService) is not first


def test_register_with_kwargs():
    container = Container()
    container.register_transient(IService, ServiceWithArgs, value="test_value")

    assert container.resolve(IService).do_something() == "test_value"


def test_factory_receives_container():
    container = Container()
    container.register_instance(str, "injected")
    container.register_factory(IService, lambda c: ServiceWithArgs(c.resolve(str)))

    assert container.resolve(IService).do_something() == "injected"


def test_singleton_factory_runs_once():
    calls = []
    container = Container()

    def _factory(c):
        calls.append(1)
        return ServiceImpl()

    container.register_factory(IService, _factory, lifetime=Lifetime.SINGLETON)
    container.resolve(IService)
    container.resolve(IService)

    assert len(calls) == 1


def test_resolve_unregistered():
    with pytest.raises(ResolutionError):
        Container().resolve(IService)


def test_circular_dependency_detected():
    container = Container()
    container.register_factory(IService, lambda c: c.resolve(IService))

    with pytest.raises(CircularDependencyError):
        container.resolve(IService)


def test_scope_caches_and_disposes():
    container = Container()
    container.register_scoped(Closable)

    scope = container.create_scope()
    first = scope.resolve(Closable)
    assert scope.resolve(Closable) is first
    assert container.create_scope().resolve(Closable) is not first

    scope.dispose()
    assert first.closed is True


def test_bootstrap_wires_catalog(tmp_path, monkeypatch):
    monkeypatch.delenv("FXCATALOG_LOCAL_DIR", raising=False)
    container = bootstrap(Container(), settings=SettingsManager(tmp_path / "settings.json"))

    catalog = container.resolve(ResourceCatalog)
    assert catalog is container.resolve(ResourceCatalog)
    assert isinstance(container.resolve(IResourceStore), InMemoryResourceStore)
    assert container.resolve(ErrorHandler) is container.resolve(ErrorHandler)
    assert container.resolve(EventBus) is container.resolve(EventBus)
    assert isinstance(container.resolve(TimelineResourceBinder), TimelineResourceBinder)
    # The catalog shares the imported loader registered in the container.
    assert catalog.loader("imported") is container.resolve(ImportedLoader)


def test_bootstrap_local_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FXCATALOG_LOCAL_DIR", str(tmp_path))
    catalog = bootstrap(Container()).resolve(ResourceCatalog)

    assert catalog.loader("local").directory == tmp_path
