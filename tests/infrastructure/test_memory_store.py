from fxcatalog.domain.models import Resource, ResourceSource, ResourceType
from fxcatalog.infrastructure.memory_store import InMemoryResourceStore


def _resources(*ids):
    return [Resource.from_record(ResourceType.EFFECTS, {"id": rid}) for rid in ids]


def _filled_store():
    store = InMemoryResourceStore()
    store.set(ResourceType.EFFECTS, ResourceSource.BUILT_IN, _resources("a", "b"))
    store.set(ResourceType.EFFECTS, ResourceSource.LOCAL, _resources("c"))
    store.set(ResourceType.FILTERS, ResourceSource.BUILT_IN, [])
    return store


def test_get_missing_key_is_none():
    assert InMemoryResourceStore().get(ResourceType.EFFECTS, ResourceSource.BUILT_IN) is None


def test_set_replaces_slot():
    store = _filled_store()
    store.set(ResourceType.EFFECTS, ResourceSource.BUILT_IN, _resources("z"))
    assert [r.id for r in store.get(ResourceType.EFFECTS, ResourceSource.BUILT_IN)] == ["z"]


def test_empty_list_is_a_real_entry():
    store = _filled_store()
    assert store.get(ResourceType.FILTERS, ResourceSource.BUILT_IN) == []
    assert "filters:built-in" in store


def test_delete_type_removes_every_source_of_that_type():
    store = _filled_store()
    assert store.delete_type(ResourceType.EFFECTS) == 2
    assert sorted(store.keys()) == ["filters:built-in"]


def test_delete_source_removes_every_type_of_that_source():
    store = _filled_store()
    assert store.delete_source(ResourceSource.BUILT_IN) == 2
    assert list(store.keys()) == ["effects:local"]


def test_delete_source_does_not_match_prefixes():
    store = _filled_store()
    assert store.delete_source(ResourceSource.REMOTE) == 0
    assert len(store) == 3


def test_clear():
    store = _filled_store()
    store.clear()
    assert len(store) == 0


def test_snapshot_is_plain_data():
    snapshot = _filled_store().snapshot()
    assert snapshot["effects:local"][0]["id"] == "c"
    assert snapshot["filters:built-in"] == []
