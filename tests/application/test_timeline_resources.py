"""Tests for the timeline resource reducer and its binder."""

from __future__ import annotations

import json

import pytest

from fxcatalog.application.services.timeline_resources import (
    AddEffect,
    AddFilter,
    AddMusic,
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
from fxcatalog.domain.models import Resource, ResourceType
from fxcatalog.events.bus import EventBus
from fxcatalog.events.catalog_events import TimelineResourcesChangedEvent


BLUR = Resource.from_record(
    ResourceType.EFFECTS,
    {"id": "blur", "name": "Blur", "ffmpegCommand": "boxblur={radius}", "params": {"radius": 5}},
)
SEPIA = {"id": "sepia", "name": "Sepia", "params": {"amount": 0.8}}


def _state_with_blur() -> TimelineResourcesState:
    return dispatch(TimelineResourcesState(), AddEffect(BLUR))


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


class TestAdd:
    def test_add_creates_instance(self):
        state = _state_with_blur()

        assert len(state.resources) == 1
        assert state.effects == state.resources
        instance = state.effects[0]
        assert instance.resource_id == "blur"
        assert instance.kind is ResourceKind.EFFECT
        assert instance.name == "Blur"
        assert dict(instance.params) == {"radius": 5}

    def test_add_same_resource_is_noop(self):
        state = _state_with_blur()
        assert dispatch(state, AddEffect(BLUR)) is state

    def test_same_id_different_kind_is_allowed(self):
        state = dispatch(_state_with_blur(), AddFilter({"id": "blur"}))
        assert len(state.resources) == 2
        assert len(state.filters) == 1

    def test_accepts_mapping_resources(self):
        state = dispatch(TimelineResourcesState(), AddFilter(SEPIA))
        assert state.filters[0].params == {"amount": 0.8}

    def test_missing_resource_is_noop(self):
        state = TimelineResourcesState()
        assert dispatch(state, AddMusic(None)) is state

    def test_instance_ids_are_unique(self):
        state = dispatch(_state_with_blur(), AddFilter(SEPIA))
        assert len({item.id for item in state.resources}) == 2

    def test_instance_params_are_independent_of_catalog(self):
        state = dispatch(TimelineResourcesState(), AddFilter(SEPIA))
        state = dispatch(state, UpdateResource(state.filters[0].id, {"amount": 0.1}))
        assert SEPIA["params"] == {"amount": 0.8}


class TestRemoveUpdate:
    def test_remove(self):
        state = _state_with_blur()
        instance_id = state.effects[0].id

        state = dispatch(state, RemoveResource(instance_id))

        assert state.resources == ()
        assert state.effects == ()

    def test_remove_leaves_other_kinds_untouched(self):
        state = dispatch(_state_with_blur(), AddFilter(SEPIA))
        state = dispatch(state, AddMusic({"id": "sunrise", "name": "Sunrise"}))
        filters, music = state.filters, state.music

        state = dispatch(state, RemoveResource(state.effects[0].id))

        assert state.effects == ()
        assert state.filters is filters
        assert state.music is music
        assert len(state.resources) == 2

    def test_remove_unknown_is_noop(self):
        state = _state_with_blur()
        assert dispatch(state, RemoveResource("missing")) is state

    def test_update_merges_params_everywhere(self):
        state = _state_with_blur()
        instance_id = state.effects[0].id

        state = dispatch(state, UpdateResource(instance_id, {"power": 2}))

        assert dict(state.effects[0].params) == {"radius": 5, "power": 2}
        assert state.resources[0] == state.effects[0]

    def test_update_unknown_is_noop(self):
        state = _state_with_blur()
        assert dispatch(state, UpdateResource("missing", {"x": 1})) is state


class TestLoadClear:
    def test_load_replaces_state_and_dedups(self):
        first = TimelineResource(id="1", resource_id="blur", kind=ResourceKind.EFFECT)
        duplicate = TimelineResource(id="2", resource_id="blur", kind=ResourceKind.EFFECT)
        music = TimelineResource(id="3", resource_id="song", kind=ResourceKind.MUSIC)

        state = dispatch(_state_with_blur(), LoadResources((first, duplicate, music)))

        assert [item.id for item in state.resources] == ["1", "3"]
        assert [item.id for item in state.music] == ["3"]

    def test_clear(self):
        assert dispatch(_state_with_blur(), ClearResources()) == TimelineResourcesState()

    def test_clear_empty_is_noop(self):
        state = TimelineResourcesState()
        assert dispatch(state, ClearResources()) is state

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            dispatch(TimelineResourcesState(), object())


# ---------------------------------------------------------------------------
# Binder
# ---------------------------------------------------------------------------


class TestBinder:
    def test_changed_signal_only_on_real_changes(self):
        binder = TimelineResourceBinder()
        states = []
        binder.changed.connect(states.append)

        binder.add(ResourceKind.EFFECT, BLUR)
        binder.add(ResourceKind.EFFECT, BLUR)
        binder.remove("missing")

        assert len(states) == 1
        assert binder.state.is_added(ResourceKind.EFFECT, "blur")

    def test_publishes_bus_event(self):
        bus = EventBus()
        events = []
        bus.subscribe(TimelineResourcesChangedEvent, events.append)
        binder = TimelineResourceBinder(event_bus=bus)

        binder.add("filter", SEPIA)
        binder.clear()

        assert [(e.action, e.resource_count) for e in events] == [("AddFilter", 1), ("ClearResources", 0)]

    def test_update_through_binder(self):
        binder = TimelineResourceBinder()
        binder.add(ResourceKind.EFFECT, BLUR)
        instance_id = binder.state.effects[0].id

        binder.update(instance_id, {"radius": 9})

        assert binder.state.find(instance_id).params["radius"] == 9

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "timeline.json"
        binder = TimelineResourceBinder()
        binder.add(ResourceKind.EFFECT, BLUR)
        binder.add(ResourceKind.FILTER, SEPIA)
        binder.save(path)

        restored = TimelineResourceBinder()
        restored.load(path)

        assert restored.state.resources == binder.state.resources
        assert [item.id for item in restored.state.filters] == [binder.state.filters[0].id]

    def test_load_skips_invalid_entries(self, tmp_path):
        path = tmp_path / "timeline.json"
        path.write_text(
            json.dumps({"resources": [
                {"id": "1", "resource_id": "blur", "kind": "effect"},
                {"id": "2", "resource_id": "x", "kind": "shader"},
                {"resource_id": "y", "kind": "music"},
            ]}),
            encoding="utf-8",
        )

        state = TimelineResourceBinder().load(path)

        assert [item.id for item in state.resources] == ["1"]
