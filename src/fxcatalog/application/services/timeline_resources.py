"""Resources bound onto the timeline.

The catalog is read-only; once the user commits a catalog entry to the
timeline it becomes a :class:`TimelineResource` instance with its own,
mutable parameters. Instances are tracked by a plain reducer,
:func:`dispatch`, over an immutable :class:`TimelineResourcesState` holding
one list per kind plus an aggregate list.

At most one instance exists per catalog id and kind: adding the same catalog
resource twice is a no-op.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple

from ...events.bus import EventBus
from ...events.catalog_events import TimelineResourcesChangedEvent
from ...events.signal import Signal
from ...utils.jsonio import read_json, write_json

LOGGER = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    EFFECT = "effect"
    FILTER = "filter"
    TRANSITION = "transition"
    TEMPLATE = "template"
    MUSIC = "music"
    SUBTITLE = "subtitle"


@dataclass(frozen=True)
class TimelineResource:
    id: str
    resource_id: str
    kind: ResourceKind
    name: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    added_at: float = field(default_factory=time.time)

    @classmethod
    def create(cls, kind: ResourceKind, resource: Any) -> "TimelineResource":
        """New instance (fresh id) referencing the catalog *resource*."""
        return cls(
            id=str(uuid.uuid4()),
            resource_id=_resource_id(resource),
            kind=ResourceKind(kind),
            name=_resource_field(resource, "name") or _resource_id(resource),
            params=dict(_resource_field(resource, "params") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "resource_id": self.resource_id,
            "kind": self.kind.value,
            "name": self.name,
            "params": dict(self.params),
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TimelineResource":
        return cls(
            id=str(payload["id"]),
            resource_id=str(payload["resource_id"]),
            kind=ResourceKind(payload["kind"]),
            name=payload.get("name", ""),
            params=dict(payload.get("params") or {}),
            added_at=float(payload.get("added_at", 0.0)),
        )


def _resource_field(resource: Any, name: str) -> Any:
    if isinstance(resource, Mapping):
        return resource.get(name)
    return getattr(resource, name, None)


def _resource_id(resource: Any) -> str:
    value = _resource_field(resource, "id")
    if value is None:
        raise ValueError("catalog resource has no id")
    return str(value)


_KIND_FIELDS: Dict[ResourceKind, str] = {
    ResourceKind.EFFECT: "effects",
    ResourceKind.FILTER: "filters",
    ResourceKind.TRANSITION: "transitions",
    ResourceKind.TEMPLATE: "templates",
    ResourceKind.MUSIC: "music",
    ResourceKind.SUBTITLE: "subtitles",
}


@dataclass(frozen=True)
class TimelineResourcesState:
    resources: Tuple[TimelineResource, ...] = ()
    effects: Tuple[TimelineResource, ...] = ()
    filters: Tuple[TimelineResource, ...] = ()
    transitions: Tuple[TimelineResource, ...] = ()
    templates: Tuple[TimelineResource, ...] = ()
    music: Tuple[TimelineResource, ...] = ()
    subtitles: Tuple[TimelineResource, ...] = ()

    def for_kind(self, kind: ResourceKind) -> Tuple[TimelineResource, ...]:
        return getattr(self, _KIND_FIELDS[ResourceKind(kind)])

    def find(self, instance_id: str) -> Optional[TimelineResource]:
        for item in self.resources:
            if item.id == instance_id:
                return item
        return None

    def is_added(self, kind: ResourceKind, resource_id: str) -> bool:
        return any(item.resource_id == resource_id for item in self.for_kind(kind))


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddResource:
    resource: Any
    kind: ClassVar[ResourceKind]


@dataclass(frozen=True)
class AddEffect(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.EFFECT


@dataclass(frozen=True)
class AddFilter(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.FILTER


@dataclass(frozen=True)
class AddTransition(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.TRANSITION


@dataclass(frozen=True)
class AddTemplate(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.TEMPLATE


@dataclass(frozen=True)
class AddMusic(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.MUSIC


@dataclass(frozen=True)
class AddSubtitle(AddResource):
    kind: ClassVar[ResourceKind] = ResourceKind.SUBTITLE


@dataclass(frozen=True)
class RemoveResource:
    id: str


@dataclass(frozen=True)
class UpdateResource:
    id: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoadResources:
    resources: Sequence[TimelineResource] = ()


@dataclass(frozen=True)
class ClearResources:
    pass


ADD_EVENTS: Dict[ResourceKind, type] = {
    cls.kind: cls for cls in (AddEffect, AddFilter, AddTransition, AddTemplate, AddMusic, AddSubtitle)
}


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def dispatch(state: TimelineResourcesState, event: Any) -> TimelineResourcesState:
    """Return the state after *event*; unchanged states are returned as-is."""

    if isinstance(event, AddResource):
        return _add(state, event.kind, event.resource)
    if isinstance(event, RemoveResource):
        return _remove(state, event.id)
    if isinstance(event, UpdateResource):
        return _update(state, event.id, event.params)
    if isinstance(event, LoadResources):
        return _load(event.resources)
    if isinstance(event, ClearResources):
        return TimelineResourcesState() if state.resources else state
    raise TypeError(f"Unsupported timeline event: {event!r}")


def _add(state: TimelineResourcesState, kind: ResourceKind, resource: Any) -> TimelineResourcesState:
    if resource is None:
        LOGGER.warning("Add %s event without a resource ignored", kind.value)
        return state
    if state.is_added(kind, _resource_id(resource)):
        return state
    instance = TimelineResource.create(kind, resource)
    return replace(
        state,
        resources=state.resources + (instance,),
        **{_KIND_FIELDS[kind]: state.for_kind(kind) + (instance,)},
    )


def _remove(state: TimelineResourcesState, instance_id: str) -> TimelineResourcesState:
    target = state.find(instance_id)
    if target is None:
        return state
    return replace(
        state,
        resources=tuple(item for item in state.resources if item.id != instance_id),
        **{_KIND_FIELDS[target.kind]: tuple(item for item in state.for_kind(target.kind) if item.id != instance_id)},
    )


def _update(state: TimelineResourcesState, instance_id: str, params: Mapping[str, Any]) -> TimelineResourcesState:
    target = state.find(instance_id)
    if target is None:
        return state

    def _merge(items: Tuple[TimelineResource, ...]) -> Tuple[TimelineResource, ...]:
        return tuple(
            replace(item, params={**item.params, **params}) if item.id == instance_id else item
            for item in items
        )

    name = _KIND_FIELDS[target.kind]
    return replace(
        state,
        resources=_merge(state.resources),
        **{name: _merge(state.for_kind(target.kind))},
    )


def _load(resources: Sequence[TimelineResource]) -> TimelineResourcesState:
    state = TimelineResourcesState()
    for item in resources:
        if state.is_added(item.kind, item.resource_id):
            continue
        name = _KIND_FIELDS[item.kind]
        state = replace(
            state,
            resources=state.resources + (item,),
            **{name: state.for_kind(item.kind) + (item,)},
        )
    return state


# ---------------------------------------------------------------------------
# Stateful holder
# ---------------------------------------------------------------------------


class TimelineResourceBinder:
    """Holds the current state, applies events and notifies listeners."""

    def __init__(
        self,
        state: Optional[TimelineResourcesState] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._state = state or TimelineResourcesState()
        self._events = event_bus
        self.changed = Signal("timeline_resources_changed")

    @property
    def state(self) -> TimelineResourcesState:
        return self._state

    def dispatch(self, event: Any) -> TimelineResourcesState:
        new_state = dispatch(self._state, event)
        if new_state is not self._state:
            self._state = new_state
            LOGGER.debug("%s -> %d timeline resources", type(event).__name__, len(new_state.resources))
            self.changed.emit(new_state)
            if self._events is not None:
                self._events.publish(TimelineResourcesChangedEvent(
                    action=type(event).__name__,
                    resource_count=len(new_state.resources),
                ))
        return self._state

    def add(self, kind: ResourceKind, resource: Any) -> TimelineResourcesState:
        return self.dispatch(ADD_EVENTS[ResourceKind(kind)](resource))

    def remove(self, instance_id: str) -> TimelineResourcesState:
        return self.dispatch(RemoveResource(instance_id))

    def update(self, instance_id: str, params: Mapping[str, Any]) -> TimelineResourcesState:
        return self.dispatch(UpdateResource(instance_id, dict(params)))

    def clear(self) -> TimelineResourcesState:
        return self.dispatch(ClearResources())

    # -- persistence -------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {"resources": [item.to_dict() for item in self._state.resources]}

    def save(self, path: Path) -> None:
        write_json(path, self.to_dict())

    def load(self, path: Path) -> TimelineResourcesState:
        """Replace the state with a saved one; invalid entries are skipped."""
        payload = read_json(path)
        items = []
        for entry in payload.get("resources", []) if isinstance(payload, dict) else []:
            try:
                items.append(TimelineResource.from_dict(entry))
            except (KeyError, TypeError, ValueError) as exc:
                LOGGER.warning("Skipping invalid timeline resource %r: %s", entry, exc)
        return self.dispatch(LoadResources(tuple(items)))
