from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import LoadingState, Resource, ResourceSource, ResourceType
from .bus import Event


@dataclass(kw_only=True)
class LoadingStateChangedEvent(Event):
    state: LoadingState


@dataclass(kw_only=True)
class ResourcesUpdatedEvent(Event):
    resource_type: ResourceType
    source: Optional[ResourceSource] = None
    resources: List[Resource] = field(default_factory=list)


@dataclass(kw_only=True)
class TimelineResourcesChangedEvent(Event):
    action: str
    resource_count: int = 0
