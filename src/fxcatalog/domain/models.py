from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ..errors import UnknownResourceTypeError, UnknownSourceError
from .templates import render_template


class ResourceType(str, Enum):
    EFFECTS = "effects"
    FILTERS = "filters"
    TRANSITIONS = "transitions"
    TEMPLATES = "templates"
    MUSIC = "music"
    SUBTITLES = "subtitles"

    @classmethod
    def parse(cls, value: "ResourceType | str") -> "ResourceType":
        try:
            return cls(value)
        except ValueError:
            raise UnknownResourceTypeError(value) from None


# Declaration order is the registration order used whenever loaded sources
# are iterated (merged listings, stats).
class ResourceSource(str, Enum):
    BUILT_IN = "built-in"
    LOCAL = "local"
    REMOTE = "remote"
    IMPORTED = "imported"

    @classmethod
    def parse(cls, value: "ResourceSource | str") -> "ResourceSource":
        try:
            return cls(value)
        except ValueError:
            raise UnknownSourceError(value) from None


class Complexity(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Record keys that map onto first-class Resource fields; everything else on a
# catalog record lands in ``Resource.extra``.
_CORE_KEYS = frozenset({
    "id", "name", "category", "complexity", "tags", "labels", "description",
    "ffmpegCommand", "cssFilter", "params",
})


@dataclass(frozen=True)
class Resource:
    """A single, immutable catalog entry."""

    id: str
    type: ResourceType
    name: str
    category: str = ""
    complexity: str = Complexity.BASIC.value
    tags: FrozenSet[str] = frozenset()
    labels: Mapping[str, str] = field(default_factory=dict)
    description: Mapping[str, str] = field(default_factory=dict)
    command: Optional[str] = None
    params: Mapping[str, Any] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, resource_type: ResourceType, record: Mapping[str, Any]) -> "Resource":
        labels = dict(record.get("labels") or {})
        description = record.get("description") or {}
        if isinstance(description, str):
            description = {"en": description}
        name = record.get("name") or labels.get("en") or record["id"]
        return cls(
            id=str(record["id"]),
            type=resource_type,
            name=name,
            category=record.get("category", ""),
            complexity=record.get("complexity", Complexity.BASIC.value),
            tags=frozenset(record.get("tags") or ()),
            labels=labels,
            description=dict(description),
            command=record.get("ffmpegCommand") or record.get("cssFilter"),
            params=dict(record.get("params") or {}),
            extra={k: v for k, v in record.items() if k not in _CORE_KEYS},
        )

    def label(self, locale: str = "en") -> str:
        return self.labels.get(locale) or self.labels.get("en") or self.name

    def render(self, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """Render the command template, defaults overlaid by *params*."""
        if self.command is None:
            return None
        merged = {**self.params, **(params or {})}
        return render_template(self.command, merged)

    def searchable_text(self) -> List[str]:
        return [self.name, *self.labels.values(), *self.description.values()]

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["type"] = self.type.value
        payload["tags"] = sorted(self.tags)
        return payload


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class LoadResult:
    """Outcome envelope of any load operation."""

    success: bool
    data: List[Any] = field(default_factory=list)
    source: ResourceSource = ResourceSource.BUILT_IN
    error: Optional[str] = None
    timestamp: int = field(default_factory=_now_ms)

    @classmethod
    def ok(cls, data: List[Any], source: ResourceSource) -> "LoadResult":
        return cls(success=True, data=list(data), source=source)

    @classmethod
    def failure(cls, error: str, source: ResourceSource) -> "LoadResult":
        return cls(success=False, data=[], source=source, error=error)


@dataclass
class LoadingState:
    is_loading: bool = False
    # dict used as an insertion-ordered set
    loaded_sources: Dict[ResourceSource, None] = field(default_factory=dict)
    loading_queue: List[ResourceSource] = field(default_factory=list)
    error: Optional[str] = None
    progress: float = 0.0

    def copy(self, **changes) -> "LoadingState":
        base = replace(
            self,
            loaded_sources=dict(self.loaded_sources),
            loading_queue=list(self.loading_queue),
        )
        return replace(base, **changes) if changes else base


@dataclass
class SourceConfig:
    source: ResourceSource
    enabled: bool = True
    priority: int = 0
    timeout: int = 5000  # ms


@dataclass
class LoadingConfig:
    initial_sources: List[ResourceSource] = field(
        default_factory=lambda: [ResourceSource.BUILT_IN]
    )
    background_sources: List[ResourceSource] = field(
        default_factory=lambda: [ResourceSource.LOCAL, ResourceSource.IMPORTED]
    )
    background_load_delay: float = 1.0  # seconds
    enable_caching: bool = True
    max_cache_size: int = 50 * 1024 * 1024


@dataclass
class ResourceStats:
    total: int = 0
    by_type: Dict[ResourceType, int] = field(default_factory=dict)
    by_source: Dict[ResourceSource, int] = field(default_factory=dict)
    cache_size: int = 0
    memory_usage: int = 0


def store_key(resource_type: ResourceType, source: ResourceSource) -> str:
    return f"{ResourceType(resource_type).value}:{ResourceSource(source).value}"
