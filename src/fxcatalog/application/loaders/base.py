"""Common contract for source loaders."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ...catalog.schema import validate_records
from ...domain.cancellation import AbortSignal, check_signal
from ...domain.models import LoadResult, Resource, ResourceSource, ResourceType
from ...errors import FxCatalogError, LoadAbortedError

LOGGER = logging.getLogger(__name__)

ALL_TYPES: tuple[ResourceType, ...] = tuple(ResourceType)


def records_to_resources(
    resource_type: ResourceType,
    records: Any,
    origin: str,
) -> List[Resource]:
    """Validate a raw payload and build immutable resources from it."""
    validated = validate_records(records, origin=origin)
    return [Resource.from_record(resource_type, record) for record in validated]


class SourceLoader(ABC):
    """One strategy per logical source.

    ``load`` never raises for expected failures: problems are reported through
    the returned :class:`LoadResult`. Only cancellation propagates, as
    :class:`LoadAbortedError`.
    """

    source: ResourceSource

    def __init__(self, kinds: Sequence[ResourceType] = ALL_TYPES) -> None:
        self._kinds = tuple(kinds)

    @property
    def kinds(self) -> tuple[ResourceType, ...]:
        return self._kinds

    async def load(self, resource_type: ResourceType, signal: Optional[AbortSignal] = None) -> LoadResult:
        try:
            resources = await self._load_kind(ResourceType(resource_type))
        except LoadAbortedError:
            raise
        except (FxCatalogError, OSError, ValueError, LookupError, TypeError, AttributeError) as exc:
            LOGGER.warning("Loading %s from %s failed: %s", resource_type, self.source.value, exc)
            return LoadResult.failure(f"Failed to load {ResourceType(resource_type).value}: {exc}", self.source)
        return LoadResult.ok(resources, self.source)

    async def load_all(self, signal: Optional[AbortSignal] = None) -> Dict[ResourceType, LoadResult]:
        """Fan out one load per kind and fan the results back in.

        A sub-load that raises is converted into a failed result for that kind
        only; the others are unaffected.
        """
        check_signal(signal)
        outcomes = await asyncio.gather(
            *(self.load(kind, signal) for kind in self._kinds),
            return_exceptions=True,
        )
        results: Dict[ResourceType, LoadResult] = {}
        for kind, outcome in zip(self._kinds, outcomes):
            if isinstance(outcome, LoadResult):
                results[kind] = outcome
            elif isinstance(outcome, asyncio.CancelledError):
                raise outcome
            else:
                results[kind] = LoadResult.failure(str(outcome), self.source)
        return results

    @abstractmethod
    async def _load_kind(self, resource_type: ResourceType) -> List[Resource]:
        """Return every resource of *resource_type*; raise on failure"""


def failed_kinds(results: Dict[ResourceType, LoadResult]) -> List[str]:
    return [result.error or kind.value for kind, result in results.items() if not result.success]


def flatten(results: Iterable[LoadResult]) -> List[Resource]:
    resources: List[Resource] = []
    for result in results:
        if result.success:
            resources.extend(result.data)
    return resources
