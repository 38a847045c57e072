"""Incremental, cancellable traversal of a source's catalog.

The full kind is loaded once; callers then pull fixed-size slices from an
async generator. Between slices the generator hands control back to the
event loop so that iterating a large catalog never starves it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Optional

from ...config import DEFAULT_CHUNK_SIZE
from ...domain.cancellation import AbortSignal, check_signal
from ...domain.models import LoadResult, ResourceType
from ...errors import UnknownResourceTypeError
from ..loaders.base import SourceLoader
from ..loaders.builtin import BuiltInLoader

LOGGER = logging.getLogger(__name__)


class ChunkedResourceLoader:
    """Chunked variant of a :class:`SourceLoader` (built-in by default)."""

    def __init__(self, loader: Optional[SourceLoader] = None, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._loader = loader or BuiltInLoader()
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def load_resources_in_chunks(
        self,
        resource_type: ResourceType | str,
        chunk_size: Optional[int] = None,
        signal: Optional[AbortSignal] = None,
    ) -> AsyncIterator[LoadResult]:
        return load_resources_in_chunks(
            self._loader,
            resource_type,
            self._chunk_size if chunk_size is None else chunk_size,
            signal,
        )


async def load_resources_in_chunks(
    loader: SourceLoader,
    resource_type: ResourceType | str,
    chunk_size: int,
    signal: Optional[AbortSignal] = None,
) -> AsyncIterator[LoadResult]:
    """Yield successive ``LoadResult`` slices of *chunk_size* in catalog order.

    The abort signal is checked before each slice; an aborted signal makes the
    next ``__anext__`` raise :class:`LoadAbortedError`. A failed underlying
    load yields one failed result and ends the sequence. The generator is
    single-use.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    try:
        kind = ResourceType.parse(resource_type)
    except UnknownResourceTypeError as exc:
        yield LoadResult.failure(str(exc), loader.source)
        return

    check_signal(signal)
    result = await loader.load(kind, signal)
    if not result.success:
        yield result
        return

    items = result.data
    LOGGER.debug("Chunking %d %s into slices of %d", len(items), kind.value, chunk_size)
    for start in range(0, len(items), chunk_size):
        if start:
            await asyncio.sleep(0)
        check_signal(signal)
        yield LoadResult.ok(items[start:start + chunk_size], loader.source)
