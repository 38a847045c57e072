"""Default configuration values for fxcatalog."""

from __future__ import annotations

from typing import Final

from .domain.models import LoadingConfig, ResourceSource, SourceConfig

# Source priorities decide the order in which concurrent loads are started;
# higher runs first. Timeouts are in milliseconds and are enforced per load.
DEFAULT_SOURCE_CONFIGS: Final[dict[ResourceSource, SourceConfig]] = {
    ResourceSource.BUILT_IN: SourceConfig(ResourceSource.BUILT_IN, enabled=True, priority=10, timeout=5000),
    ResourceSource.LOCAL: SourceConfig(ResourceSource.LOCAL, enabled=True, priority=8, timeout=3000),
    # The remote source stays off until a fetcher is configured.
    ResourceSource.REMOTE: SourceConfig(ResourceSource.REMOTE, enabled=False, priority=5, timeout=10000),
    ResourceSource.IMPORTED: SourceConfig(ResourceSource.IMPORTED, enabled=True, priority=6, timeout=5000),
}

DEFAULT_INITIAL_SOURCES: Final[tuple[ResourceSource, ...]] = (ResourceSource.BUILT_IN,)
DEFAULT_BACKGROUND_SOURCES: Final[tuple[ResourceSource, ...]] = (
    ResourceSource.LOCAL,
    ResourceSource.IMPORTED,
)
BACKGROUND_LOAD_DELAY_SEC: Final[float] = 1.0
MAX_CACHE_SIZE_BYTES: Final[int] = 50 * 1024 * 1024


def default_loading_config() -> LoadingConfig:
    return LoadingConfig(
        initial_sources=list(DEFAULT_INITIAL_SOURCES),
        background_sources=list(DEFAULT_BACKGROUND_SOURCES),
        background_load_delay=BACKGROUND_LOAD_DELAY_SEC,
        max_cache_size=MAX_CACHE_SIZE_BYTES,
    )


DEFAULT_CHUNK_SIZE: Final[int] = 20
DEFAULT_LOCALE: Final[str] = "en"

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

ENV_SETTINGS_PATH: Final[str] = "FXCATALOG_SETTINGS"
ENV_LOCAL_DIR: Final[str] = "FXCATALOG_LOCAL_DIR"
