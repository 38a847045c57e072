import sys
from pathlib import Path
from types import ModuleType
from typing import Callable, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fxcatalog.application.loaders import BuiltInLoader, ImportedLoader, LocalLoader, RemoteLoader  # noqa: E402
from fxcatalog.application.services.catalog_service import ResourceCatalog  # noqa: E402
from fxcatalog.domain.models import LoadingConfig, ResourceType  # noqa: E402


EFFECT_RECORDS: List[dict] = [
    {
        "id": "blur",
        "name": "Blur",
        "category": "basic",
        "complexity": "basic",
        "tags": ["soft"],
        "labels": {"en": "Blur", "fr": "Flou"},
        "ffmpegCommand": "boxblur={radius}",
        "params": {"radius": 5},
    },
    {
        "id": "glow",
        "name": "Glow",
        "category": "light",
        "complexity": "advanced",
        "tags": ["light", "soft"],
        "description": "Soft bloom around highlights",
    },
]

FILTER_RECORDS: List[dict] = [
    {
        "id": "sepia",
        "name": "Sepia",
        "category": "vintage",
        "complexity": "basic",
        "tags": ["warm"],
        "cssFilter": "sepia({amount})",
        "params": {"amount": 0.8},
    },
]


def _importer(catalogs: Dict[str, object]) -> Callable[[str], ModuleType]:
    """Build an importer serving ``RECORDS`` from *catalogs* keyed by kind."""

    def _import(name: str) -> ModuleType:
        kind = name.rsplit(".", 1)[-1]
        if kind not in catalogs:
            raise ImportError(f"No module named {name!r}")
        module = ModuleType(name)
        module.RECORDS = catalogs[kind]
        return module

    return _import


@pytest.fixture
def make_importer():
    return _importer


@pytest.fixture
def effect_records():
    return [dict(record) for record in EFFECT_RECORDS]


@pytest.fixture
def builtin_loader():
    return BuiltInLoader(
        kinds=(ResourceType.EFFECTS, ResourceType.FILTERS),
        importer=_importer({"effects": EFFECT_RECORDS, "filters": FILTER_RECORDS}),
    )


@pytest.fixture
def imported_loader():
    return ImportedLoader(kinds=(ResourceType.EFFECTS, ResourceType.FILTERS))


@pytest.fixture
def catalog(builtin_loader, imported_loader):
    catalog = ResourceCatalog(
        loaders=[
            builtin_loader,
            LocalLoader(kinds=(ResourceType.EFFECTS, ResourceType.FILTERS)),
            RemoteLoader(kinds=(ResourceType.EFFECTS, ResourceType.FILTERS)),
            imported_loader,
        ],
        config=LoadingConfig(background_load_delay=0),
    )
    yield catalog
    catalog.close()
