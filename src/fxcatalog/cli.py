"""Typer-based CLI entry point."""

from __future__ import annotations

import asyncio
import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from .application.loaders import ImportedLoader
from .application.services.catalog_service import ResourceCatalog
from .application.services.chunked_loader import ChunkedResourceLoader
from .config import DEFAULT_CHUNK_SIZE, DEFAULT_LOCALE
from .di.bootstrap import bootstrap
from .di.container import Container
from .domain.models import Resource, ResourceSource, ResourceType
from .domain.query import SearchOptions
from .errors import FxCatalogError, LoadAbortedError, ResourceNotFoundError
from .query.accessors import get_resource_group_value, get_resource_sort_value
from .query.engine import group_items, sort_items
from .settings.manager import SettingsManager

app = typer.Typer(help="Browse the creative-resource catalog")
console = Console()


def _create_di_container() -> Container:
    settings = SettingsManager()
    settings.load()
    return bootstrap(Container(), settings=settings)


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except LoadAbortedError as exc:
            typer.echo(f"Aborted: {exc}", err=True)
            raise typer.Exit(1) from exc
        except FxCatalogError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def _loaded_catalog(container: Container, sources: List[ResourceSource]) -> ResourceCatalog:
    catalog = container.resolve(ResourceCatalog)
    results = await catalog.load_sources(sources)
    for source, result in results.items():
        if not result.success:
            typer.echo(f"Warning: {source.value}: {result.error}", err=True)
    return catalog


def _resource_table(title: str, resources: List[Resource], locale: str) -> Table:
    table = Table(title=title or None)
    table.add_column("id")
    table.add_column("name")
    table.add_column("category")
    table.add_column("complexity")
    table.add_column("tags")
    for resource in resources:
        table.add_row(
            resource.id,
            resource.label(locale),
            resource.category,
            resource.complexity,
            ", ".join(sorted(resource.tags)),
        )
    return table


@app.command("list")
@_handle_errors
def list_resources(
    resource_type: str = typer.Argument(..., help="effects, filters, transitions, templates, music or subtitles"),
    source: Optional[str] = typer.Option(None, help="Restrict to one source"),
    sort: str = typer.Option("name", help="Sort field"),
    order: str = typer.Option("asc", help="asc or desc"),
    group: str = typer.Option("none", help="Group field"),
    locale: str = typer.Option(DEFAULT_LOCALE, help="Label locale"),
) -> None:
    """List catalog resources, sorted and grouped."""

    kind = ResourceType.parse(resource_type)
    container = _create_di_container()

    async def _run() -> List[Resource]:
        catalog = await _loaded_catalog(container, [ResourceSource.BUILT_IN, ResourceSource.LOCAL])
        return catalog.get_resources(kind, source)

    resources = asyncio.run(_run())
    ordered = sort_items(resources, sort, order, get_resource_sort_value)
    for bucket in group_items(ordered, group, get_resource_group_value, order):
        console.print(_resource_table(bucket.title, bucket.items, locale))


@app.command()
@_handle_errors
def search(
    resource_type: str = typer.Argument(...),
    query: str = typer.Argument(""),
    category: Optional[str] = typer.Option(None),
    tag: List[str] = typer.Option([], help="Match any of these tags"),
    complexity: Optional[str] = typer.Option(None),
    limit: Optional[int] = typer.Option(None),
    offset: int = typer.Option(0),
) -> None:
    """Search resources by text, category, tags and complexity."""

    kind = ResourceType.parse(resource_type)
    options = SearchOptions(
        query=query or None,
        category=category,
        tags=list(tag),
        complexity=complexity,
        offset=offset,
        limit=limit,
    )
    container = _create_di_container()

    async def _run() -> List[Resource]:
        catalog = await _loaded_catalog(container, [ResourceSource.BUILT_IN, ResourceSource.LOCAL])
        return catalog.search_resources(kind, options)

    found = asyncio.run(_run())
    console.print(_resource_table(f"{len(found)} {kind.value}", found, DEFAULT_LOCALE))


@app.command()
@_handle_errors
def stats() -> None:
    """Show resource counts per type and source."""

    container = _create_di_container()

    async def _run():
        catalog = await _loaded_catalog(container, list(ResourceSource))
        return catalog.get_stats(), catalog.get_loading_state()

    result, state = asyncio.run(_run())
    table = Table(title=f"{result.total} resources")
    table.add_column("group")
    table.add_column("count", justify="right")
    for kind, count in result.by_type.items():
        table.add_row(kind.value, str(count))
    for source, count in result.by_source.items():
        table.add_row(f"source:{source.value}", str(count))
    console.print(table)
    print(f"cache size: {result.cache_size} bytes, progress: {state.progress:.0f}%")


@app.command()
@_handle_errors
def chunks(
    resource_type: str = typer.Argument(...),
    size: int = typer.Option(DEFAULT_CHUNK_SIZE, min=1, help="Resources per chunk"),
) -> None:
    """Walk the built-in catalog in fixed-size chunks."""

    loader = ChunkedResourceLoader(chunk_size=size)

    async def _run() -> None:
        index = 0
        async for chunk in loader.load_resources_in_chunks(resource_type):
            if not chunk.success:
                typer.echo(f"Error: {chunk.error}", err=True)
                raise typer.Exit(1)
            index += 1
            print(f"[bold]chunk {index}[/bold]: " + ", ".join(r.id for r in chunk.data))

    asyncio.run(_run())


@app.command("import")
@_handle_errors
def import_file(path: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Validate and import a JSON catalog file."""

    container = _create_di_container()
    counts = container.resolve(ImportedLoader).import_file(path)

    async def _run() -> ResourceCatalog:
        return await _loaded_catalog(container, [ResourceSource.IMPORTED])

    catalog = asyncio.run(_run())
    for kind, count in counts.items():
        available = len(catalog.get_resources(kind, ResourceSource.IMPORTED))
        print(f"[green]Imported {count} {kind.value}[/green] ({available} available)")


@app.command()
@_handle_errors
def render(
    resource_type: str = typer.Argument(...),
    resource_id: str = typer.Argument(...),
    param: List[str] = typer.Option([], help="Parameter override as key=value"),
) -> None:
    """Render a resource's command template."""

    kind = ResourceType.parse(resource_type)
    overrides = {}
    for item in param:
        key, sep, value = item.partition("=")
        if not sep:
            raise typer.BadParameter(f"expected key=value, got {item!r}")
        overrides[key] = value
    container = _create_di_container()

    async def _run():
        catalog = await _loaded_catalog(container, [ResourceSource.BUILT_IN])
        return catalog.get_resource_by_id(kind, resource_id)

    resource = asyncio.run(_run())
    if resource is None:
        raise ResourceNotFoundError(f"no {kind.value} with id {resource_id!r}")
    command = resource.render(overrides)
    if command is None:
        typer.echo(f"{resource_id} has no command template", err=True)
        raise typer.Exit(1)
    typer.echo(command)


if __name__ == "__main__":  # pragma: no cover
    app()
