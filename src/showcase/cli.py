"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from .appctx import AppContext
from .config import SEARCH_FILTER_KEY
from .domain.catalogs import CATALOGS, CatalogConfig, get_catalog
from .errors import (
    ApiError,
    DetailsUnavailableError,
    MalformedResponseError,
    SettingsError,
    ShowcaseError,
    UnknownCatalogError,
)
from .gui.utils.console_logger import ensure_console_logger
from .gui.viewmodels.fetch_runner import ImmediateRunner
from .gui.viewmodels.paginated_list_viewmodel import PaginatedListViewModel

app = typer.Typer(help="Browse the showcase catalogs (websites, videos, creatives)")
console = Console()


class _Options:
    settings_path: Optional[Path] = None
    api_url: Optional[str] = None
    image_url: Optional[str] = None


_options = _Options()


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (UnknownCatalogError, DetailsUnavailableError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except (ApiError, MalformedResponseError) as exc:
            typer.echo(f"API error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except ShowcaseError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _context() -> AppContext:
    return AppContext.create(
        _options.settings_path,
        api_url=_options.api_url,
        image_url=_options.image_url,
    )


def _parse_filters(catalog: CatalogConfig, pairs: List[str]) -> List[tuple[str, str]]:
    parsed: List[tuple[str, str]] = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--filter")
        if not catalog.accepts(key):
            known = ", ".join(catalog.filter_keys) or "none"
            raise typer.BadParameter(
                f"{catalog.name} has no filter {key!r} (available: {known})",
                param_hint="--filter",
            )
        parsed.append((key, value.strip()))
    return parsed


@app.callback()
def main(
    settings: Optional[Path] = typer.Option(None, "--settings", help="Path to settings.json"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override the API base URL"),
    image_url: Optional[str] = typer.Option(None, "--image-url", help="Base URL for thumbnails"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    _options.settings_path = settings
    _options.api_url = api_url
    _options.image_url = image_url
    level = logging.DEBUG if verbose else logging.WARNING
    ensure_console_logger(logging.getLogger("showcase"), "showcase-console", level=level)


@app.command()
def catalogs() -> None:
    """List the available catalogs and their filters."""

    table = Table(title="Catalogs")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Endpoint")
    table.add_column("Page size", justify="right")
    table.add_column("Filters")
    for catalog in CATALOGS.values():
        table.add_row(
            catalog.name,
            catalog.title,
            catalog.endpoint,
            str(catalog.page_size),
            ", ".join(catalog.filter_keys) or "-",
        )
    console.print(table)


@app.command("list")
@_handle_errors
def list_items(
    catalog_name: str = typer.Argument(..., metavar="CATALOG"),
    search: str = typer.Option("", "--search", "-s", help="Keyword to search for"),
    filters: List[str] = typer.Option([], "--filter", "-f", help="KEY=VALUE filter, repeatable"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
) -> None:
    """Load one or more pages of a catalog, the way scrolling would."""

    catalog = get_catalog(catalog_name)
    parsed = _parse_filters(catalog, filters)
    context = _context()
    try:
        viewmodel = PaginatedListViewModel(
            catalog,
            context.loader_for(catalog),
            config=context.config,
            runner=ImmediateRunner(),
            event_bus=context.event_bus,
            error_handler=context.error_handler,
        )
        failures: List[str] = []
        viewmodel.fetch_failed.connect(failures.append)

        state = viewmodel.state
        if search:
            state = state.with_filter(SEARCH_FILTER_KEY, search)
        for key, value in parsed:
            state = state.with_filter(key, value)
        viewmodel.filters.value = state

        viewmodel.start()
        while not failures and viewmodel.page < pages and viewmodel.advance_page():
            pass

        if failures:
            typer.echo(f"API error: {failures[-1]}", err=True)
            raise typer.Exit(1)
        _render_items(viewmodel)
        viewmodel.dispose()
    finally:
        context.close()


def _render_items(viewmodel: PaginatedListViewModel) -> None:
    catalog = viewmodel.catalog
    items = viewmodel.items.value
    if viewmodel.show_empty:
        print(f"[yellow]{catalog.empty_message}")
        return

    table = Table(title=catalog.title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Title")
    if catalog.subtitle_field:
        table.add_column("Type")
    if catalog.date_field:
        table.add_column("Date")
    table.add_column("Thumbnail", overflow="fold")
    for item in items:
        row = [str(item.id), item.title]
        if catalog.subtitle_field:
            row.append(item.subtitle or "")
        if catalog.date_field:
            row.append(viewmodel.display_date(item))
        row.append(viewmodel.thumbnail_url(item))
        table.add_row(*row)
    console.print(table)

    total = viewmodel.total_count.value
    if viewmodel.show_end_of_results:
        print(f"[dim]{catalog.end_message}")
    else:
        print(f"[dim]Showing {len(items)} of {total} {catalog.noun}")


@app.command()
@_handle_errors
def options(catalog_name: str = typer.Argument(..., metavar="CATALOG")) -> None:
    """Show the selector options offered for a catalog's filters."""

    catalog = get_catalog(catalog_name)
    if not catalog.filters:
        print(f"[yellow]{catalog.title} has no categorical filters")
        return
    context = _context()
    try:
        derived = context.reference_data.options_for(catalog)
    finally:
        context.close()
    for spec in catalog.filters:
        table = Table(title=f"{spec.key} ({spec.category})")
        table.add_column("Value", style="cyan")
        table.add_column("Label")
        for option in derived.get(spec.key, []):
            table.add_row(option.value or '""', option.label)
        console.print(table)


@app.command()
@_handle_errors
def show(
    catalog_name: str = typer.Argument(..., metavar="CATALOG"),
    item_id: str = typer.Argument(..., metavar="ID"),
) -> None:
    """Print the detail record of a single item."""

    catalog = get_catalog(catalog_name)
    context = _context()
    try:
        record = context.loader_for(catalog).fetch_details(item_id)
    finally:
        context.close()
    console.print_json(data=dict(record))


@app.command()
def gui(catalog_name: Optional[str] = typer.Argument(None, metavar="[CATALOG]")) -> None:
    """Launch the desktop browser."""

    from .gui.main import main as gui_main

    argv = ["showcase"] + ([catalog_name] if catalog_name else [])
    raise typer.Exit(
        gui_main(
            argv,
            settings_path=_options.settings_path,
            api_url=_options.api_url,
            image_url=_options.image_url,
        )
    )


if __name__ == "__main__":
    app()
