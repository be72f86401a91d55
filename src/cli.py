"""CLI for inspecting site content."""

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.config import FolioConfig, load_config, merge_cli_overrides
from folio.content.dates import format_date
from folio.content.models import BlogPostMetadata, ContentRecord, PromptMetadata
from folio.content.read_time import estimate_read_time
from folio.content.services import (
    blog_posts_collection,
    prompts_collection,
)
from folio.shared.errors import ConfigError, ContentError

app = typer.Typer(
    name="folio",
    help="List and inspect blog posts and prompts from the content directory.",
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to a .folio.toml file."),
]
RootOption = Annotated[
    Optional[Path],
    typer.Option("--root", "-r", help="Content root directory (overrides config)."),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print machine-readable JSON instead of a table."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Verbose logging."),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from folio import __version__

        console.print(f"folio {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Folio - content pipeline for a personal site."""
    pass


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _resolve_config(config_path: Path | None, root: Path | None, **overrides: object) -> FolioConfig:
    try:
        config = load_config(config_path)
        return merge_cli_overrides(config, content_root=root, **overrides)
    except ConfigError as exc:
        _fail(str(exc))


def _record_json(record: ContentRecord, *, include_content: bool = False) -> dict[str, object]:
    data = record.model_dump(mode="json", exclude={"content", "source_path"})
    data["source_path"] = record.source_path.as_posix()
    if include_content:
        data["content"] = record.content
    return data


def _print_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


def _display_date(value: str) -> str:
    if not value:
        return "-"
    try:
        return format_date(value)
    except ValueError:
        return value


@app.command()
def posts(
    latest: Annotated[
        bool,
        typer.Option("--latest", "-l", help="Only the most recent posts, newest first."),
    ] = False,
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-n", min=0, help="How many recent posts to show (implies --latest)."),
    ] = None,
    config_path: ConfigOption = None,
    root: RootOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """List blog posts."""
    _setup_logging(verbose)
    config = _resolve_config(config_path, root, latest_count=count)
    collection = blog_posts_collection(config.posts_path(Path.cwd()), config.content.post_extension)

    try:
        if latest or count is not None:
            records = collection.latest(config.listing.latest_count)
        else:
            records = collection.read_all()
    except ContentError as exc:
        _fail(str(exc))

    if as_json:
        _print_json([_record_json(r) for r in records])
        return

    if not records:
        console.print("[yellow]No posts found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Published")
    table.add_column("Read time")
    for record in records:
        meta = record.metadata_as(BlogPostMetadata)
        table.add_row(
            escape(record.slug),
            escape(meta.title),
            escape(_display_date(meta.published_at)),
            estimate_read_time(record.content),
        )
    console.print(table)


@app.command()
def post(
    slug: Annotated[str, typer.Argument(help="Slug of the post.")],
    config_path: ConfigOption = None,
    root: RootOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show one blog post."""
    _setup_logging(verbose)
    config = _resolve_config(config_path, root)
    collection = blog_posts_collection(config.posts_path(Path.cwd()), config.content.post_extension)

    try:
        record = collection.get(slug)
    except ContentError as exc:
        _fail(str(exc))

    if record is None:
        _fail(f"No post with slug '{slug}'")

    if as_json:
        payload = _record_json(record, include_content=True)
        payload["read_time"] = estimate_read_time(record.content)
        _print_json(payload)
        return

    meta = record.metadata_as(BlogPostMetadata)
    console.print(f"[bold]{escape(meta.title or record.slug)}[/bold]")
    published = _display_date(meta.published_at)
    console.print(f"{published} • {estimate_read_time(record.content)}")
    if meta.summary:
        console.print(f"[italic]{escape(meta.summary)}[/italic]")
    console.print()
    console.print(record.content, markup=False, highlight=False)


@app.command()
def prompts(
    config_path: ConfigOption = None,
    root: RootOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """List prompt-library entries, newest first."""
    _setup_logging(verbose)
    config = _resolve_config(config_path, root)
    collection = prompts_collection(config.prompts_path(Path.cwd()), config.content.prompt_extension)

    try:
        records = collection.read_all()
    except ContentError as exc:
        _fail(str(exc))

    if as_json:
        _print_json([_record_json(r) for r in records])
        return

    if not records:
        console.print("[yellow]No prompts found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Tags")
    table.add_column("Created")
    for record in records:
        meta = record.metadata_as(PromptMetadata)
        table.add_row(
            escape(record.slug),
            escape(meta.title),
            escape(meta.category),
            escape(", ".join(meta.tags)),
            escape(_display_date(meta.created_at)),
        )
    console.print(table)


@app.command()
def prompt(
    slug: Annotated[str, typer.Argument(help="Slug of the prompt.")],
    config_path: ConfigOption = None,
    root: RootOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show one prompt."""
    _setup_logging(verbose)
    config = _resolve_config(config_path, root)
    collection = prompts_collection(config.prompts_path(Path.cwd()), config.content.prompt_extension)

    try:
        record = collection.get(slug)
    except ContentError as exc:
        _fail(str(exc))

    if record is None:
        _fail(f"No prompt with slug '{slug}'")

    if as_json:
        _print_json(_record_json(record, include_content=True))
        return

    meta = record.metadata_as(PromptMetadata)
    console.print(f"[bold]{escape(meta.title or record.slug)}[/bold]")
    if meta.category:
        console.print(f"Category: {escape(meta.category)}")
    if meta.tags:
        console.print(f"Tags: {escape(', '.join(meta.tags))}")
    if meta.description:
        console.print(f"[italic]{escape(meta.description)}[/italic]")
    console.print()
    console.print(record.content, markup=False, highlight=False)
