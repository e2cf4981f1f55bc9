"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
import msgspec
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape

from skillsearch import __version__
from skillsearch.cli.output import display_hits, display_parsed_query
from skillsearch.config import (
    OUTPUT_FORMATS,
    Settings,
    load_settings,
    parse_directory_specs,
)
from skillsearch.filters import SearchFilters, collect_tags
from skillsearch.highlighting import Highlighter
from skillsearch.loader import scan_skills
from skillsearch.models import Skill
from skillsearch.search import SkillSearcher


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    settings: Settings
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Send log records to stderr at the level the flags ask for.

    --quiet wins over --verbose. --debug also prefixes records with the
    time and logger name.
    """
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG

    log_format = "%(levelname)s: %(message)s"
    if debug:
        log_format = "%(asctime)s %(name)s %(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=log_format, datefmt="%H:%M:%S")


def create_console(no_color: bool = False) -> Console:
    """Create the console results are printed to.

    The width is fixed so descriptions wrap the same way in a pipe as in a
    terminal.
    """
    return Console(
        no_color=no_color,
        width=120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class SkillSearchGroup(click.Group):
    """Custom group that handles KeyboardInterrupt and unexpected errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=SkillSearchGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__,
    prog_name="skillsearch",
    message="skillsearch version %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Search skills with field queries and AND/OR/NOT operators.

    \b
    Query syntax:
    - Field search: name:pdf, description:excel, location:claude
    - AND: pdf AND excel
    - OR: pdf OR docx
    - NOT: pdf NOT pptx
    - Bare words: pdf excel (matches either word)
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    console = create_console(no_color=no_color)

    try:
        settings = load_settings(config)
    except ValueError as e:
        if debug:
            raise
        console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        ctx.exit(1)

    ctx.obj = Context(console=console, settings=settings, debug=debug)


def _load_skills(ctx: click.Context, dir_specs: tuple[str, ...]) -> list[Skill]:
    """Load skills from --dir overrides or the configured directories."""
    settings = ctx.obj.settings
    directories = settings.directories

    if dir_specs:
        try:
            specs = parse_directory_specs(list(dir_specs))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--dir") from e
        directories = {location: Path(path) for location, path in specs.items()}

    return scan_skills(directories)


def _run_search(
    ctx: click.Context,
    query: str,
    locations: tuple[str, ...],
    tags: tuple[str, ...],
    output_format: str | None,
    no_highlight: bool,
    dir_specs: tuple[str, ...],
) -> None:
    console = ctx.obj.console
    settings = ctx.obj.settings

    skills = _load_skills(ctx, dir_specs)
    highlighter = Highlighter(
        highlight_tag=settings.highlight_tag,
        highlight_style=settings.highlight_style,
    )
    searcher = SkillSearcher(skills, highlighter=highlighter)
    filters = SearchFilters(locations=list(locations), tags=list(tags))

    hits = searcher.search(query, filters=filters, highlight=not no_highlight)

    display_hits(
        console,
        hits,
        total=len(skills),
        output_format=output_format or settings.default_format,
        highlighter=None if no_highlight else highlighter,
    )


def _search_options(func):
    """Options shared by the search and list commands."""
    options = [
        click.option(
            "--location",
            "-l",
            "locations",
            multiple=True,
            help="Only skills from this location",
        ),
        click.option(
            "--tag", "-t", "tags", multiple=True, help="Only skills with this tag"
        ),
        click.option(
            "--format",
            "-f",
            "output_format",
            type=click.Choice(OUTPUT_FORMATS),
            default=None,
            help="Output format",
        ),
        click.option("--no-highlight", is_flag=True, help="Disable match highlighting"),
        click.option(
            "--dir",
            "dir_specs",
            multiple=True,
            metavar="LOCATION=PATH",
            help="Scan this skill directory instead of the configured ones",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@cli.command()
@click.argument("query")
@_search_options
@click.pass_context
def search(ctx: click.Context, query: str, **kwargs) -> None:
    """Search skills matching QUERY."""
    _run_search(ctx, query, **kwargs)


@cli.command(name="list")
@_search_options
@click.pass_context
def list_skills(ctx: click.Context, **kwargs) -> None:
    """List all skills, optionally filtered by location or tag."""
    _run_search(ctx, "", **kwargs)


@cli.command()
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed query as JSON")
@click.pass_context
def explain(ctx: click.Context, query: str, as_json: bool) -> None:
    """Show how QUERY is parsed."""
    console = ctx.obj.console
    parsed_query = SkillSearcher([]).explain(query)

    if as_json:
        console.out(msgspec.json.encode(parsed_query).decode(), highlight=False)
    else:
        display_parsed_query(console, parsed_query)


@cli.command()
@click.option(
    "--dir",
    "dir_specs",
    multiple=True,
    metavar="LOCATION=PATH",
    help="Scan this skill directory instead of the configured ones",
)
@click.pass_context
def tags(ctx: click.Context, dir_specs: tuple[str, ...]) -> None:
    """List tags declared in skill frontmatter."""
    console = ctx.obj.console
    all_tags = collect_tags(_load_skills(ctx, dir_specs))

    if not all_tags:
        console.print("[yellow]No tags found in skill metadata[/yellow]")
        return

    for tag in all_tags:
        console.print(tag, markup=False, highlight=False)


def main() -> None:
    """Entry point for the skillsearch command."""
    cli()
