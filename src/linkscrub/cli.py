"""
linkscrub CLI - Command Line Interface

Entry point for command-line operations: stripping tracking parameters,
extracting and sanitizing URLs from text, classification reports and
reachability probes.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from linkscrub import __version__
from linkscrub.bulk.extractor import extract as extract_urls
from linkscrub.bulk.filters import URLFilter
from linkscrub.checker.checker import URLChecker
from linkscrub.classifier.classifier import URLClassifier
from linkscrub.cleaner.cleaner import URLCleaner
from linkscrub.core.config import AppConfig, load_config
from linkscrub.core.constants import DEFAULTS
from linkscrub.core.exceptions import LinkScrubError
from linkscrub.url.normalizer import URLNormalizer
from linkscrub.url.parser import get_domain, get_extension, get_scheme, is_valid


# Create CLI app
app = typer.Typer(
    name="linkscrub",
    help="linkscrub - Clean, classify and normalize URLs",
    add_completion=False,
    no_args_is_help=True,
)

# Rich consoles for reports and diagnostics
console = Console()
err_console = Console(stderr=True)


@dataclass
class CLIState:
    """Objects shared by every command of one invocation."""
    config: AppConfig
    cleaner: URLCleaner
    normalizer: URLNormalizer
    classifier: URLClassifier
    url_filter: URLFilter

    @classmethod
    def from_config(cls, config: AppConfig) -> "CLIState":
        normalizer = URLNormalizer(config.site_context())
        classifier = URLClassifier()
        return cls(
            config=config,
            cleaner=URLCleaner(config.build_tracking_params()),
            normalizer=normalizer,
            classifier=classifier,
            url_filter=URLFilter(normalizer=normalizer, classifier=classifier),
        )


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _state(ctx: typer.Context) -> CLIState:
    return ctx.obj


def _read_text(source: Optional[Path]) -> str:
    """Read a file, or stdin when source is None or '-'."""
    if source is None or str(source) == "-":
        return sys.stdin.read()
    try:
        return source.read_text()
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Failed to read {source}: {e}")
        raise typer.Exit(code=1)


def _read_lines(source: Optional[Path]) -> list[str]:
    return [line for line in _read_text(source).splitlines() if line.strip()]


def _emit(urls: list[str]) -> None:
    for url in urls:
        typer.echo(url)


# ============================================================================
# Global Options
# ============================================================================

@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
) -> None:
    """Clean, classify and normalize URLs."""
    _setup_logging(verbose)

    # version needs no configuration
    if ctx.invoked_subcommand == "version":
        return

    try:
        loaded = load_config(config)
    except LinkScrubError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    ctx.obj = CLIState.from_config(loaded)


# ============================================================================
# Cleaning Commands
# ============================================================================

@app.command()
def strip(
    ctx: typer.Context,
    urls: List[str] = typer.Argument(..., help="URLs to clean"),
    custom: List[str] = typer.Option(
        [],
        "--custom",
        "-c",
        help="Extra parameter to remove (repeatable)",
    ),
    keep: List[str] = typer.Option(
        [],
        "--keep",
        "-k",
        help="Parameter to keep even if tracked (repeatable)",
    ),
) -> None:
    """
    Strip tracking parameters from URLs.

    Invalid URLs are printed unchanged.
    """
    state = _state(ctx)
    keep_all = [*state.config.tracking_keep, *keep]
    _emit(state.cleaner.strip_multiple(urls, custom, keep_all))


@app.command()
def sanitize(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="File with one URL per line (stdin if omitted)"),
    custom: List[str] = typer.Option([], "--custom", "-c", help="Extra parameter to remove (repeatable)"),
    keep: List[str] = typer.Option([], "--keep", "-k", help="Parameter to keep (repeatable)"),
) -> None:
    """
    Validate, strip and deduplicate a list of URLs.

    Invalid URLs are dropped.
    """
    state = _state(ctx)
    keep_all = [*state.config.tracking_keep, *keep]
    _emit(state.cleaner.sanitize(_read_lines(source), custom, keep_all))


@app.command()
def extract(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="Text file (stdin if omitted)"),
    clean: bool = typer.Option(
        False,
        "--sanitize",
        "-s",
        help="Strip tracking parameters and deduplicate the results",
    ),
) -> None:
    """
    Extract http(s) URLs from free text.
    """
    state = _state(ctx)
    found = extract_urls(_read_text(source))
    if clean:
        found = state.cleaner.sanitize(found, keep=state.config.tracking_keep)
    _emit(found)


# ============================================================================
# Inspection Commands
# ============================================================================

@app.command()
def check(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to inspect"),
) -> None:
    """
    Show structure, classification and tracking parameters of a URL.
    """
    state = _state(ctx)
    result = state.classifier.classify(url)
    tracked = state.cleaner.tracking_params_in(url)

    table = Table(title=url, show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Valid", "[green]yes[/green]" if is_valid(url) else "[red]no[/red]")
    table.add_row("Scheme", get_scheme(url) or "-")
    table.add_row("Domain", get_domain(url) or "-")
    table.add_row("Extension", get_extension(url) or "-")
    table.add_row("File type", result.file_type.value if result.file_type else "-")
    table.add_row("Platforms", ", ".join(result.platforms) or "-")
    if state.normalizer.site is not None:
        table.add_row("External", "yes" if state.normalizer.is_external(url) else "no")
    table.add_row("Tracking", ", ".join(tracked) if tracked else "[green]none[/green]")
    table.add_row("Clean URL", state.cleaner.strip(url, keep=state.config.tracking_keep))

    console.print(table)


@app.command()
def domains(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="File with one URL per line (stdin if omitted)"),
) -> None:
    """
    List the unique domains of a list of URLs.
    """
    _emit(_state(ctx).url_filter.get_domains(_read_lines(source)))


@app.command("filter")
def filter_urls(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="File with one URL per line (stdin if omitted)"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="external or internal"),
    protocol: Optional[str] = typer.Option(None, "--protocol", "-p", help="Scheme, e.g. https"),
    file_type: Optional[str] = typer.Option(None, "--type", "-t", help="image, video or audio"),
    valid_only: bool = typer.Option(False, "--valid", help="Keep only valid URLs"),
) -> None:
    """
    Filter a list of URLs. Filters combine; unknown selectors match nothing.
    """
    url_filter = _state(ctx).url_filter
    urls = _read_lines(source)

    if valid_only:
        urls = url_filter.filter_valid(urls)
    if location:
        urls = url_filter.filter_by_location(urls, location)
    if protocol:
        urls = url_filter.filter_by_protocol(urls, protocol)
    if file_type:
        urls = url_filter.filter_by_type(urls, file_type)

    _emit(urls)


@app.command()
def relative(
    ctx: typer.Context,
    urls: List[str] = typer.Argument(..., help="URLs to relativize"),
    site: Optional[str] = typer.Option(None, "--site", help="Site URL (defaults to site.url from config)"),
) -> None:
    """
    Make same-site URLs relative. External URLs are printed unchanged.
    """
    _emit(_state(ctx).url_filter.make_relative(urls, site))


@app.command()
def probe(
    ctx: typer.Context,
    urls: List[str] = typer.Argument(..., help="URLs to probe"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    concurrency: int = typer.Option(DEFAULTS["concurrency"], "--concurrency", help="Parallel requests"),
) -> None:
    """
    Probe URLs over HTTP and report reachability.
    """
    config = _state(ctx).config
    checker = URLChecker(
        timeout=config.checker_timeout,
        max_redirects=config.checker_max_redirects,
        user_agent=config.user_agent,
    )

    results = asyncio.run(checker.probe_many(urls, concurrency=concurrency, timeout=timeout))

    table = Table(title="Reachability")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Status")
    table.add_column("Final URL", overflow="fold")
    table.add_column("Content type")

    for url, info in zip(urls, results):
        if info.failed:
            status = f"[red]{info.error}[/red]"
        elif info.reachable:
            status = f"[green]{info.status_code}[/green]"
        else:
            status = f"[yellow]{info.status_code}[/yellow]"
        table.add_row(url, status, info.final_url or "-", info.content_type or "-")

    console.print(table)

    if not all(info.reachable for info in results):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]linkscrub[/bold cyan] version [yellow]{__version__}[/yellow]")


# ============================================================================
# Params Command
# ============================================================================

@app.command("params")
def params_list(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Only names containing this text"),
) -> None:
    """List the tracking parameters that strip removes."""
    names = _state(ctx).cleaner.get_params()
    if search:
        names = [name for name in names if search.lower() in name.lower()]
    _emit(names)


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
