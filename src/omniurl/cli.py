"""
omniurl CLI - Command Line Interface

Entry point for classifying address-bar input, normalizing it into URLs
and running the auxiliary URL rewrites from a terminal.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from omniurl.core.config import load_config
from omniurl.core.exceptions import ConfigError
from omniurl.urlutil import UrlUtil

# Version
__version__ = "0.1.0"

# Create CLI app
app = typer.Typer(
    name="omniurl",
    help="omniurl - Tell URLs from search queries and normalize address-bar input",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _urlutil(ctx: typer.Context) -> UrlUtil:
    return ctx.obj["urlutil"]


# ============================================================================
# Global Options
# ============================================================================

@app.callback()
def main_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom configuration file",
        exists=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log classifier decisions",
    ),
) -> None:
    """Load configuration shared by all commands."""
    _setup_logging(verbose)
    try:
        settings = load_config(config)
    except ConfigError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(code=1)
    ctx.obj = {"urlutil": UrlUtil(settings)}


# ============================================================================
# Main Commands
# ============================================================================

@app.command()
def classify(
    ctx: typer.Context,
    inputs: List[str] = typer.Argument(..., help="Address-bar input to classify"),
) -> None:
    """
    Classify input as URL or search query.

    Shows the verdict and the rule that decided it.
    """
    urlutil = _urlutil(ctx)

    table = Table(title="Classification")
    table.add_column("Input", style="cyan")
    table.add_column("Verdict", style="green")
    table.add_column("Rule", style="yellow")
    table.add_column("URL", style="blue")

    for result in urlutil.classifier.classify_batch(inputs):
        verdict = "[green]url[/green]" if result.is_url else "[magenta]query[/magenta]"
        url = urlutil.get_url_from_input(result.input) if result.is_url else "-"
        table.add_row(escape(result.input), verdict, result.rule, escape(url))

    console.print(table)


@app.command()
def normalize(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Address-bar input"),
) -> None:
    """Print the URL the input would navigate to."""
    urlutil = _urlutil(ctx)
    if urlutil.is_not_url(text):
        console.print(f"[yellow]Not a URL, would search for:[/yellow] {escape(text.strip())}")
        raise typer.Exit(code=2)
    url = urlutil.get_url_from_input(text)
    console.print(url, markup=False, highlight=False, soft_wrap=True)


@app.command()
def patterns(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL or hostname"),
) -> None:
    """List hostname patterns that may match a URL."""
    host_patterns = _urlutil(ctx).get_hostname_patterns(url)
    if not host_patterns:
        console.print(f"[red]Error:[/red] No hostname in {escape(url)!r}")
        raise typer.Exit(code=1)
    for pattern in host_patterns:
        console.print(pattern, markup=False, highlight=False, soft_wrap=True)


@app.command("view-source")
def view_source(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to wrap or unwrap"),
    unwrap: bool = typer.Option(False, "--unwrap", "-u", help="Strip view-source: instead"),
) -> None:
    """Wrap a URL in view-source:, or unwrap it."""
    urlutil = _urlutil(ctx)
    if unwrap:
        console.print(urlutil.get_url_from_view_source_url(url), markup=False, highlight=False, soft_wrap=True)
        return

    wrapped = urlutil.get_view_source_url_from_url(url)
    if wrapped is None:
        console.print(f"[red]Error:[/red] No source view for {escape(url)!r}")
        raise typer.Exit(code=1)
    console.print(wrapped, markup=False, highlight=False, soft_wrap=True)


@app.command()
def pdf(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="PDF or PDF viewer URL"),
    unwrap: bool = typer.Option(False, "--unwrap", "-u", help="Recover the original location"),
) -> None:
    """Route a PDF URL through the PDF viewer, or recover it."""
    urlutil = _urlutil(ctx)
    result = urlutil.get_location_if_pdf(url) if unwrap else urlutil.to_pdfjs_location(url)
    console.print(result, markup=False, highlight=False, soft_wrap=True)


@app.command()
def inspect(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to inspect"),
) -> None:
    """Show every helper's view of a URL."""
    urlutil = _urlutil(ctx)
    result = urlutil.explain(url)

    console.print(Panel.fit(
        f"[bold cyan]{escape(url)}[/bold cyan]\n\n"
        f"Verdict: [green]{result.verdict.value}[/green]\n"
        f"Rule: [yellow]{result.rule}[/yellow]",
        title="Input",
    ))

    rows = [
        ("scheme", urlutil.get_scheme(url)),
        ("normalized", urlutil.get_url_from_input(url)),
        ("hostname", urlutil.get_hostname(urlutil.get_url_from_input(url))),
        ("origin", urlutil.get_url_origin(urlutil.get_url_from_input(url))),
        ("display host", urlutil.get_display_host(url)),
        ("punycode", urlutil.get_punycode_url(url)),
        ("favicon", urlutil.get_default_favicon_url(url)),
        ("view-source", urlutil.get_view_source_url_from_url(url)),
        ("pdf viewer", urlutil.to_pdfjs_location(url)),
        ("image", urlutil.is_image_address(url)),
        ("data url", urlutil.is_data_url(url)),
        ("potential phishing", urlutil.is_potential_phishing_url(url)),
    ]

    table = Table(title="Helpers")
    table.add_column("Helper", style="cyan")
    table.add_column("Result", style="green")
    for name, value in rows:
        table.add_row(name, "-" if value is None or value == "" else escape(str(value)))

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]omniurl[/bold cyan] version [yellow]{__version__}[/yellow]")


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
