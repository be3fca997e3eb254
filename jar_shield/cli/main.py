"""Main CLI interface for JarShield."""

import time
from pathlib import Path
from typing import Optional, List
import typer
from rich.console import Console
from rich.panel import Panel

from .. import __version__
from ..utils.logging import setup_logging, get_logger
from ..utils.performance import PerformanceMonitor
from ..core.config import ExplorerConfig
from ..core.errors import InvocationError
from ..core.explorer import search_archive
from ..output.formatters import ConsoleFormatter, JSONFormatter

app = typer.Typer(
    name="jarshield",
    help="Find every copy of a dependency bundled inside a nested (fat) archive",
    add_completion=False
)

console = Console()
logger = get_logger("CLI")


@app.command()
def search(
    archive: Path = typer.Argument(
        ...,
        help="Path to the root archive, e.g. a fat application jar"
    ),
    dependency: str = typer.Argument(
        ...,
        help="Dependency to look for: a bare name or a group:artifact pair"
    ),
    staging_dir: Optional[Path] = typer.Argument(
        None,
        help="Directory the archive is copied into before exploring"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for JSON results"
    ),
    extensions: Optional[List[str]] = typer.Option(
        None,
        "--extension",
        "-e",
        help="Archive extension to explode (repeatable, default .jar)"
    ),
    max_depth: int = typer.Option(
        32,
        "--max-depth",
        min=0,
        max=200,
        help="Maximum archive nesting depth"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write diagnostics to this file"
    ),
    performance: bool = typer.Option(
        False,
        "--performance",
        help="Show per-archive timing summary"
    )
) -> None:
    """Search an archive, and every archive nested in it, for a dependency."""

    setup_logging(verbose=verbose, log_file=log_file)

    try:
        config = ExplorerConfig(
            archive_extensions=tuple(extensions) if extensions else (".jar",),
            max_depth=max_depth,
        )
    except ValueError as e:
        ConsoleFormatter(console).format_error(str(e))
        raise typer.Exit(1)

    monitor = PerformanceMonitor(enabled=performance)

    start_time = time.perf_counter()
    try:
        context = search_archive(
            archive,
            dependency,
            staging_dir=staging_dir,
            config=config,
            monitor=monitor,
        )
    except InvocationError as e:
        logger.error(f"Invalid invocation: {e.message}")
        ConsoleFormatter(console).format_error(e.message, e.location)
        raise typer.Exit(1)
    scan_time = time.perf_counter() - start_time

    ConsoleFormatter(console).format_results(context, scan_time)

    if output:
        json_formatter = JSONFormatter(output)
        json_formatter.save_results(json_formatter.format_results(
            context,
            scan_time,
            metadata={"version": __version__, "staging_dir": str(staging_dir) if staging_dir else None},
        ))

    if performance:
        monitor.print_summary(console)


@app.command()
def info() -> None:
    """Show JarShield information."""

    defaults = ExplorerConfig()
    console.print(Panel.fit(
        f"[bold blue]JarShield[/bold blue] {__version__}\n"
        "Explodes an archive and every archive nested inside it, then reports\n"
        "paths, pom.xml versions and archives that mention a dependency",
        title="Information"
    ))

    console.print(f"\n[bold]Archive extensions:[/bold] {', '.join(defaults.archive_extensions)}")
    console.print(f"[bold]Descriptor file:[/bold] {defaults.descriptor_name}")
    console.print(f"[bold]Skipped files:[/bold] *{defaults.compiled_suffix}")


def main() -> None:
    """Main entry point for JarShield CLI."""
    app()


if __name__ == "__main__":
    main()
