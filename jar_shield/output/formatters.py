"""Output formatters for JarShield results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Any

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from ..core.results import ExplorationContext
from ..utils.logging import get_logger

SECTION_SEPARATOR = "-" * 82


class ConsoleFormatter:
    """Rich console formatter for JarShield output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the console formatter.

        Args:
            console: Rich console instance
        """
        self.console = console or Console()
        self.logger = get_logger("ConsoleFormatter")

    def format_results(self, context: ExplorationContext, scan_time: float) -> None:
        """Format and display search results.

        Args:
            context: Finished exploration context
            scan_time: Time taken for the search in seconds
        """
        dependency = context.dependency_id

        self._print_section("Overall matches as follows", context.matches)
        self._print_section(
            f"Following poms contain vulnerable dependency :- {dependency}",
            context.formatted_descriptor_matches(),
        )
        self._print_section(
            f"Following jars contain vulnerable dependency :- {dependency}",
            sorted(context.matched_archives),
        )

        if context.errors:
            self.console.print(self._create_errors_table(context))

        self.console.print(self._create_summary_panel(context, scan_time))

    def _print_section(self, title: str, lines: Any) -> None:
        """Print a titled block of plain lines.

        Paths are printed without markup so brackets in entry names survive.
        """
        self.console.print()
        self.console.print(title, style="bold")
        self.console.print(SECTION_SEPARATOR, style="dim")
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def _create_errors_table(self, context: ExplorationContext) -> Table:
        """Create table of local failures.

        Args:
            context: Exploration context

        Returns:
            Rich table with one row per recorded error
        """
        table = Table(title="Problems Encountered")

        table.add_column("Kind", style="yellow", no_wrap=True)
        table.add_column("Location", style="cyan")
        table.add_column("Message", style="white")

        for error in context.errors:
            table.add_row(error.kind, error.location, error.message)

        return table

    def _create_summary_panel(self, context: ExplorationContext, scan_time: float) -> Panel:
        """Create summary panel.

        Args:
            context: Exploration context
            scan_time: Scan time in seconds

        Returns:
            Rich panel with summary
        """
        if context.has_matches:
            style = "red"
            title = f"'{context.dependency_id}' found in {len(context.matched_archives)} archives"
        else:
            style = "green"
            title = f"'{context.dependency_id}' not found"

        content = (
            f"Archives explored: {context.archives_explored}\n"
            f"Matching paths: {len(context.matches)}\n"
            f"Descriptors: {len(context.descriptor_matches)}\n"
            f"Problems: {len(context.errors)}\n"
            f"Scan time: {scan_time:.2f}s"
        )

        return Panel(content, title=title, style=style)

    def format_error(self, error: str, details: Optional[str] = None) -> None:
        """Format and display error message.

        Args:
            error: Error message
            details: Optional error details
        """
        content = f"[bold red]Error:[/bold red] {error}"
        if details:
            content += f"\n\n[dim]{details}[/dim]"

        self.console.print(Panel(content, style="red"))


class JSONFormatter:
    """JSON formatter for JarShield output."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the JSON formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("JSONFormatter")

    def format_results(
        self,
        context: ExplorationContext,
        scan_time: float,
        metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Format search results as JSON.

        Args:
            context: Finished exploration context
            scan_time: Scan time in seconds
            metadata: Optional additional metadata

        Returns:
            Formatted JSON data
        """
        result = context.to_dict()
        result["scan_summary"] = {
            "archives_explored": context.archives_explored,
            "total_matches": len(context.matches),
            "archives_with_matches": len(context.matched_archives),
            "total_errors": len(context.errors),
            "scan_time_seconds": scan_time,
            "timestamp": datetime.now().isoformat(),
        }

        if metadata:
            result["metadata"] = metadata

        return result

    def save_results(
        self,
        results: Dict[str, Any],
        output_file: Optional[Path] = None
    ) -> None:
        """Save results to JSON file.

        Args:
            results: Results dictionary
            output_file: Output file path (uses instance default if None)
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2, ensure_ascii=False)

            self.logger.info(f"Results saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save results to {file_path}: {e}")
            raise
