"""Performance monitoring utilities for JarShield."""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from rich.console import Console
from rich.table import Table


@dataclass
class PerformanceMetrics:
    """Container for performance metrics."""

    function_name: str
    execution_time: float


class PerformanceMonitor:
    """Timing tracker for exploration steps."""

    def __init__(self, enabled: bool = True) -> None:
        self.metrics: List[PerformanceMetrics] = []
        self.enabled = enabled

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        """Context manager for measuring performance.

        Args:
            name: Name of the operation being measured

        Yields:
            None
        """
        if not self.enabled:
            yield
            return

        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.metrics.append(PerformanceMetrics(
                function_name=name,
                execution_time=time.perf_counter() - start_time,
            ))

    def get_summary(self) -> Dict[str, Any]:
        """Get performance summary.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics:
            return {}

        # Nested measurements overlap, the outermost one is the wall time
        total_time = max(m.execution_time for m in self.metrics)
        slowest = max(self.metrics, key=lambda m: m.execution_time)

        return {
            "total_executions": len(self.metrics),
            "total_time": total_time,
            "average_time": sum(m.execution_time for m in self.metrics) / len(self.metrics),
            "slowest": slowest.function_name,
        }

    def print_summary(self, console: Optional[Console] = None) -> None:
        """Print performance summary to console."""
        summary = self.get_summary()
        if not summary:
            return

        table = Table(title="Performance Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Archives Explored", str(summary["total_executions"]))
        table.add_row("Total Time", f"{summary['total_time']:.4f}s")
        table.add_row("Average Time", f"{summary['average_time']:.4f}s")
        table.add_row("Slowest Archive", summary["slowest"])

        (console or Console()).print(table)
