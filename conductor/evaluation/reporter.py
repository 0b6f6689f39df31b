"""Render evaluation results as a rich table."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ..types import EvalResult, EvalSummary


class EvalReporter:
    def __init__(self, threshold: float = 0.7, console: Console | None = None) -> None:
        self.threshold = threshold
        self.console = console or Console()

    def render(self, results: list[EvalResult], summary: EvalSummary | None = None) -> Table:
        table = Table(title="Evaluation Results", show_lines=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Evaluator", style="dim")
        table.add_column("Status")

        for r in results:
            ok = r.score >= self.threshold
            table.add_row(
                r.metric_name,
                f"{r.score:.3f}",
                r.evaluator or "-",
                "[green]pass[/green]" if ok else "[yellow]below threshold[/yellow]",
            )

        if summary is not None:
            table.add_section()
            table.add_row(
                f"[bold]overall ({summary.aggregation})[/bold]",
                f"[bold]{summary.score:.3f}[/bold]",
                "",
                "[bold green]PASSED[/bold green]" if summary.passed else "[bold red]FAILED[/bold red]",
            )
        return table

    def print(self, results: list[EvalResult], summary: EvalSummary | None = None) -> None:
        self.console.print(self.render(results, summary))
