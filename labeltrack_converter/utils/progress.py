"""
Console progress reporting for the Label Track Converter.

Read progress arrives as percentages (0-100) through a plain callback, so
the conversion pipeline never depends on the console. This module renders
those updates with a Rich progress bar and prints the end-of-run summary.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table


class ReadProgressReporter:
    """
    Rich progress bar fed by percentage callbacks.

    Use as a context manager and pass the instance itself as the progress
    callback:

        >>> with ReadProgressReporter(console) as reporter:
        ...     converter.convert_file(path, progress=reporter)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        description: str = "Reading bookmarks",
        enabled: bool = True,
    ):
        self.console = console or Console(stderr=True)
        self.description = description
        self.enabled = enabled
        self.history: List[float] = []
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def __enter__(self) -> "ReadProgressReporter":
        if self.enabled:
            self._progress = Progress(
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                TextColumn("{task.percentage:>3.0f}%"),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            )
            self._progress.start()
            self._task = self._progress.add_task(self.description, total=100)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None

    def __call__(self, percent: float) -> None:
        percent = max(0.0, min(100.0, float(percent)))
        self.history.append(percent)
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, completed=percent)

    @property
    def last_percent(self) -> Optional[float]:
        return self.history[-1] if self.history else None


def print_conversion_summary(
    console: Console,
    output_path,
    entry_names: List[str],
    statistics: Dict[str, int],
    warning_message: Optional[str] = None,
) -> None:
    """Print the archive location, its entries and any aggregated warning."""
    table = Table(title="Label tracks", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Entry")
    for number, name in enumerate(entry_names, start=1):
        table.add_row(str(number), name)

    if entry_names:
        console.print(table)
    else:
        console.print("[yellow]No bookmarks found; the archive is empty.[/yellow]")

    console.print(
        f"[green]Wrote {statistics.get('label_tracks', 0)} label track(s) "
        f"from {statistics.get('bookmarks', 0)} bookmark(s) to {output_path}[/green]"
    )

    if warning_message:
        console.print(f"[bold yellow]Warning:[/bold yellow] {warning_message}")
