"""Console output shared by the CLI and the rich log handler."""
from contextlib import contextmanager
from typing import Callable, Iterator

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, MofNCompleteColumn

console = Console()


@contextmanager
def import_progress(total: int, description: str = "Importing") -> Iterator[Callable[[int], None]]:
    """Progress bar for a batched dictionary import.

    Yields a callback that advances the bar by the size of a committed batch.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=total)
        yield lambda n: progress.advance(task, n)
