"""
Console status output for exports using rich.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

console = Console()


@contextmanager
def operation_status(operation: str) -> Iterator[None]:
    """
    Context manager to show operation status.

    Usage:
        with operation_status("Exporting ansible"):
            # do work
            pass

    Args:
        operation: Description of the operation

    Yields:
        None
    """
    console.print(f"[bold blue]{operation}...[/bold blue]")

    try:
        yield
        console.print(f"[green]✓ {operation} complete[/green]")
    except Exception as e:
        console.print(f"[red]✗ {operation} failed: {e}[/red]")
        raise
