"""Terminal output for rdu."""

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from rdu.models import SizeRecord

console = Console()

# Unit symbols indexed by the number of divisions by 1024
UNITS = ("B", "K", "M", "G")
UNKNOWN_UNIT = "?"

# Width of the scaled size column in human-readable mode
HUMAN_WIDTH = 4


def digit_count(value: int) -> int:
    """Number of decimal digits in a non-negative integer."""
    if value < 2:
        return 1
    return len(str(value))


def scale_size(size_bytes: int) -> tuple[float, int]:
    """
    Scale a byte count down by powers of 1024.

    Returns:
        Tuple of (scaled_value, unit_index) where scaled_value < 1024
    """
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024:
        value /= 1024
        unit_index += 1
    return value, unit_index


def unit_symbol(unit_index: int) -> str:
    """Get the unit symbol for a scale index."""
    if 0 <= unit_index < len(UNITS):
        return UNITS[unit_index]
    return UNKNOWN_UNIT


def format_human_size(size_bytes: int) -> str:
    """Format bytes as a short binary-unit string like ``1.0K`` or ``10M``."""
    value, unit_index = scale_size(size_bytes)
    unit = unit_symbol(unit_index)

    if unit_index == 0:
        return f"{size_bytes}{unit}"

    # One decimal only while it still fits in the column
    decimals = 1 if value < 9.95 else 0
    return f"{value:.{decimals}f}{unit}"


def format_bytes_lines(records: Sequence[SizeRecord]) -> list[str]:
    """Render records as raw byte counts right-aligned to the widest size."""
    if not records:
        return []

    width = digit_count(max(r.size for r in records))
    return [f"{r.size:>{width}}  {r.path}" for r in records]


def format_readable_lines(records: Sequence[SizeRecord]) -> list[str]:
    """Render records with human-readable sizes in a fixed-width column."""
    return [f"{format_human_size(r.size):<{HUMAN_WIDTH}}  {r.path}" for r in records]


def format_records(records: Sequence[SizeRecord], human_readable: bool = False) -> list[str]:
    """Render records in the selected mode."""
    if human_readable:
        return format_readable_lines(records)
    return format_bytes_lines(records)


def show_records(records: Sequence[SizeRecord], human_readable: bool = False) -> None:
    """Print one line per record to stdout."""
    for line in format_records(records, human_readable):
        # Paths are printed verbatim: no markup, emoji codes, highlighting or wrapping
        console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def show_error(message: str) -> None:
    """Display an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
