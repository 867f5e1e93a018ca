"""Plain-text rendering of resolved placements."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console

from .core.types import HostPlacement

console = Console()


def format_placement(placement: HostPlacement) -> str:
    return "\n".join(placement.fields())


def print_placements(placements: Iterable[HostPlacement], output: Console | None = None) -> None:
    """Print one block per placement, each followed by a blank line."""
    out = output or console
    for placement in placements:
        out.print(
            format_placement(placement),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        out.print()
