"""Composable view primitives for the Concentration CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..cards import Tile


@dataclass(slots=True)
class BoardView:
    """Renderable laying tiles out as a square grid with their indices."""

    tiles: Sequence[Tile]
    size: int
    tile_formatter: Callable[[Tile], str]

    def render(self) -> RenderableType:
        if self.size <= 0 or len(self.tiles) != self.size * self.size:
            return Text("Board unavailable", style="red")

        table = Table(box=box.ROUNDED, show_header=False, expand=False)
        for _ in range(self.size):
            table.add_column(justify="center", min_width=5)

        for row in range(self.size):
            cells = []
            for col in range(self.size):
                index = row * self.size + col
                label = self.tile_formatter(self.tiles[index])
                cells.append(Text.from_markup(f"{label}\n[dim]{index:02d}[/dim]"))
            table.add_row(*cells)
        return table
