"""Rendering helpers shared by the console and Textual front-ends."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Tile
from .views import BoardView

PLACEHOLDER_GLYPH = "◓"

TILE_GLYPHS = ("🍎", "🍋", "🍇", "🍒", "🌵", "🐙", "🚀", "⭐")

_GLYPH_COLORS = ("red", "yellow", "magenta", "bright_red", "green", "bright_magenta", "cyan", "bright_yellow")

PROMPTS = {
    0: "Select the first card.",
    1: "Select the second card.",
    2: "No Match: Undo or select a card.",
}

WIN_MESSAGE = "YOU WIN!"

COMMAND_HELP = (
    "s(elect) n  -- select the card n to flip",
    "u(ndo)      -- undo last flip",
    "q(uit)      -- quit the game",
    "r(eset)     -- start a new game",
    "c(heat)     -- see where the cards are",
)


def prompt_for(selected: int) -> str:
    """Return the instruction matching the number of selected tiles."""

    return PROMPTS.get(selected, "")


def tile_glyph(tile: Tile) -> str:
    """Return the glyph used for ``tile`` in graphical renderings."""

    if not tile.face_up:
        return PLACEHOLDER_GLYPH
    if tile.identity < len(TILE_GLYPHS):
        return TILE_GLYPHS[tile.identity]
    return str(tile.identity)


def format_tile(tile: Tile) -> str:
    """Return a Rich-rendered label for ``tile``."""

    if not tile.face_up:
        return f"[dim]{PLACEHOLDER_GLYPH}[/dim]"
    color = _GLYPH_COLORS[tile.identity % len(_GLYPH_COLORS)]
    return f"[{color}]{tile_glyph(tile)}[/{color}]"


def format_tile_text(tile: Tile) -> str:
    """Return the plain-text console form of ``tile``."""

    if tile.face_up:
        return f"-{tile.identity}-"
    return "***"


def board_lines(tiles: Sequence[Tile], size: int) -> list[str]:
    """Return console rows, ``size`` tiles per row separated by ``" | "``."""

    return [
        " | ".join(format_tile_text(tile) for tile in tiles[start : start + size])
        for start in range(0, len(tiles), size)
    ]


def help_lines(size: int) -> list[str]:
    """Return the index layout for a ``size`` board followed by the command list."""

    width = max(2, len(str(size * size - 1)))
    rows = [
        " " + " | ".join(f"{row * size + col:0{width}d}" for col in range(size))
        for row in range(size)
    ]
    return rows + list(COMMAND_HELP)


def render_board(tiles: Sequence[Tile], size: int, *, title: str = "Concentration") -> RenderableType:
    """Return a Rich panel showing ``tiles`` as a ``size`` x ``size`` grid."""

    view = BoardView(tiles=tiles, size=size, tile_formatter=format_tile)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
