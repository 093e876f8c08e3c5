"""Textual-powered graphical Concentration interface."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Static

from ...cards import Tile, board_complete
from ...state import BoardConfig, ConcentrationModel
from ..render import PLACEHOLDER_GLYPH, WIN_MESSAGE, prompt_for, render_board, tile_glyph

logger = logging.getLogger(__name__)


class TileButton(Button):
    """Board button that remembers its grid position."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(PLACEHOLDER_GLYPH, id=f"tile-{row * size + col}", classes="tile")
        self.row = row
        self.col = col


class CheatScreen(ModalScreen[None]):
    """Read-only window showing the true arrangement of the board."""

    BINDINGS = [Binding("escape", "close_cheat", "Close")]

    def __init__(self, tiles: Sequence[Tile], size: int) -> None:
        super().__init__()
        self.tiles = list(tiles)
        self.board_size = size

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static(render_board(self.tiles, self.board_size, title="Cheat"), id="cheat-board"),
            Button("Close", id="cheat-close", variant="primary"),
            id="cheat-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:  # pragma: no cover - Textual glue
        if event.button.id == "cheat-close":
            event.stop()
            self.dismiss()

    def action_close_cheat(self) -> None:
        self.dismiss()


class ConcentrationTextualApp(App):
    """Textual Concentration game UI."""

    TITLE = "Concentration"

    CSS = """
    Screen {
        layout: vertical;
        align-horizontal: center;
    }

    #controls {
        height: auto;
        width: auto;
    }

    #controls Button {
        margin: 0 1;
    }

    #moves, #instructions {
        width: auto;
        height: 1;
        margin: 0 1;
    }

    #board {
        grid-gutter: 0 1;
        width: auto;
        height: auto;
        padding: 1 1;
    }

    TileButton {
        width: 10;
        min-width: 10;
        height: 3;
    }

    CheatScreen {
        align: center middle;
    }

    #cheat-dialog {
        width: auto;
        height: auto;
        border: heavy $accent;
        background: $surface;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reset_board", "Reset"),
        Binding("u", "undo", "Undo"),
        Binding("c", "cheat", "Cheat"),
    ]

    def __init__(self, model: ConcentrationModel) -> None:
        super().__init__()
        self.model = model
        self.moves_text = ""
        self.status_text = ""

        # Widgets initialised in compose
        self.moves_label: Static | None = None
        self.instruction_label: Static | None = None
        self.tile_buttons: list[TileButton] = []

        self.model.add_observer(self)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield Horizontal(
            Button("Reset", id="reset"),
            Button("Undo", id="undo"),
            Button("Cheat", id="cheat", variant="warning"),
            id="controls",
        )
        self.moves_label = Static("", id="moves")
        self.instruction_label = Static("", id="instructions")
        yield self.moves_label
        yield self.instruction_label

        size = self.model.size
        self.tile_buttons = [TileButton(row, col, size) for row in range(size) for col in range(size)]
        board = Grid(*self.tile_buttons, id="board")
        board.styles.grid_size_columns = size
        board.styles.grid_size_rows = size
        yield board
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_ui()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if isinstance(button, TileButton):
            self.model.select_card(button.row * self.model.size + button.col)
        elif button.id == "reset":
            self.model.reset()
        elif button.id == "undo":
            self.model.undo()
        elif button.id == "cheat":
            self.model.cheat()

    def action_reset_board(self) -> None:
        self.model.reset()

    def action_undo(self) -> None:
        self.model.undo()

    def action_cheat(self) -> None:
        self.model.cheat()

    def on_state_changed(self, model: ConcentrationModel, reveal_all: bool) -> None:
        self._refresh_ui()
        if reveal_all and not isinstance(self.screen, CheatScreen):
            self.push_screen(CheatScreen(model.get_cheat_view(), model.size))

    def _refresh_ui(self) -> None:
        tiles = self.model.get_cards()
        self.moves_text = f"Moves: {self.model.move_count}"
        if board_complete(tiles):
            self.status_text = WIN_MESSAGE
        else:
            self.status_text = prompt_for(self.model.cards_selected)

        if self.moves_label is not None:
            self.moves_label.update(self.moves_text)
        if self.instruction_label is not None:
            self.instruction_label.update(self.status_text)
        for button, tile in zip(self.tile_buttons, tiles):
            button.label = tile_glyph(tile)


def run_textual_app(*, size: int, seed: int | None) -> None:
    """Launch the Textual UI."""

    if seed is None:
        seed = random.SystemRandom().randrange(0, 2**63)
    logger.info("Starting Textual game with size=%d seed=%d", size, seed)
    model = ConcentrationModel(BoardConfig(size=size), rng=random.Random(seed))
    app = ConcentrationTextualApp(model)
    app.run()
