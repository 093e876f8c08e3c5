"""Plain-text view and controller for Concentration."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from ..cards import Tile, board_complete
from ..state import ConcentrationModel
from .render import WIN_MESSAGE, board_lines, help_lines, prompt_for

__all__ = ["ConcentrationPTUI"]

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "game command: "


class ConcentrationPTUI:
    """Line-oriented console front-end observing a :class:`ConcentrationModel`."""

    def __init__(
        self,
        model: ConcentrationModel,
        *,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.model = model
        self.console = console or Console(highlight=False)
        self._stdin = stdin if stdin is not None else sys.stdin
        self.model.add_observer(self)
        self.on_state_changed(self.model, False)

    # CONTROLLER

    def run(self) -> None:
        """Read commands until ``q`` or end of input."""

        while True:
            self._write(COMMAND_PROMPT, end="")
            line = self._stdin.readline()
            if not line:
                self._write("")
                break
            if not self.handle_command(line):
                break

    def handle_command(self, line: str) -> bool:
        """Execute one command line; return ``False`` when the user quits."""

        words = line.split()
        command = words[0] if words else ""
        if command.startswith("q"):
            return False
        if command.startswith("r"):
            self.model.reset()
        elif command.startswith("c"):
            self.model.cheat()
        elif command.startswith("u"):
            self.model.undo()
        elif command.startswith("s"):
            index = self._parse_index(words)
            if index is None:
                self._write("select needs a card number")
                self.display_help()
            else:
                self.model.select_card(index)
        else:
            self.display_help()
        return True

    @staticmethod
    def _parse_index(words: list[str]) -> int | None:
        if len(words) < 2:
            return None
        try:
            return int(words[1])
        except ValueError:
            logger.debug("Rejected non-numeric selection %r", words[1])
            return None

    # VIEW

    def display_board(self, moves: int, selected: int, tiles: list[Tile]) -> None:
        """Print the move count, the instruction and the tile grid."""

        self._write(f"Move count: {moves}")
        prompt = prompt_for(selected)
        if prompt:
            self._write(prompt)
        for row in board_lines(tiles, self.model.size):
            self._write(row)

    def display_help(self) -> None:
        for line in help_lines(self.model.size):
            self._write(line)

    def on_state_changed(self, model: ConcentrationModel, reveal_all: bool) -> None:
        tiles = model.get_cheat_view() if reveal_all else model.get_cards()
        self.display_board(model.move_count, model.cards_selected, tiles)
        if board_complete(model.get_cards()):
            self._write(WIN_MESSAGE)

    def _write(self, text: str, *, end: str = "\n") -> None:
        self.console.print(text, end=end, markup=False, highlight=False, soft_wrap=True)
