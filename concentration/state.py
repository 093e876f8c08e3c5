"""Board state and game engine for Concentration."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from .cards import Tile
from .observers import BoardObserver, ObserverRegistry

__all__ = ["BoardConfig", "ConcentrationModel", "SelectionHistoryError"]

logger = logging.getLogger(__name__)


class SelectionHistoryError(RuntimeError):
    """Raised when the selection history holds an impossible number of tiles."""


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """Runtime configuration for a square Concentration board."""

    size: int = 4

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be positive")
        if (self.size * self.size) % 2:
            raise ValueError("size must produce an even number of tiles")

    @property
    def num_tiles(self) -> int:
        return self.size * self.size

    @property
    def num_pairs(self) -> int:
        return self.num_tiles // 2


class ConcentrationModel:
    """The Concentration engine.

    Owns the tiles, the selection history used for undo, the move counter and
    the observer registry. Every public mutator finishes by notifying the
    observers, which read state back through the copy-returning accessors.
    """

    def __init__(self, config: BoardConfig | None = None, *, rng: Any | None = None) -> None:
        self.config = config or BoardConfig()
        self._rng = rng if rng is not None else random.Random()
        self._observers = ObserverRegistry()
        self._history: list[Tile] = []
        self._move_count = 0
        self._tiles: list[Tile] = []
        for identity in range(self.config.num_pairs):
            self._tiles.append(Tile(identity))
            self._tiles.append(Tile(identity))
        self.reset()

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def num_tiles(self) -> int:
        return self.config.num_tiles

    @property
    def num_pairs(self) -> int:
        return self.config.num_pairs

    @property
    def move_count(self) -> int:
        """Number of tiles turned face-up by selections since the last reset."""

        return self._move_count

    @property
    def cards_selected(self) -> int:
        """Number of face-up tiles in the current, unresolved attempt (0, 1 or 2)."""

        return len(self._history)

    def add_observer(self, observer: BoardObserver) -> None:
        self._observers.add(observer)

    def get_cards(self) -> list[Tile]:
        """Return copies of the tiles in board order."""

        return [tile.copy() for tile in self._tiles]

    def get_cheat_view(self) -> list[Tile]:
        """Return copies of the tiles in board order, all forced face-up."""

        faces: list[Tile] = []
        for tile in self._tiles:
            copy = tile.copy()
            copy.reveal()
            faces.append(copy)
        return faces

    def select_card(self, n: int) -> None:
        """Turn tile ``n`` face-up, resolving any pending attempt first.

        Indices outside the board are ignored. Selecting while two mismatched
        tiles are showing turns both back over before the new tile is flipped.
        """

        if not 0 <= n < len(self._tiles):
            logger.debug("Ignoring selection of out-of-range tile %d", n)
            return

        selected = len(self._history)
        if selected == 2:
            logger.debug("Dismissing unresolved pair before selecting tile %d", n)
            self._pop(restore=True)
            self._pop(restore=True)
            selected = 0

        if selected == 0:
            self._flip(n)
        elif selected == 1:
            self._flip(n)
            self._check_match()
        else:
            raise SelectionHistoryError(f"selection history holds {selected} tiles")

        self._announce(reveal_all=False)

    def undo(self) -> None:
        """Turn the most recently selected tile back face-down."""

        tile = self._pop(restore=True)
        if tile is not None:
            logger.debug("Undid selection; %d tile(s) still selected", len(self._history))
        self._announce(reveal_all=False)

    def reset(self) -> None:
        """Turn every tile face-down, shuffle, and clear history and moves."""

        for tile in self._tiles:
            if tile.face_up:
                tile.toggle_face(can_flip=True)
        self._rng.shuffle(self._tiles)
        self._history = []
        self._move_count = 0
        logger.debug("Board reset with %d tiles", len(self._tiles))
        self._announce(reveal_all=False)

    def cheat(self) -> None:
        """Ask observers to show the full arrangement without changing state."""

        logger.debug("Cheat view requested")
        self._announce(reveal_all=True)

    def _flip(self, n: int) -> None:
        tile = self._tiles[n]
        if tile.face_up:
            return
        tile.toggle_face()
        self._history.append(tile)
        self._move_count += 1
        logger.debug("Tile %d turned face-up (move %d)", n, self._move_count)

    def _pop(self, *, restore: bool) -> Tile | None:
        if not self._history:
            return None
        tile = self._history.pop()
        if restore:
            tile.toggle_face(can_flip=True)
        return tile

    def _check_match(self) -> None:
        if len(self._history) != 2:
            return
        first, second = self._history
        if not first.matches(second):
            return
        for tile in (self._pop(restore=False), self._pop(restore=False)):
            if tile is not None:
                # Locking leaves the face as-is and blocks later flips until reset.
                tile.toggle_face(can_flip=False)
        logger.debug("Matched pair with identity %d", first.identity)

    def _announce(self, *, reveal_all: bool) -> None:
        self._observers.notify(self, reveal_all)
