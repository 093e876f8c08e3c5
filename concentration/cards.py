"""Tile abstractions and helpers for Concentration."""

from __future__ import annotations

from typing import Iterable

__all__ = ["HIDDEN_IDENTITY", "Tile", "board_complete"]

HIDDEN_IDENTITY = -1


class Tile:
    """A single board position holding a hidden pair identity.

    The identity is fixed at construction and only readable while the tile is
    face-up; a face-down tile reports :data:`HIDDEN_IDENTITY`.
    """

    __slots__ = ("_identity", "_face_up", "_flippable")

    def __init__(self, identity: int, *, flippable: bool = True, face_up: bool = False) -> None:
        if identity < 0:
            raise ValueError("identity must be non-negative")
        self._identity = identity
        self._face_up = face_up
        self._flippable = flippable

    @property
    def identity(self) -> int:
        """Return the pair identity, or :data:`HIDDEN_IDENTITY` when face-down."""

        return self._identity if self._face_up else HIDDEN_IDENTITY

    @property
    def face_up(self) -> bool:
        return self._face_up

    @property
    def flippable(self) -> bool:
        return self._flippable

    def matches(self, other: "Tile") -> bool:
        """Return ``True`` when both tiles are face-up and share an identity."""

        return self._face_up and other._face_up and self._identity == other._identity

    def reveal(self) -> None:
        """Force the tile face-up regardless of ``flippable`` (cheat copies only)."""

        self._face_up = True

    def toggle_face(self, can_flip: bool | None = None) -> None:
        """Flip the tile if flipping is allowed.

        When ``can_flip`` is supplied it replaces the ``flippable`` flag before
        the flip is attempted, so ``toggle_face(False)`` locks the tile in its
        current orientation.
        """

        if can_flip is not None:
            self._flippable = can_flip
        if self._flippable:
            self._face_up = not self._face_up

    def copy(self) -> "Tile":
        """Return an independent snapshot of this tile."""

        return Tile(self._identity, flippable=self._flippable, face_up=self._face_up)

    def __repr__(self) -> str:
        face = "up" if self._face_up else "down"
        return f"Tile(identity={self.identity}, face={face}, flippable={self._flippable})"


def board_complete(tiles: Iterable[Tile]) -> bool:
    """Return ``True`` when every tile in ``tiles`` is face-up."""

    return all(tile.face_up for tile in tiles)
