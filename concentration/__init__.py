"""Top-level package for the Concentration game engine."""

from . import cards, observers, state
from .cards import HIDDEN_IDENTITY, Tile
from .state import BoardConfig, ConcentrationModel, SelectionHistoryError

__all__ = [
    "HIDDEN_IDENTITY",
    "BoardConfig",
    "ConcentrationModel",
    "SelectionHistoryError",
    "Tile",
    "cards",
    "observers",
    "state",
]
