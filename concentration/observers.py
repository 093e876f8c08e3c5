"""Observer plumbing used to fan model changes out to presentation layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .state import ConcentrationModel

__all__ = ["BoardObserver", "ObserverRegistry"]


class BoardObserver(Protocol):
    """Anything that wants to hear about board changes."""

    def on_state_changed(self, model: "ConcentrationModel", reveal_all: bool) -> None:
        """Called after every state change; ``reveal_all`` marks a cheat request."""


class ObserverRegistry:
    """Ordered, append-only collection of :class:`BoardObserver` instances."""

    __slots__ = ("_observers",)

    def __init__(self) -> None:
        self._observers: list[BoardObserver] = []

    def add(self, observer: BoardObserver) -> None:
        self._observers.append(observer)

    def notify(self, model: "ConcentrationModel", reveal_all: bool) -> None:
        """Invoke every observer synchronously in registration order."""

        # Snapshot so registrations made during fan-out wait for the next change.
        for observer in tuple(self._observers):
            observer.on_state_changed(model, reveal_all)

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[BoardObserver]:
        return iter(tuple(self._observers))
