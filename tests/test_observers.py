from __future__ import annotations

from typing import Any

from concentration.observers import ObserverRegistry


class Recorder:
    def __init__(self, name: str, log: list[tuple[str, bool]]) -> None:
        self.name = name
        self.log = log

    def on_state_changed(self, model: Any, reveal_all: bool) -> None:
        self.log.append((self.name, reveal_all))


def test_notify_runs_in_registration_order() -> None:
    log: list[tuple[str, bool]] = []
    registry = ObserverRegistry()
    registry.add(Recorder("first", log))
    registry.add(Recorder("second", log))

    registry.notify(object(), True)

    assert log == [("first", True), ("second", True)]
    assert len(registry) == 2


def test_observer_added_during_notify_waits_for_next_change() -> None:
    log: list[tuple[str, bool]] = []
    registry = ObserverRegistry()

    class Spawner:
        def on_state_changed(self, model: Any, reveal_all: bool) -> None:
            log.append(("spawner", reveal_all))
            registry.add(Recorder("late", log))

    registry.add(Spawner())
    registry.notify(object(), False)

    assert log == [("spawner", False)]

    log.clear()
    registry.notify(object(), False)
    assert log[0] == ("spawner", False)
    assert ("late", False) in log
