from __future__ import annotations

import io

from rich.console import Console

from concentration import state
from concentration.cli.ptui import ConcentrationPTUI


class KeepOrder:
    def shuffle(self, seq: list) -> None:
        return None


def _make_ptui(commands: str = "", size: int = 4) -> tuple[ConcentrationPTUI, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None, force_terminal=False)
    model = state.ConcentrationModel(state.BoardConfig(size=size), rng=KeepOrder())
    ptui = ConcentrationPTUI(model, console=console, stdin=io.StringIO(commands))
    return ptui, buffer


def test_initial_view_is_printed_on_construction() -> None:
    _, buffer = _make_ptui()

    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Move count: 0"
    assert lines[1] == "Select the first card."
    assert lines[2:6] == ["*** | *** | *** | ***"] * 4


def test_select_and_match_via_commands() -> None:
    ptui, buffer = _make_ptui("s 0\ns 1\nq\n")
    ptui.run()

    output = buffer.getvalue()
    assert "game command: " in output
    assert "Select the second card." in output
    assert "-0- | -0- | *** | ***" in output
    assert ptui.model.move_count == 2
    assert ptui.model.cards_selected == 0


def test_mismatch_prompt_and_undo() -> None:
    ptui, buffer = _make_ptui()
    ptui.handle_command("s 0")
    ptui.handle_command("s 2")
    assert "No Match: Undo or select a card." in buffer.getvalue()

    ptui.handle_command("undo")
    assert ptui.model.cards_selected == 1
    assert ptui.model.move_count == 2


def test_malformed_select_shows_help_without_calling_model() -> None:
    ptui, buffer = _make_ptui()
    ptui.handle_command("s")
    ptui.handle_command("s abc")

    output = buffer.getvalue()
    assert output.count("select needs a card number") == 2
    assert " 00 | 01 | 02 | 03" in output
    assert ptui.model.move_count == 0


def test_unknown_command_prints_help() -> None:
    ptui, buffer = _make_ptui()
    assert ptui.handle_command("xyzzy")
    assert ptui.handle_command("")

    output = buffer.getvalue()
    assert output.count(" 12 | 13 | 14 | 15") == 2
    assert "c(heat)     -- see where the cards are" in output


def test_help_layout_follows_board_size() -> None:
    ptui, buffer = _make_ptui(size=2)
    ptui.display_help()

    assert " 00 | 01\n 02 | 03\n" in buffer.getvalue()


def test_cheat_prints_full_board_without_changing_state() -> None:
    ptui, buffer = _make_ptui()
    ptui.handle_command("c")

    output = buffer.getvalue()
    assert "-0- | -0- | -1- | -1-" in output
    assert "-6- | -6- | -7- | -7-" in output
    assert "YOU WIN!" not in output
    assert all(not tile.face_up for tile in ptui.model.get_cards())


def test_reset_command_clears_moves() -> None:
    ptui, _ = _make_ptui()
    ptui.handle_command("s 4")
    ptui.handle_command("r")

    assert ptui.model.move_count == 0
    assert ptui.model.cards_selected == 0


def test_win_message_after_all_pairs_found() -> None:
    ptui, buffer = _make_ptui()
    for n in range(15):
        ptui.handle_command(f"s {n}")
    assert "YOU WIN!" not in buffer.getvalue()

    ptui.handle_command("s 15")
    assert buffer.getvalue().rstrip().endswith("YOU WIN!")


def test_quit_and_end_of_input_stop_the_loop() -> None:
    ptui, _ = _make_ptui("q\ns 0\n")
    ptui.run()
    assert ptui.model.move_count == 0

    ptui, _ = _make_ptui("s 0\n")
    ptui.run()
    assert ptui.model.move_count == 1
