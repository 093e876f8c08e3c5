"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "concentration",
        "concentration.cards",
        "concentration.observers",
        "concentration.state",
        "concentration.utils.logger",
        "concentration.cli.main",
        "concentration.cli.textual.app",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
