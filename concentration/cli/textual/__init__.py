"""Textual front-end for Concentration."""

from .app import ConcentrationTextualApp, run_textual_app

__all__ = ["ConcentrationTextualApp", "run_textual_app"]
