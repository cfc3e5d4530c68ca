"""Textual front end for Set."""

from .app import SetTextualApp, run_textual_app

__all__ = ["SetTextualApp", "run_textual_app"]
