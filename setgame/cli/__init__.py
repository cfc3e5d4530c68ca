"""Command line and terminal UI for the Set card game."""
