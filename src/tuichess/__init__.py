"""Keyboard-driven chess in the terminal against a random mover."""

__version__ = "0.1.0"
