"""Tic-tac-toe with move history and time travel."""

__version__ = "0.1.0"
