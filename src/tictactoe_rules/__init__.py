"""Rules engine for 3x3 tic-tac-toe."""

__version__ = "0.1.0"
