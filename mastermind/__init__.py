"""Interactive command-line client for the remote Mastermind game."""

__version__ = "0.1.0"
