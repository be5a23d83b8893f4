"""Menu-driven game board with screens, a game registry and Tic-Tac-Toe."""

__version__ = "0.1.0"