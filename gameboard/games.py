"""The game interface and a bounded registry of available games."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Game(ABC):
    """A game that runs inside the game screen."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def init(self) -> None:
        """Prepare the game and draw its first frame."""

    @abstractmethod
    def loop(self) -> None:
        """Advance the game by one frame."""


class GameRegistry:
    """Games in registration order; at most ``MAX_GAMES`` are kept."""

    MAX_GAMES = 10

    def __init__(self) -> None:
        self._games: list[Game] = []

    def register(self, game: Game) -> bool:
        """Add a game; a full registry ignores it. Returns whether it was added."""
        if len(self._games) >= self.MAX_GAMES:
            return False
        self._games.append(game)
        return True

    def get(self, name: str) -> Game | None:
        """The first game registered under ``name``, or None."""
        return next((game for game in self._games if game.name == name), None)

    def __len__(self) -> int:
        return len(self._games)

    def __getitem__(self, index: int) -> Game:
        return self._games[index]