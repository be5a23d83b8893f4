"""The board itself and a desktop window to run it in."""

from __future__ import annotations

import argparse
import itertools
import logging
import socket
import time
from functools import lru_cache
from typing import Any, Callable

from gameboard.buttons import (
    BUTTON_ACTION,
    BUTTON_DOWN,
    BUTTON_LEFT,
    BUTTON_RIGHT,
    BUTTON_UP,
    Buttons,
    Clock,
    PinReader,
    millis,
)
from gameboard.display import CHAR_HEIGHT, Canvas, Display
from gameboard.games import GameRegistry
from gameboard.network import NetworkManager
from gameboard.screens import ScreenManager
from gameboard.tictactoe import TicTacToe

logger = logging.getLogger(__name__)

STARTUP_SECONDS = 1.0
FRAME_SECONDS = 0.1


class Board:
    """Display, buttons, games and screens wired together."""

    def __init__(
        self,
        canvas: Canvas | None = None,
        reader: PinReader | None = None,
        clock: Clock = millis,
        network: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._sleep = sleep
        self.display = Display(canvas)
        self.buttons = Buttons(reader or (lambda pin: False), clock)
        self.registry = GameRegistry()
        self.manager = ScreenManager(self.display, self.buttons, clock,
                                     self.registry, network, sleep)
        self.registry.register(
            TicTacToe(self.display, self.buttons, clock, on_exit=self.manager.show_games_screen)
        )

    def setup(self) -> None:
        logger.info("ESP32 - Game Board initialized...")
        self._sleep(STARTUP_SECONDS)
        self.display.init()
        self.manager.init()

    def step(self) -> None:
        self.manager.loop()
        self._sleep(FRAME_SECONDS)

    def run(self, frames: int | None = None) -> None:
        """Set up, then run ``frames`` frames, or forever when None."""
        self.setup()
        for _ in itertools.count() if frames is None else range(frames):
            self.step()


class _Quit(Exception):
    """The window was closed."""


@lru_cache(maxsize=None)
def _rgb(value: int) -> tuple[int, int, int]:
    red = (value >> 11) & 0x1F
    green = (value >> 5) & 0x3F
    blue = value & 0x1F
    return red * 255 // 31, green * 255 // 63, blue * 255 // 31


class _HostWiFi:
    """Stands in for the radio using the host's own network."""

    def __init__(self, online: bool) -> None:
        self._online = online
        self._started = False

    def begin(self) -> None:
        self._started = True

    def is_connected(self) -> bool:
        return self._started and self._online

    def local_ip(self) -> str:
        try:
            return socket.gethostbyname(socket.gethostname())
        except OSError:
            return "127.0.0.1"

    def disconnect(self) -> None:
        self._started = False


class _PygameFrontend:
    """Shows the canvas in a window and maps arrow keys and space to buttons."""

    def __init__(self, canvas: Canvas, scale: int) -> None:
        import pygame

        self._pg = pygame
        pygame.init()
        self.canvas = canvas
        self.scale = scale
        self.screen = pygame.display.set_mode((canvas.width * scale, canvas.height * scale))
        pygame.display.set_caption("Game Board")
        self._fonts: dict[int, Any] = {}
        self._keys = {
            BUTTON_UP: pygame.K_UP,
            BUTTON_DOWN: pygame.K_DOWN,
            BUTTON_LEFT: pygame.K_LEFT,
            BUTTON_RIGHT: pygame.K_RIGHT,
            BUTTON_ACTION: pygame.K_SPACE,
        }

    def read(self, pin: int) -> bool:
        return bool(self._pg.key.get_pressed()[self._keys[pin]])

    def sleep(self, seconds: float) -> None:
        for event in self._pg.event.get():
            if event.type == self._pg.QUIT:
                raise _Quit
        self._render()
        time.sleep(seconds)

    def _font(self, size: int) -> Any:
        if size not in self._fonts:
            self._fonts[size] = self._pg.font.Font(None, int(CHAR_HEIGHT * size * self.scale * 1.25))
        return self._fonts[size]

    def _render(self) -> None:
        pg = self._pg
        canvas = self.canvas
        data = b"".join(bytes(_rgb(value)) for row in canvas.pixels for value in row)
        image = pg.image.frombuffer(data, (canvas.width, canvas.height), "RGB")
        image = pg.transform.scale(image, (canvas.width * self.scale, canvas.height * self.scale))
        self.screen.blit(image, (0, 0))
        for item in canvas.texts:
            surface = self._font(item.size).render(item.text, True, _rgb(item.color))
            self.screen.blit(surface, (item.x * self.scale, item.y * self.scale))
        pg.display.flip()

    def close(self) -> None:
        self._pg.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gameboard",
                                     description="Run the game board in a desktop window.")
    parser.add_argument("--scale", type=int, default=2, help="window pixels per board pixel")
    parser.add_argument("--offline", action="store_true", help="pretend the network is down")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")

    logging.basicConfig(level=logging.INFO)
    canvas = Canvas()
    frontend = _PygameFrontend(canvas, args.scale)
    network = NetworkManager(_HostWiFi(not args.offline), None, frontend.sleep)
    board = Board(canvas, frontend.read, millis, network, frontend.sleep)
    try:
        board.run(args.frames)
    except (_Quit, KeyboardInterrupt):
        pass
    finally:
        frontend.close()
    return 0