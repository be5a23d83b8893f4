"""The board's screens and the manager that switches between them."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Callable

from gameboard.buttons import Button, Buttons, Clock, millis
from gameboard.display import Color, Display
from gameboard.games import Game, GameRegistry

logger = logging.getLogger(__name__)

REPEAT_DELAY = 200

MENU_ITEMS = ("Play", "Credits", "Settings")

CREDITS = (
    "# ESP32 Game Board",
    "",
    "## Development",
    "Game Board contributors",
    "",
    "## ---- Games ----",
    "### Battleship",
    "Development: <NOT READY>",
    "### Tic-Tac-Toe",
    "Development: <NOT READY>",
    "### Snake",
    "Development: <NOT READY>",
    "",
    "## Hardware",
    "ESP32",
    "LCD Display (ILI9341)",
    "Buttons",
)
SCROLL_SPEED = 1
CREDIT_LINE_SPACING = 30
CREDITS_TOP = 40
CREDITS_FRAME_SECONDS = 0.05

SPLASH_DURATION = 3000
STEP_TIME = 600
STEP_WINDOW = 50
BAR_MARGIN = 20
BAR_HEIGHT = 10
MAX_NETWORK_ATTEMPTS = 3


def _fresh(button: Button, now: int, last_press: int) -> bool:
    return button.is_pressed() and now - last_press > REPEAT_DELAY


class Screen(ABC):
    """Something the screen manager shows."""

    @abstractmethod
    def init(self) -> None:
        """Draw the screen when it is opened."""

    @abstractmethod
    def loop(self) -> None:
        """Handle one frame."""


class MainScreen(Screen):
    """The top menu: Play, Credits, Settings."""

    def __init__(self, manager: ScreenManager) -> None:
        self.manager = manager
        self.selected_item = 0
        self._last_press = 0

    def init(self) -> None:
        display = self.manager.display
        display.canvas.fill_screen(Color.BLACK)
        display.draw_centered_text("ESP32 - Game Board", 20, Color.WHITE, 2)
        for index, item in enumerate(MENU_ITEMS):
            display.draw_menu_item(item, index, index == self.selected_item)

    def _move(self, delta: int, now: int) -> None:
        previous = self.selected_item
        self.selected_item = (self.selected_item + delta) % len(MENU_ITEMS)
        self.manager.display.update_menu_selection(previous, self.selected_item, MENU_ITEMS)
        self._last_press = now

    def loop(self) -> None:
        manager = self.manager
        buttons = manager.buttons
        now = manager.clock()
        if _fresh(buttons.action, now, self._last_press):
            logger.info("SELECTED: %d", self.selected_item)
            self._last_press = now
            if self.selected_item == 0:
                manager.show_games_screen()
            else:
                # Settings has no screen of its own yet.
                manager.show_credits_screen()
            return
        if _fresh(buttons.up, now, self._last_press):
            self._move(-1, now)
        if _fresh(buttons.down, now, self._last_press):
            self._move(1, now)


class GamesScreen(Screen):
    """A menu listing the registered games."""

    def __init__(self, manager: ScreenManager) -> None:
        self.manager = manager
        self.selected_item = 0
        self._last_press = 0

    def _names(self) -> list[str]:
        return [game.name for game in self.manager.registry]

    def init(self) -> None:
        display = self.manager.display
        display.canvas.fill_screen(Color.BLACK)
        display.draw_title("Select Game")
        for index, name in enumerate(self._names()):
            display.draw_menu_item(name, index, index == self.selected_item)

    def _move(self, delta: int, now: int) -> None:
        names = self._names()
        previous = self.selected_item
        self.selected_item = (self.selected_item + delta) % len(names)
        self.manager.display.update_menu_selection(previous, self.selected_item, names)
        self._last_press = now

    def loop(self) -> None:
        manager = self.manager
        buttons = manager.buttons
        now = manager.clock()

        if buttons.up.is_pressed() and buttons.down.is_pressed():
            manager.show_main_screen()
            self._last_press = now
            return

        count = len(manager.registry)
        if _fresh(buttons.action, now, self._last_press):
            if self.selected_item < count:
                manager.show_game_screen(self.selected_item)
            self._last_press = now
        if count and _fresh(buttons.up, now, self._last_press):
            self._move(-1, now)
        if count and _fresh(buttons.down, now, self._last_press):
            self._move(1, now)


class GameScreen(Screen):
    """Runs the game registered at a given index, if there is one."""

    def __init__(self, manager: ScreenManager, game_index: int) -> None:
        self.manager = manager
        self.game_index = game_index
        registry = manager.registry
        self.game: Game | None = registry[game_index] if 0 <= game_index < len(registry) else None

    def init(self) -> None:
        logger.info("Game Screen initialized")
        if self.game is not None:
            logger.info("Starting game: %s", self.game.name)
            self.game.init()

    def loop(self) -> None:
        if self.game is not None:
            self.game.loop()


class CreditsScreen(Screen):
    """Scrolls the credits upward; up and down together go back."""

    def __init__(self, manager: ScreenManager) -> None:
        self.manager = manager
        self.scroll_position = 0

    def init(self) -> None:
        display = self.manager.display
        display.canvas.fill_screen(Color.BLACK)
        display.draw_title("Credits")
        self.scroll_position = 0

    def _draw_line(self, line: str, y: int) -> None:
        display = self.manager.display
        if line.startswith("###"):
            display.draw_centered_text(line[3:], y, Color.BLUE, 1)
        elif line.startswith("##"):
            display.draw_centered_text(line[2:], y, Color.GREEN, 1)
        elif line.startswith("#"):
            display.draw_centered_text(line[1:], y, Color.YELLOW, 2)
        else:
            display.draw_centered_text(line, y, Color.WHITE, 1)

    def loop(self) -> None:
        manager = self.manager
        buttons = manager.buttons
        if buttons.up.is_pressed() and buttons.down.is_pressed():
            manager.show_main_screen()
            return

        self.scroll_position += SCROLL_SPEED
        canvas = manager.display.canvas
        canvas.fill_rect(0, CREDITS_TOP, canvas.width, canvas.height - CREDITS_TOP, Color.BLACK)

        y = 60 - self.scroll_position
        for line in CREDITS:
            if CREDITS_TOP < y < canvas.height - 20 and line:
                self._draw_line(line, y)
            y += CREDIT_LINE_SPACING

        if y < CREDITS_TOP:
            self.scroll_position = 0
        manager.sleep(CREDITS_FRAME_SECONDS)


class LoadingStep(IntEnum):
    CHECK_SYSTEM = 0
    CHECK_DISPLAY = 1
    CHECK_BUTTONS = 2
    CHECK_NETWORK = 3
    DONE = 4


STEP_MESSAGES = {
    LoadingStep.CHECK_SYSTEM: "Checking System...",
    LoadingStep.CHECK_DISPLAY: "Initializing Display...",
    LoadingStep.CHECK_BUTTONS: "Testing Buttons...",
    LoadingStep.CHECK_NETWORK: "Checking Network...",
    LoadingStep.DONE: "Ready!",
}


class SplashScreen(Screen):
    """Boot screen with a progress bar; tries the network, then opens the menu."""

    def __init__(self, manager: ScreenManager) -> None:
        self.manager = manager
        self.start_time = 0
        self.loading_progress = 0
        self.current_step = LoadingStep.CHECK_SYSTEM
        self.network_attempts = 0
        self._network_checked = False

    def _bar(self) -> tuple[int, int, int]:
        canvas = self.manager.display.canvas
        return BAR_MARGIN, canvas.height - 50, canvas.width - 2 * BAR_MARGIN

    def init(self) -> None:
        self.start_time = self.manager.clock()
        self.loading_progress = 0
        self.current_step = LoadingStep.CHECK_SYSTEM

        display = self.manager.display
        canvas = display.canvas
        canvas.fill_screen(Color.BLACK)
        display.draw_centered_text("ESP32", canvas.height // 2 - 40, Color.WHITE, 3)
        display.draw_centered_text("Game Board", canvas.height // 2, Color.WHITE, 2)
        bar_x, bar_y, bar_width = self._bar()
        canvas.draw_rect(bar_x, bar_y, bar_width, BAR_HEIGHT, Color.WHITE)

    def _check_network(self) -> None:
        network = self.manager.network
        if network is None or network.connect():
            self._network_checked = True
            self.current_step = LoadingStep.DONE
            return
        self.network_attempts += 1
        if self.network_attempts >= MAX_NETWORK_ATTEMPTS:
            self._network_checked = True
            self.current_step = LoadingStep.DONE

    def loop(self) -> None:
        manager = self.manager
        display = manager.display
        canvas = display.canvas
        elapsed = manager.clock() - self.start_time

        step_progress = (elapsed % STEP_TIME) * 100 // STEP_TIME
        self.loading_progress = min(self.current_step * 25 + step_progress // 4, 100)

        bar_x, bar_y, bar_width = self._bar()
        canvas.fill_rect(bar_x, bar_y, bar_width * self.loading_progress // 100,
                         BAR_HEIGHT, Color.GREEN)
        canvas.fill_rect(0, canvas.height - 40, canvas.width, 20, Color.BLACK)
        display.draw_centered_text(STEP_MESSAGES[self.current_step],
                                   canvas.height - 30, Color.WHITE, 1)

        if elapsed % STEP_TIME < STEP_WINDOW and self.current_step < LoadingStep.DONE:
            self.current_step = LoadingStep(self.current_step + 1)

        if self.current_step is LoadingStep.CHECK_NETWORK and not self._network_checked:
            self._check_network()

        if self.current_step is LoadingStep.DONE and elapsed >= SPLASH_DURATION:
            manager.show_main_screen()


class ScreenManager:
    """Owns every screen and forwards frames to the one being shown."""

    def __init__(
        self,
        display: Display,
        buttons: Buttons,
        clock: Clock = millis,
        registry: GameRegistry | None = None,
        network: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.registry = registry if registry is not None else GameRegistry()
        self.network = network
        self.sleep = sleep
        self.current_screen: Screen | None = None
        self.main_screen = MainScreen(self)
        self.games_screen = GamesScreen(self)
        self.game_screen = GameScreen(self, 0)
        self.credits_screen = CreditsScreen(self)
        self.splash_screen = SplashScreen(self)

    def _show(self, screen: Screen) -> None:
        self.current_screen = screen
        screen.init()

    def init(self) -> None:
        self.show_splash_screen()

    def loop(self) -> None:
        if self.current_screen is not None:
            self.current_screen.loop()

    def show_main_screen(self) -> None:
        self._show(self.main_screen)

    def show_games_screen(self) -> None:
        self._show(self.games_screen)

    def show_game_screen(self, game_index: int) -> None:
        self.game_screen = GameScreen(self, game_index)
        self._show(self.game_screen)

    def show_credits_screen(self) -> None:
        self._show(self.credits_screen)

    def show_splash_screen(self) -> None:
        self._show(self.splash_screen)