"""Two-player tic-tac-toe on the board's buttons and display."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable

from gameboard.buttons import Button, Buttons, Clock, millis
from gameboard.display import Color, Display, _half
from gameboard.games import Game

logger = logging.getLogger(__name__)

EMPTY = " "

_LINES = (
    *(((i, 0), (i, 1), (i, 2)) for i in range(3)),
    *(((0, i), (1, i), (2, i)) for i in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class GameState(Enum):
    PLAYING = auto()
    X_WON = auto()
    O_WON = auto()
    DRAW = auto()


_MESSAGES = {
    GameState.X_WON: "Winner Winner Chicken Dinner - X Wins!",
    GameState.O_WON: "Winner Winner Chicken Dinner - O Wins!",
    GameState.DRAW: "Equely strong... or equely weak?",
}


class TicTacToe(Game):
    """Tic-tac-toe; the board is indexed ``board[x][y]``."""

    CELL_SIZE = 60
    BOARD_MARGIN = 18
    LINE_THICKNESS = 2
    REPEAT_DELAY = 200

    def __init__(
        self,
        display: Display,
        buttons: Buttons,
        clock: Clock = millis,
        on_exit: Callable[[], None] | None = None,
    ) -> None:
        super().__init__("TicTacToe")
        self.display = display
        self.buttons = buttons
        self._clock = clock
        self._on_exit = on_exit or (lambda: None)
        self._last_press = 0
        self.current_player = "X"
        self.state = GameState.PLAYING
        self.selected_x = 1
        self.selected_y = 1
        self.board: list[list[str]] = []
        self.reset_board()

    def init(self) -> None:
        self.display.canvas.fill_screen(Color.BLACK)
        self.display.draw_title("Tic-Tac-Toe")
        self.reset_board()
        self.state = GameState.PLAYING
        self.current_player = "X"
        self._draw_board()

    def reset_board(self) -> None:
        self.board = [[EMPTY] * 3 for _ in range(3)]

    def is_empty_cell(self, x: int, y: int) -> bool:
        logger.debug("Cell[%d][%d] = %r", x, y, self.board[x][y])
        return self.board[x][y] not in ("X", "O")

    def mark_cell(self, x: int, y: int) -> None:
        self.board[x][y] = self.current_player

    def next_player(self) -> None:
        self.current_player = "O" if self.current_player == "X" else "X"

    def is_board_full(self) -> bool:
        return all(cell != EMPTY for column in self.board for cell in column)

    def decide_winner(self) -> GameState:
        """The state the current board implies."""
        for line in _LINES:
            a, b, c = (self.board[x][y] for x, y in line)
            if a != EMPTY and a == b == c:
                return GameState.X_WON if a == "X" else GameState.O_WON
        return GameState.DRAW if self.is_board_full() else GameState.PLAYING

    def winner_message(self) -> str:
        return _MESSAGES.get(self.state, "")

    def _ready(self, button: Button, now: int) -> bool:
        return button.is_pressed() and now - self._last_press > self.REPEAT_DELAY

    def loop(self) -> None:
        now = self._clock()
        if self.state is not GameState.PLAYING:
            if self._ready(self.buttons.action, now):
                self._on_exit()
            return

        moves = (
            (self.buttons.up, 0, -1),
            (self.buttons.down, 0, 1),
            (self.buttons.left, -1, 0),
            (self.buttons.right, 1, 0),
        )
        for button, dx, dy in moves:
            if self._ready(button, now):
                self.selected_x = (self.selected_x + dx) % 3
                self.selected_y = (self.selected_y + dy) % 3
                self._draw_board()
                self._last_press = now

        if self._ready(self.buttons.action, now):
            if self.is_empty_cell(self.selected_x, self.selected_y):
                self.mark_cell(self.selected_x, self.selected_y)
                self.state = self.decide_winner()
                if self.state is GameState.PLAYING:
                    self.next_player()
                else:
                    self._draw_board()
                    self._draw_winner_message()
                self._draw_board()
            self._last_press = now

    def _origin(self) -> tuple[int, int]:
        size = self.CELL_SIZE * 3 + self.LINE_THICKNESS * 2
        canvas = self.display.canvas
        return _half(canvas.width - size), _half(canvas.height - size)

    def _draw_board(self) -> None:
        canvas = self.display.canvas
        size = self.CELL_SIZE * 3 + self.LINE_THICKNESS * 2
        start_x, start_y = self._origin()
        for i in (1, 2):
            canvas.fill_rect(start_x + i * self.CELL_SIZE, start_y,
                             self.LINE_THICKNESS, size, Color.WHITE)
        for i in (1, 2):
            canvas.fill_rect(start_x, start_y + i * self.CELL_SIZE,
                             size, self.LINE_THICKNESS, Color.WHITE)
        for x in range(3):
            for y in range(3):
                self._draw_cell(x, y, x == self.selected_x and y == self.selected_y)

    def _draw_cell(self, x: int, y: int, selected: bool) -> None:
        canvas = self.display.canvas
        start_x, start_y = self._origin()
        pitch = self.CELL_SIZE + self.LINE_THICKNESS
        cell_x = start_x + x * pitch
        cell_y = start_y + y * pitch
        frame = Color.YELLOW if selected else Color.BLACK
        canvas.draw_rect(cell_x + 5, cell_y + 5, self.CELL_SIZE - 10, self.CELL_SIZE - 10, frame)

        mark = self.board[x][y]
        cx = cell_x + self.CELL_SIZE // 2
        cy = cell_y + self.CELL_SIZE // 2
        arm = self.CELL_SIZE // 3
        if mark == "X":
            canvas.draw_line(cx - arm, cy - arm, cx + arm, cy + arm, Color.RED)
            canvas.draw_line(cx + arm, cy - arm, cx - arm, cy + arm, Color.RED)
        elif mark == "O":
            canvas.draw_circle(cx, cy, arm, Color.BLUE)

    def _draw_winner_message(self) -> None:
        if self.state is GameState.PLAYING:
            return
        canvas = self.display.canvas
        canvas.fill_rect(0, canvas.height - 40, canvas.width, 30, Color.BLACK)
        self.display.draw_centered_text(self.winner_message(), canvas.height - 60, Color.WHITE, 1)
        self.display.draw_centered_text("Press Action to exit", canvas.height - 10, Color.WHITE, 1)