"""An in-memory RGB565 canvas and the drawing helpers built on it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

WIDTH = 240
HEIGHT = 320
CHAR_WIDTH = 6
CHAR_HEIGHT = 8

MENU_X = 20
MENU_TOP = 60
MENU_SPACING = 40
MENU_HEIGHT = 30
MENU_RADIUS = 8
MENU_TEXT_OFFSET = 8
TITLE_HEIGHT = 40
TITLE_Y = 20


class Color(IntEnum):
    """16-bit RGB565 colours of the panel."""

    BLACK = 0x0000
    BLUE = 0x001F
    RED = 0xF800
    GREEN = 0x07E0
    YELLOW = 0xFFE0
    WHITE = 0xFFFF


@dataclass(frozen=True)
class TextItem:
    """A piece of text placed on the canvas."""

    text: str
    x: int
    y: int
    color: int
    size: int


def _half(span: int) -> int:
    """Halve an integer, rounding toward zero."""
    return int(span / 2)


class Canvas:
    """A pixel buffer with shape primitives; text is kept as placed items.

    Pixels are addressed ``pixels[y][x]``; drawing outside the canvas is
    clipped. Filling an area removes any text that lies wholly inside it.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [[int(Color.BLACK)] * width for _ in range(height)]
        self.texts: list[TextItem] = []

    def _plot(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y][x] = int(color)

    def _fill(self, x: int, y: int, w: int, h: int, color: int) -> None:
        if w < 0:
            x, w = x + w + 1, -w
        if h < 0:
            y, h = y + h + 1, -h
        x0, x1 = max(x, 0), min(x + w, self.width)
        if x1 <= x0:
            return
        value = int(color)
        for row in self.pixels[max(y, 0):max(min(y + h, self.height), 0)]:
            row[x0:x1] = [value] * (x1 - x0)

    def _erase_texts_within(self, x: int, y: int, w: int, h: int) -> None:
        def covered(item: TextItem) -> bool:
            tw, th = self.text_bounds(item.text, item.size)
            return (
                item.x >= x
                and item.y >= y
                and item.x + tw <= x + w
                and item.y + th <= y + h
            )

        self.texts = [item for item in self.texts if not covered(item)]

    def fill_screen(self, color: int) -> None:
        """Paint the whole canvas and drop all text."""
        self._fill(0, 0, self.width, self.height, color)
        self.texts.clear()

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._fill(x, y, w, h, color)
        self._erase_texts_within(x, y, w, h)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        if w <= 0 or h <= 0:
            return
        self._fill(x, y, w, 1, color)
        self._fill(x, y + h - 1, w, 1, color)
        self._fill(x, y, 1, h, color)
        self._fill(x + w - 1, y, 1, h, color)

    @staticmethod
    def _round_rect_contains(px, py, x, y, w, h, r) -> bool:
        if not (x <= px < x + w and y <= py < y + h):
            return False
        cx = min(max(px, x + r), x + w - 1 - r)
        cy = min(max(py, y + r), y + h - 1 - r)
        return (px - cx) ** 2 + (py - cy) ** 2 <= r * r

    def _round_rect_pixels(self, x, y, w, h, r, outline: bool):
        if w <= 0 or h <= 0:
            return
        r = max(0, min(r, min(w, h) // 2))
        inside = self._round_rect_contains
        for py in range(max(y, 0), min(y + h, self.height)):
            for px in range(max(x, 0), min(x + w, self.width)):
                if not inside(px, py, x, y, w, h, r):
                    continue
                if outline and all(
                    inside(nx, ny, x, y, w, h, r)
                    for nx, ny in ((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1))
                ):
                    continue
                yield px, py

    def fill_round_rect(self, x: int, y: int, w: int, h: int, r: int, color: int) -> None:
        for px, py in self._round_rect_pixels(x, y, w, h, r, outline=False):
            self.pixels[py][px] = int(color)
        self._erase_texts_within(x, y, w, h)

    def draw_round_rect(self, x: int, y: int, w: int, h: int, r: int, color: int) -> None:
        for px, py in self._round_rect_pixels(x, y, w, h, r, outline=True):
            self.pixels[py][px] = int(color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0, x1, y1 = y0, x0, y1, x1
        if x0 > x1:
            x0, x1, y0, y1 = x1, x0, y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        step = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self._plot(y, x, color)
            else:
                self._plot(x, y, color)
            err -= dy
            if err < 0:
                y += step
                err += dx

    def draw_circle(self, x: int, y: int, r: int, color: int) -> None:
        f = 1 - r
        ddf_x = 1
        ddf_y = -2 * r
        dx, dy = 0, r
        for px, py in ((x, y + r), (x, y - r), (x + r, y), (x - r, y)):
            self._plot(px, py, color)
        while dx < dy:
            if f >= 0:
                dy -= 1
                ddf_y += 2
                f += ddf_y
            dx += 1
            ddf_x += 2
            f += ddf_x
            for px, py in (
                (x + dx, y + dy), (x - dx, y + dy), (x + dx, y - dy), (x - dx, y - dy),
                (x + dy, y + dx), (x - dy, y + dx), (x + dy, y - dx), (x - dy, y - dx),
            ):
                self._plot(px, py, color)

    def text_bounds(self, text: str, size: int) -> tuple[int, int]:
        """Width and height of ``text`` in the built-in 6x8 font at ``size``."""
        if not text:
            return 0, 0
        size = max(size, 1)
        lines = text.split("\n")
        width = max(len(line) for line in lines) * CHAR_WIDTH * size
        return width, len(lines) * CHAR_HEIGHT * size

    def draw_text(self, text: str, x: int, y: int, color: int, size: int = 1) -> None:
        self.texts.append(TextItem(text, x, y, int(color), max(size, 1)))


class Display:
    """Screen-level drawing helpers: centred text, menu items and titles."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        self.canvas = canvas if canvas is not None else Canvas()

    def init(self) -> None:
        self.canvas.fill_screen(Color.BLACK)

    def draw_centered_text(self, text: str, y: int, color: int, size: int = 2) -> None:
        width, _ = self.canvas.text_bounds(text, size)
        x = _half(self.canvas.width - width)
        self.canvas.draw_text(text, x, y, color, size)

    def draw_menu_item(self, text: str, index: int, selected: bool) -> None:
        x = MENU_X
        y = MENU_TOP + index * MENU_SPACING
        w = self.canvas.width - 2 * x
        if selected:
            self.canvas.fill_round_rect(x, y, w, MENU_HEIGHT, MENU_RADIUS, Color.YELLOW)
            self.draw_centered_text(text, y + MENU_TEXT_OFFSET, Color.BLACK)
        else:
            self.canvas.fill_round_rect(x, y, w, MENU_HEIGHT, MENU_RADIUS, Color.BLACK)
            self.canvas.draw_round_rect(x, y, w, MENU_HEIGHT, MENU_RADIUS, Color.WHITE)
            self.draw_centered_text(text, y + MENU_TEXT_OFFSET, Color.WHITE)

    def update_menu_selection(self, previous: int, current: int, items: Sequence[str]) -> None:
        self.draw_menu_item(items[previous], previous, False)
        self.draw_menu_item(items[current], current, True)

    def draw_title(self, text: str) -> None:
        self.canvas.fill_rect(0, 0, self.canvas.width, TITLE_HEIGHT, Color.BLACK)
        self.draw_centered_text(text, TITLE_Y, Color.WHITE, 2)