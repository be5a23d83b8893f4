import pytest

from gameboard.display import Canvas, Color, Display


def coloured(canvas, color):
    return {
        (x, y)
        for y, row in enumerate(canvas.pixels)
        for x, value in enumerate(row)
        if value == color
    }


def test_new_canvas_is_black():
    canvas = Canvas(20, 10)
    assert all(value == Color.BLACK for row in canvas.pixels for value in row)
    assert len(canvas.pixels) == 10
    assert len(canvas.pixels[0]) == 20


def test_invalid_canvas_size():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_fill_rect_covers_exact_area():
    canvas = Canvas(50, 50)
    canvas.fill_rect(5, 7, 10, 4, Color.RED)
    assert coloured(canvas, Color.RED) == {
        (x, y) for x in range(5, 15) for y in range(7, 11)
    }


def test_fill_rect_is_clipped():
    canvas = Canvas(50, 50)
    canvas.fill_rect(-5, -5, 10, 10, Color.GREEN)
    assert coloured(canvas, Color.GREEN) == {(x, y) for x in range(5) for y in range(5)}


def test_draw_rect_outline_only():
    canvas = Canvas(50, 50)
    canvas.draw_rect(5, 5, 10, 8, Color.WHITE)
    for corner in ((5, 5), (14, 5), (5, 12), (14, 12)):
        assert canvas.pixels[corner[1]][corner[0]] == Color.WHITE
    assert canvas.pixels[9][10] == Color.BLACK


def test_draw_line_diagonal():
    canvas = Canvas(20, 20)
    canvas.draw_line(0, 0, 9, 9, Color.RED)
    assert coloured(canvas, Color.RED) == {(i, i) for i in range(10)}


def test_draw_line_direction_does_not_matter():
    forward, backward = Canvas(60, 60), Canvas(60, 60)
    forward.draw_line(3, 7, 40, 19, Color.RED)
    backward.draw_line(40, 19, 3, 7, Color.RED)
    assert forward.pixels == backward.pixels
    assert forward.pixels[7][3] == Color.RED
    assert forward.pixels[19][40] == Color.RED


def test_draw_circle_cardinal_points_and_symmetry():
    canvas = Canvas(100, 100)
    canvas.draw_circle(50, 50, 10, Color.BLUE)
    points = coloured(canvas, Color.BLUE)
    assert {(60, 50), (40, 50), (50, 60), (50, 40)} <= points
    assert (50, 50) not in points
    assert points == {(100 - x, y) for x, y in points}
    assert points == {(x, 100 - y) for x, y in points}


def test_fill_round_rect_rounds_corners():
    canvas = Canvas(100, 100)
    canvas.fill_round_rect(10, 10, 50, 30, 8, Color.YELLOW)
    assert canvas.pixels[10][10] == Color.BLACK
    assert canvas.pixels[10][18] == Color.YELLOW
    assert canvas.pixels[25][35] == Color.YELLOW


def test_draw_round_rect_leaves_interior():
    canvas = Canvas(100, 100)
    canvas.draw_round_rect(10, 10, 50, 30, 8, Color.WHITE)
    assert canvas.pixels[10][35] == Color.WHITE
    assert canvas.pixels[39][35] == Color.WHITE
    assert canvas.pixels[25][35] == Color.BLACK
    assert canvas.pixels[10][10] == Color.BLACK


def test_text_bounds_font_cell():
    canvas = Canvas()
    assert canvas.text_bounds("A", 1) == (6, 8)


def test_text_bounds_scales():
    canvas = Canvas()
    one_w, one_h = canvas.text_bounds("a", 2)
    two_w, two_h = canvas.text_bounds("ab", 2)
    assert two_w == 2 * one_w
    assert two_h == one_h
    assert canvas.text_bounds("ab", 4) == (2 * two_w, 2 * two_h)
    assert canvas.text_bounds("", 3) == (0, 0)


def test_draw_text_is_recorded_and_cleared():
    canvas = Canvas()
    canvas.draw_text("hi", 10, 20, Color.WHITE, 1)
    assert [(t.text, t.x, t.y, t.color, t.size) for t in canvas.texts] == [
        ("hi", 10, 20, Color.WHITE, 1)
    ]
    canvas.fill_rect(0, 0, 100, 100, Color.BLACK)
    assert canvas.texts == []
    canvas.draw_text("hi", 10, 20, Color.WHITE, 1)
    canvas.fill_screen(Color.BLACK)
    assert canvas.texts == []


def test_partial_fill_keeps_text():
    canvas = Canvas()
    canvas.draw_text("hello", 10, 20, Color.WHITE, 1)
    canvas.fill_rect(0, 0, 12, 12, Color.BLACK)
    assert [t.text for t in canvas.texts] == ["hello"]


def test_display_init_clears():
    canvas = Canvas()
    canvas.fill_screen(Color.RED)
    Display(canvas).init()
    assert coloured(canvas, Color.RED) == set()


def test_centered_text_is_centred():
    canvas = Canvas()
    display = Display(canvas)
    display.draw_centered_text("Hello", 100, Color.WHITE, 2)
    item = canvas.texts[-1]
    width, _ = canvas.text_bounds("Hello", 2)
    assert abs(canvas.width - width - 2 * item.x) <= 1
    assert (item.y, item.size, item.color) == (100, 2, Color.WHITE)


def test_centered_text_default_size():
    canvas = Canvas()
    Display(canvas).draw_centered_text("Hi", 5, Color.WHITE)
    assert canvas.texts[-1].size == 2


def test_selected_menu_item():
    canvas = Canvas()
    display = Display(canvas)
    display.draw_menu_item("Play", 0, True)
    item = canvas.texts[-1]
    assert item.text == "Play"
    assert item.color == Color.BLACK
    assert canvas.pixels[item.y][canvas.width // 2] == Color.YELLOW


def test_unselected_menu_item():
    canvas = Canvas()
    display = Display(canvas)
    display.draw_menu_item("Credits", 1, False)
    item = canvas.texts[-1]
    assert item.color == Color.WHITE
    assert canvas.pixels[item.y][canvas.width // 2] == Color.BLACK
    assert canvas.pixels[item.y - 8][canvas.width // 2] == Color.WHITE


def test_menu_item_spacing():
    canvas = Canvas()
    display = Display(canvas)
    display.draw_menu_item("a", 0, False)
    display.draw_menu_item("b", 1, False)
    first, second = canvas.texts
    assert second.y - first.y == 40


def test_update_menu_selection():
    canvas = Canvas()
    display = Display(canvas)
    display.update_menu_selection(0, 1, ["Play", "Credits", "Settings"])
    colours = {t.text: t.color for t in canvas.texts}
    assert colours == {"Play": Color.WHITE, "Credits": Color.BLACK}


def test_draw_title_clears_top_band():
    canvas = Canvas()
    canvas.fill_screen(Color.RED)
    Display(canvas).draw_title("Credits")
    assert canvas.pixels[0][0] == Color.BLACK
    assert canvas.pixels[39][0] == Color.BLACK
    assert canvas.pixels[40][0] == Color.RED
    item = canvas.texts[-1]
    assert (item.text, item.y, item.size, item.color) == ("Credits", 20, 2, Color.WHITE)