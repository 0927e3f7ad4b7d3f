import pytest

from arcos.screen import HEIGHT, WHITE_ON_BLACK, WIDTH, Screen


def test_putchar_stores_char_and_attribute():
    screen = Screen()
    screen.putchar("A")
    assert screen.char_at(0, 0) == "A"
    assert screen.attr_at(0, 0) == WHITE_ON_BLACK
    assert screen.cursor == (1, 0)


def test_putchar_accepts_byte_codes():
    screen = Screen()
    screen.putchar(0xDB)
    assert screen.char_at(0, 0) == chr(0xDB)


def test_putchar_rejects_multiple_characters():
    with pytest.raises(ValueError):
        Screen().putchar("ab")


def test_newline_starts_next_row():
    screen = Screen()
    screen.write("ab\ncd")
    assert screen.row_text(0) == "ab"
    assert screen.row_text(1) == "cd"
    assert screen.cursor == (2, 1)


def test_backspace_erases_previous_cell():
    screen = Screen()
    screen.write("ab\b")
    assert screen.row_text(0) == "a"
    assert screen.cursor == (1, 0)


def test_backspace_at_origin_does_nothing():
    screen = Screen()
    screen.putchar("\b")
    assert screen.cursor == (0, 0)
    assert screen.text() == ""


def test_newlines_past_bottom_scroll():
    screen = Screen()
    for i in range(HEIGHT):
        screen.write(f"L{i}\n")
    assert screen.row_text(0) == "L1"
    assert screen.row_text(HEIGHT - 2) == f"L{HEIGHT - 1}"
    assert screen.row_text(HEIGHT - 1) == ""
    assert screen.cursor == (0, HEIGHT - 1)


def test_filling_the_screen_scrolls_once():
    screen = Screen()
    screen.write("x" * (WIDTH * HEIGHT))
    assert screen.row_text(0) == "x" * WIDTH
    assert screen.row_text(HEIGHT - 1) == ""
    assert screen.cursor == (0, HEIGHT - 1)


def test_clear_resets_cells_and_cursor():
    screen = Screen()
    screen.write("hello\nworld")
    screen.clear()
    assert screen.text() == ""
    assert screen.cursor == (0, 0)


def test_move_cursor_positions_output():
    screen = Screen()
    screen.move_cursor(5, 3)
    screen.write("hi")
    assert screen.char_at(5, 3) == "h"
    assert screen.char_at(6, 3) == "i"
    assert screen.cursor == (7, 3)


def test_move_cursor_off_screen_raises():
    with pytest.raises(IndexError):
        Screen().move_cursor(0, HEIGHT)


def test_put_at_leaves_cursor_alone():
    screen = Screen()
    screen.put_at(10, 2, "Z", 0x07)
    assert screen.char_at(10, 2) == "Z"
    assert screen.attr_at(10, 2) == 0x07
    assert screen.cursor == (0, 0)


def test_put_at_out_of_range_raises():
    with pytest.raises(IndexError):
        Screen().put_at(WIDTH, HEIGHT - 1, "a")


def test_text_joins_rows():
    screen = Screen()
    screen.write("one\n\nthree")
    assert screen.text() == "one\n\nthree"