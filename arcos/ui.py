"""Simple drawing helpers for boxes, labels and a header bar."""

from __future__ import annotations

from .screen import WHITE_ON_BLACK, WIDTH, Screen


def draw_box(screen: Screen, x: int, y: int, w: int, h: int, title: str | None = None) -> None:
    """Draw a ``w`` by ``h`` frame at (x, y) with an optional title on its top edge."""
    bottom = y + h - 1
    right = x + w - 1
    for row in (y, bottom):
        screen.put_at(x, row, "+", WHITE_ON_BLACK)
        for col in range(x + 1, right):
            screen.put_at(col, row, "-", WHITE_ON_BLACK)
        screen.put_at(right, row, "+", WHITE_ON_BLACK)
    for row in range(y + 1, bottom):
        screen.put_at(x, row, "|", WHITE_ON_BLACK)
        screen.put_at(right, row, "|", WHITE_ON_BLACK)
    if title:
        for offset, char in enumerate(title[:max(w - 4, 0)]):
            screen.put_at(x + 2 + offset, y, char, WHITE_ON_BLACK)


def draw_label(screen: Screen, x: int, y: int, text: str) -> None:
    """Write ``text`` starting at (x, y) without moving the cursor."""
    for offset, char in enumerate(text):
        screen.put_at(x + offset, y, char, WHITE_ON_BLACK)


def draw_header_bar(screen: Screen, title: str) -> None:
    """Fill the top row with '=' and write ``title`` from the third column."""
    for col in range(WIDTH):
        screen.put_at(col, 0, "=", WHITE_ON_BLACK)
    for offset, char in enumerate(title[:WIDTH - 2]):
        screen.put_at(2 + offset, 0, char, WHITE_ON_BLACK)