"""Terminal front end for the snake game."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Protocol

from snakeplay.game import GameState, new_game

TICK_SECONDS = 0.1
QUIT_KEYS = frozenset({"\x1b", "\x03"})
LOG_FILE = "testlogfile"


class Screen(Protocol):
    """The drawing surface the game runs on."""

    def size(self) -> tuple[int, int]: ...

    def set_content(self, x: int, y: int, char: str) -> None: ...

    def clear(self) -> None: ...

    def show(self) -> None: ...

    def poll_key(self) -> str | None: ...


def put_string(screen: Screen, x: int, y: int, text: str) -> None:
    """Write text on one row of the screen, starting at column x."""
    for offset, char in enumerate(text):
        screen.set_content(x + offset, y, char)


def draw(state: GameState, screen: Screen) -> None:
    """Draw the food, the side walls and the snake."""
    screen.set_content(state.food_x, state.food_y, "0")
    for row in range(state.bound_y - 2):
        screen.set_content(0, row, "|")
        screen.set_content(state.bound_x, row, "|")
    for segment in state.segments:
        screen.set_content(segment.col, segment.row, "*")


def status_line(state: GameState) -> str:
    """The text shown on the bottom row: food position and segment headings."""
    parts = (
        f"snake {state.food_x},{state.food_y},{int(segment.direction)} "
        for segment in state.segments
    )
    return "hello" + "".join(parts)


def run(screen: Screen) -> GameState:
    """Play until a quit key arrives; return the final game state."""
    width, height = screen.size()
    state = new_game(width, height)
    state.food_x, state.food_y = state.generate_food()

    while True:
        screen.clear()
        key = screen.poll_key()
        if key is not None:
            if key in QUIT_KEYS:
                return state
            state.update_direction(key)
            put_string(screen, 10, 10, "key press")
            continue
        state.update_position()
        draw(state, screen)
        put_string(screen, 0, height - 1, status_line(state))
        screen.show()
        time.sleep(TICK_SECONDS)


class _CursesScreen:
    """Screen backed by a curses window."""

    def __init__(self, window) -> None:
        import curses

        self._curses = curses
        self._window = window
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            curses.set_escdelay(25)
        except (AttributeError, curses.error):
            pass
        window.nodelay(True)
        window.keypad(True)

    def size(self) -> tuple[int, int]:
        height, width = self._window.getmaxyx()
        return width, height

    def set_content(self, x: int, y: int, char: str) -> None:
        try:
            self._window.addstr(y, x, char)
        except self._curses.error:
            pass

    def clear(self) -> None:
        self._window.erase()

    def show(self) -> None:
        self._window.refresh()

    def poll_key(self) -> str | None:
        code = self._window.getch()
        if code == -1 or code == self._curses.KEY_RESIZE or code > 0x10FFFF:
            return None
        return chr(code)


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="snakeplay", description="Play snake.")
    parser.add_argument("--log-file", default=LOG_FILE, help="file that receives log lines")
    args = parser.parse_args(argv)

    logging.basicConfig(filename=args.log_file, filemode="a", level=logging.INFO)

    import curses

    try:
        curses.wrapper(lambda window: run(_CursesScreen(window)))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())