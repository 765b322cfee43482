"""Snake game state and the rules that move, grow and feed the snake."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import IntEnum

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Heading of a snake segment; NONE marks a freshly grown segment."""

    NONE = 0
    DOWN = 1
    UP = 2
    RIGHT = 3
    LEFT = 4


_KEY_DIRECTIONS = {
    "s": Direction.DOWN,
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "a": Direction.LEFT,
}


@dataclass(frozen=True)
class Segment:
    """One cell of the snake's body."""

    row: int
    col: int
    direction: Direction = Direction.NONE


@dataclass
class GameState:
    """The snake, the board bounds and the food position."""

    segments: list[Segment]
    bound_x: int
    bound_y: int
    direction: Direction = Direction.LEFT
    food_x: int = 10
    food_y: int = 10
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def head(self) -> Segment:
        return self.segments[0]

    def update_position(self) -> None:
        """Advance the snake by one step, eating food before and after the move."""
        self.check_eating()
        head = self.segments[0]
        self.segments = [self._advance(head), *self.segments[:-1]]
        self.check_eating()

    def _advance(self, head: Segment) -> Segment:
        row, col = head.row, head.col
        if head.direction == Direction.DOWN:
            row = 0 if row > self.bound_y else row + 1
        elif head.direction == Direction.UP:
            row = self.bound_y - 1 if row <= 0 else row - 1
        elif head.direction == Direction.RIGHT:
            col = 0 if col > self.bound_x else col + 1
        elif head.direction == Direction.LEFT:
            col = self.bound_x - 1 if col <= 0 else col - 1
        return replace(head, row=row, col=col)

    def check_eating(self) -> bool:
        """Grow the snake and place new food if its head or tail is on the food."""
        first, last = self.segments[0], self.segments[-1]
        eaten = any(
            self.food_x == seg.col and self.food_y == seg.row for seg in (first, last)
        )
        if eaten:
            self.segments.append(Segment(0, 0, Direction.NONE))
            self.food_x, self.food_y = self.generate_food()
            logger.info("checkeating")
        return eaten

    def generate_food(self) -> tuple[int, int]:
        """Pick a new food position inside the board, away from the tail segment."""
        if self.bound_x < 3 or self.bound_y < 3:
            raise ValueError("board too small to place food")
        last = self.segments[-1]
        x = self._pick(self.bound_x, last.row)
        y = self._pick(self.bound_y, last.col)
        return x, y

    def _pick(self, bound: int, taken: int) -> int:
        while True:
            value = self.rng.randrange(bound - 2) + 1
            if value != taken:
                return value

    def update_direction(self, key: str) -> None:
        """Turn the snake's head for the keys s, w, d and a; ignore other keys."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is None:
            return
        self.direction = direction
        self.segments[0] = replace(self.segments[0], direction=direction)


def new_game(width: int, height: int, rng: random.Random | None = None) -> GameState:
    """Create the starting state for a screen of the given size."""
    return GameState(
        segments=[Segment(3, 4 + offset, Direction.DOWN) for offset in range(2)],
        bound_x=width // 3,
        bound_y=height,
        direction=Direction.LEFT,
        food_x=10,
        food_y=10,
        rng=rng if rng is not None else random.Random(),
    )