import random

import pytest

from snakeplay.game import Direction, GameState, Segment, new_game


class SeqRng:
    def __init__(self, values):
        self._values = iter(values)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return next(self._values)


def make_state(segments, food=(50, 50), bound_x=20, bound_y=20, rng=None):
    return GameState(
        segments=list(segments),
        bound_x=bound_x,
        bound_y=bound_y,
        food_x=food[0],
        food_y=food[1],
        rng=rng if rng is not None else random.Random(3),
    )


def test_new_game_layout():
    state = new_game(60, 20, random.Random(1))
    assert state.segments == [
        Segment(3, 4, Direction.DOWN),
        Segment(3, 5, Direction.DOWN),
    ]
    assert state.direction == Direction.LEFT
    assert (state.food_x, state.food_y) == (10, 10)
    assert state.bound_y == 20
    assert state.bound_x == 60 // 3


def test_update_moves_head_and_body_follows():
    state = make_state([Segment(3, 4, Direction.DOWN), Segment(3, 5, Direction.DOWN)])
    old_head = state.head
    state.update_position()
    assert state.segments[0] == Segment(old_head.row + 1, old_head.col, Direction.DOWN)
    assert state.segments[1] == old_head
    assert len(state.segments) == 2


def test_down_wraps_past_bound():
    state = make_state([Segment(21, 4, Direction.DOWN)])
    state.update_position()
    assert state.head.row == 0


def test_down_at_bound_still_advances():
    state = make_state([Segment(20, 4, Direction.DOWN)])
    state.update_position()
    assert state.head.row == state.bound_y + 1


def test_up_wraps_at_top():
    state = make_state([Segment(0, 4, Direction.UP)])
    state.update_position()
    assert state.head.row == state.bound_y - 1


def test_right_wraps_past_bound():
    state = make_state([Segment(5, 21, Direction.RIGHT)])
    state.update_position()
    assert state.head.col == 0


def test_left_wraps_at_edge():
    state = make_state([Segment(5, 0, Direction.LEFT)])
    state.update_position()
    assert state.head.col == state.bound_x - 1


def test_new_segment_without_direction_stays():
    state = make_state([Segment(5, 6, Direction.NONE)])
    state.update_position()
    assert state.head == Segment(5, 6, Direction.NONE)


def test_eating_grows_snake_and_moves_food():
    state = make_state(
        [Segment(3, 4, Direction.RIGHT), Segment(3, 3, Direction.RIGHT)],
        food=(5, 3),
        rng=random.Random(7),
    )
    state.update_position()
    assert len(state.segments) == 3
    assert state.segments[-1] == Segment(0, 0, Direction.NONE)
    assert 1 <= state.food_x <= state.bound_x - 2
    assert 1 <= state.food_y <= state.bound_y - 2


def test_check_eating_detects_tail():
    state = make_state(
        [Segment(3, 4, Direction.RIGHT), Segment(7, 9, Direction.RIGHT)],
        food=(9, 7),
    )
    assert state.check_eating() is True
    assert len(state.segments) == 3


def test_check_eating_misses():
    state = make_state([Segment(3, 4, Direction.RIGHT)], food=(9, 7))
    assert state.check_eating() is False
    assert len(state.segments) == 1


def test_generate_food_rejects_tail_coordinates():
    rng = SeqRng([4, 9, 7, 2])
    state = make_state([Segment(5, 8, Direction.DOWN)], rng=rng)
    assert state.generate_food() == (10, 3)
    assert rng.calls == [state.bound_x - 2] * 2 + [state.bound_y - 2] * 2


@pytest.mark.parametrize("bounds", [(2, 20), (20, 2), (1, 1)])
def test_generate_food_board_too_small(bounds):
    state = make_state([Segment(0, 0)], bound_x=bounds[0], bound_y=bounds[1])
    with pytest.raises(ValueError):
        state.generate_food()


@pytest.mark.parametrize(
    "key, direction",
    [("s", Direction.DOWN), ("w", Direction.UP), ("d", Direction.RIGHT), ("a", Direction.LEFT)],
)
def test_update_direction(key, direction):
    state = make_state([Segment(3, 4, Direction.NONE), Segment(3, 5, Direction.NONE)])
    state.update_direction(key)
    assert state.direction == direction
    assert state.head.direction == direction
    assert state.segments[1].direction == Direction.NONE


def test_update_direction_ignores_other_keys():
    state = make_state([Segment(3, 4, Direction.DOWN)])
    state.update_direction("x")
    assert state.direction == Direction.LEFT
    assert state.head.direction == Direction.DOWN