# tests/test_snake.py
import random
from collections import deque

from bouncesnake.core.snake import Snake

W, H, C = 800, 600, 20

def make(segments, direction=(1, 0)):
    s = Snake(segments[0], C)
    s.segments = deque(segments)
    s.direction = direction
    return s

def test_snake_starts_with_one_segment_heading_right():
    s = Snake((400, 300), C)
    assert list(s) == [(400, 300)]
    assert s.direction == (1, 0)
    assert s.head == s.tail == (400, 300)

def test_move_advances_head_by_one_cell_and_keeps_length():
    s = make([(100, 100), (80, 100), (60, 100)])
    s.move(W, H)
    assert list(s) == [(120, 100), (100, 100), (80, 100)]

def test_left_wall_reflects_direction():
    s = Snake((0, 0), C)
    s.set_direction(-1, 0)
    s.move(W, H)
    assert s.direction == (1, 0)
    assert s.head == (C, 0)

def test_right_wall_reflects_direction():
    s = Snake((W - C, 100), C)
    s.move(W, H)
    assert s.direction == (-1, 0)
    assert s.head == (W - 2 * C, 100)

def test_bottom_and_top_walls_reflect():
    s = Snake((100, H - C), C)
    s.set_direction(0, 1)
    s.move(W, H)
    assert (s.head, s.direction) == ((100, H - 2 * C), (0, -1))

    s = Snake((100, 0), C)
    s.set_direction(0, -1)
    s.move(W, H)
    assert (s.head, s.direction) == ((100, C), (0, 1))

def test_corner_reflects_both_axes_independently():
    s = Snake((W - C, H - C), C)
    s.set_direction(1, 1)  # diagonals are accepted as given
    s.move(W, H)
    assert s.direction == (-1, -1)
    assert s.head == (W - 2 * C, H - 2 * C)

def test_head_stays_aligned_and_on_board():
    rng = random.Random(5)
    w, h = 100, 60
    s = Snake((40, 20), C)
    for _ in range(500):
        if rng.random() < 0.3:
            s.set_direction(*rng.choice([(1, 0), (-1, 0), (0, 1), (0, -1)]))
        s.move(w, h)
        x, y = s.head
        assert x % C == 0 and y % C == 0
        assert 0 <= x < w and 0 <= y < h

def test_self_collision_when_head_repeats_a_body_cell():
    s = make([(0, 0), (20, 0), (20, 20), (0, 0), (0, 20)])
    assert s.has_self_collision()

def test_no_self_collision_when_segments_distinct():
    s = make([(0, 0), (20, 0), (20, 20), (0, 20)])
    assert not s.has_self_collision()
    assert not Snake((0, 0), C).has_self_collision()

def test_grow_duplicates_tail_and_survives_next_move():
    s = make([(100, 100), (80, 100)])
    s.grow()
    assert list(s) == [(100, 100), (80, 100), (80, 100)]
    s.move(W, H)
    assert list(s) == [(120, 100), (100, 100), (80, 100)]

def test_reversing_into_neck_is_allowed_and_collides():
    s = make([(60, 0), (40, 0), (20, 0)])
    s.set_direction(-1, 0)
    assert s.direction == (-1, 0)
    s.move(W, H)
    assert s.head == (40, 0)
    assert s.has_self_collision()
