"""End-to-end ticks on small boards."""
import random

from termsnake.board import Board
from termsnake.geometry import Direction, Point
from termsnake.snake import Snake


def test_single_tick_moves_right():
    snake = Snake([Point(0, 0)], Direction.RIGHT)
    board = Board(3, 3, [snake], rng=random.Random(0))
    result = board.step()
    assert not result.done
    assert snake.head() == Point(1, 0)
    assert len(snake) == 1


def test_self_collision_ends_game():
    snake = Snake([Point(1, 2), Point(1, 1), Point(2, 1), Point(2, 2)], Direction.UP)
    board = Board(5, 5, [snake], rng=random.Random(0))
    result = board.step()
    assert result.done
    assert result.report.dead == [True]


def test_turn_into_own_body_ends_game():
    snake = Snake(
        [Point(1, 1), Point(2, 1), Point(3, 1), Point(3, 2), Point(2, 2)],
        Direction.LEFT,
    )
    board = Board(5, 5, [snake], rng=random.Random(0))
    assert board.set_direction(0, Direction.UP)
    result = board.step()
    assert result.done
    assert result.report.dead == [True]
    assert result.report.scores == [4 - snake.death_penalty]


def test_mutual_head_on_with_equal_scores_is_draw():
    first = Snake([Point(0, 1)], Direction.RIGHT, death_penalty=4)
    second = Snake([Point(2, 1)], Direction.LEFT, death_penalty=4)
    board = Board(3, 3, [first, second], rng=random.Random(0))
    result = board.step()
    assert result.done
    report = result.report
    assert report.dead == [True, True]
    assert report.scores == [-4, -4]
    assert report.draw
    assert report.winner is None
    assert report.summary() == "Both died"
    assert report.verdict() == "Draw"


def test_mutual_head_on_higher_score_wins():
    first = Snake([Point(0, 0), Point(0, 1)], Direction.RIGHT, death_penalty=4)
    second = Snake([Point(2, 1)], Direction.LEFT, death_penalty=4)
    board = Board(3, 3, [first, second], rng=random.Random(0))
    result = board.step()
    report = result.report
    assert report.dead == [True, True]
    assert report.scores == [-3, -4]
    assert report.winner == 0
    assert report.verdict() == "Player 1 wins"


def test_out_of_bounds_single_player():
    snake = Snake([Point(0, 0)], Direction.LEFT)
    board = Board(3, 3, [snake], rng=random.Random(0))
    result = board.step()
    assert result.done
    assert result.report.dead == [True]
    assert result.report.winner is None


def test_out_of_bounds_survivor_wins():
    first = Snake([Point(0, 0)], Direction.LEFT, death_penalty=4)
    second = Snake([Point(4, 4)], Direction.LEFT, death_penalty=4)
    board = Board(5, 5, [first, second], rng=random.Random(0))
    report = board.step().report
    assert report.dead == [True, False]
    assert report.winner == 1
    assert report.verdict() == "Player 2 wins"


def test_tied_score_goes_to_survivor():
    first = Snake(
        [Point(4, 0), Point(3, 0), Point(2, 0), Point(1, 0), Point(0, 0)],
        Direction.LEFT,
        death_penalty=4,
    )
    second = Snake([Point(4, 4)], Direction.LEFT, death_penalty=4)
    board = Board(5, 5, [first, second], rng=random.Random(0))
    report = board.step().report
    assert report.scores == [0, 0]
    assert report.dead == [True, False]
    assert not report.draw
    assert report.winner == 1
