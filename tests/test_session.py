import random

import pytest

from gridsnake.session import (
    GREEN,
    RED,
    WHITE,
    Action,
    GameSession,
    centered_boundary,
    status_message,
)


@pytest.fixture
def session():
    return GameSession(rng=random.Random(0))


def test_no_time_means_no_move(session):
    head = session.game.head_position()
    assert session.advance(0) is False
    assert session.game.head_position() == head


def test_move_only_when_threshold_reached(session):
    x, y = session.game.head_position()
    assert session.advance(499) is False
    assert session.game.head_position() == (x, y)
    assert session.advance(1) is True
    assert session.game.head_position() == (x + 1, y)
    assert session.tick_progression == 0


def test_speed_up_moves_sooner_and_release_stops_it(session):
    x, y = session.game.head_position()
    session.press(Action.SPEED_UP)
    assert session.speeding_up is True
    assert session.advance(100) is True
    assert session.game.head_position() == (x + 1, y)
    session.release(Action.SPEED_UP)
    assert session.speeding_up is False
    assert session.advance(100) is False
    assert session.game.head_position() == (x + 1, y)


def test_pause_blocks_progress(session):
    head = session.game.head_position()
    assert session.press(Action.PAUSE) is True
    assert session.paused is True
    assert session.advance(10_000) is False
    assert session.game.head_position() == head
    assert session.press(Action.PAUSE) is True
    assert session.paused is False
    assert session.advance(500) is True


def test_negative_time_rejected(session):
    with pytest.raises(ValueError):
        session.advance(-1)


def test_losing_stops_updates_and_escape_quits(session):
    session.press(Action.LEFT)
    assert session.advance(500) is True
    assert session.game.is_game_lost() is True
    head = session.game.head_position()
    assert session.advance(5000) is False
    assert session.game.head_position() == head
    assert session.press(Action.PAUSE) is False


def test_restart_ignored_while_playing(session):
    game = session.game
    assert session.press(Action.RESTART) is True
    assert session.game is game


def test_restart_after_loss_resets_but_keeps_speed_up(session):
    session.press(Action.SPEED_UP)
    session.press(Action.LEFT)
    session.advance(100)
    assert session.over is True
    session.tick_progression = 700
    lost_game = session.game
    assert session.press(Action.RESTART) is True
    assert session.game is not lost_game
    assert session.over is False
    assert session.paused is False
    assert session.tick_progression == 0
    assert session.game.score() == 0
    assert session.speeding_up is True
    assert session.game.dimensions() == lost_game.dimensions()


def test_steering_through_actions(session):
    x, y = session.game.head_position()
    session.press(Action.UP)
    session.advance(500)
    assert session.game.head_position() == (x, y - 1)
    session.press(Action.RIGHT)
    session.advance(500)
    assert session.game.head_position() == (x + 1, y - 1)
    session.press(Action.DOWN)
    session.advance(500)
    assert session.game.head_position() == (x + 1, y)


def test_centered_boundary_landscape_example():
    assert centered_boundary(640, 480, 30, 30) == (110.0, 30.0, 420.0, 420.0)


@pytest.mark.parametrize("size", [(640, 480), (300, 700), (500, 500)])
def test_centered_boundary_invariants(size):
    ww, wh = size
    box = centered_boundary(ww, wh, 20, 20)
    assert box.w == box.h
    assert box.x + box.w / 2 == ww / 2
    assert box.y + box.h == wh - 20
    assert box.w <= ww and box.h <= wh


def test_status_message_playing(session):
    assert status_message(session.game, False) == ("Score: 0", WHITE)


def test_status_message_paused(session):
    text, color = status_message(session.game, True)
    assert text == "Game paused. Press ESC to resume. Score: 0"
    assert color == WHITE


def test_status_message_lost(session):
    session.press(Action.LEFT)
    session.advance(500)
    text, color = status_message(session.game, False)
    assert text == "Game over! Press R to restart. Score: 0"
    assert color == RED


def test_status_message_won(session):
    session.game.place_apple(-1, -1)
    text, color = status_message(session.game, False)
    assert text == "Congratulations! You won! Press R to restart. Score: 0"
    assert color == GREEN