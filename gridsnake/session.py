"""Game session: tick timing, pause, speed-up and restart around a SnakeGame."""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional

from gridsnake.game import Direction, SnakeGame

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
MAP_MARGIN_PX = 30

SNAKE_SPEED = 2.0
SPEED_UP_FACTOR = 5.0
SCENE_WIDTH = 20
SCENE_HEIGHT = 20

TICK_THRESHOLD = 1000
MIN_CPU_DELAY_MS = int(1000 / (SNAKE_SPEED * SPEED_UP_FACTOR * 4.0))

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)

Color = tuple[int, int, int]


class Action(enum.Enum):
    """Player inputs understood by a session."""

    PAUSE = "pause"
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    SPEED_UP = "speed_up"
    RESTART = "restart"


_STEERING = {
    Action.UP: Direction.UP,
    Action.LEFT: Direction.LEFT,
    Action.DOWN: Direction.DOWN,
    Action.RIGHT: Direction.RIGHT,
}


class Boundary(NamedTuple):
    """A square map area in window pixels."""

    x: float
    y: float
    w: float
    h: float


def centered_boundary(window_width: int, window_height: int, h_margin: int, v_margin: int) -> Boundary:
    """Square map area, horizontally centred and resting on the bottom margin."""
    if window_width < window_height:
        side = float(window_width - 2 * h_margin)
    else:
        side = float(window_height - 2 * v_margin)
    x = window_width / 2.0 - side / 2.0
    y = float(window_height - v_margin) - side
    return Boundary(x, y, side, side)


def status_message(game: SnakeGame, paused: bool) -> tuple[str, Color]:
    """Status line text and its colour for the current game state."""
    score = game.score()
    if paused:
        return f"Game paused. Press ESC to resume. Score: {score}", WHITE
    if game.is_game_won():
        return f"Congratulations! You won! Press R to restart. Score: {score}", GREEN
    if game.is_game_lost():
        return f"Game over! Press R to restart. Score: {score}", RED
    return f"Score: {score}", WHITE


class GameSession:
    """Drives a SnakeGame from elapsed time and player actions."""

    def __init__(self, width: int = SCENE_WIDTH, height: int = SCENE_HEIGHT, rng=None) -> None:
        self.width = width
        self.height = height
        self._rng = rng
        self.game = SnakeGame(width, height, rng)
        self.paused = False
        self.speeding_up = False
        self.tick_progression = 0

    @property
    def over(self) -> bool:
        """True once the game is won or lost."""
        return self.game.is_game_won() or self.game.is_game_lost()

    def advance(self, dt_ms: int) -> bool:
        """Account for dt_ms of elapsed time; return True if the game moved."""
        if dt_ms < 0:
            raise ValueError(f"elapsed time must not be negative, got {dt_ms}")
        if self.paused:
            return False
        factor = SNAKE_SPEED * SPEED_UP_FACTOR if self.speeding_up else SNAKE_SPEED
        self.tick_progression = int(self.tick_progression + dt_ms * factor)

        updated = False
        while self.tick_progression >= TICK_THRESHOLD:
            if self.over:
                break
            updated = True
            self.tick_progression -= TICK_THRESHOLD
            self.game.update()
        return updated

    def press(self, action: Action) -> bool:
        """Handle a pressed action; return False when the player asks to quit."""
        if action is Action.PAUSE:
            if self.over:
                return False
            self.paused = not self.paused
        elif action in _STEERING:
            self.game.set_direction(_STEERING[action])
        elif action is Action.SPEED_UP:
            self.speeding_up = True
        elif action is Action.RESTART:
            if self.over:
                self.restart()
        return True

    def release(self, action: Action) -> None:
        """Handle a released action."""
        if action is Action.SPEED_UP:
            self.speeding_up = False

    def restart(self) -> None:
        """Start a fresh game; the speed-up state is kept."""
        self.game = SnakeGame(self.width, self.height, self._rng)
        self.paused = False
        self.tick_progression = 0


__all__: Optional[list[str]] = [
    "Action",
    "Boundary",
    "GameSession",
    "centered_boundary",
    "status_message",
]