"""Grid-based snake game state: movement, growth, apples, win and loss."""

from __future__ import annotations

import enum
import random
from typing import Optional, Protocol

MIN_SIZE = 3
MAX_SIZE = 128
NO_APPLE = (-1, -1)


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Direction(str, enum.Enum):
    """Movement direction, keyed by the usual WASD letters."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}


class CellState(enum.IntFlag):
    """What occupies a grid cell; several flags may be set at once."""

    EMPTY = 0
    APPLE = 1
    SNAKE_HEAD = 2
    SNAKE_BODY = 4


class SnakeGame:
    """A snake on a width-by-height grid, with one apple at a time."""

    def __init__(self, width: int, height: int, rng: Optional[_RandomSource] = None) -> None:
        for name, value in (("width", width), ("height", height)):
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(f"{name} must be between {MIN_SIZE} and {MAX_SIZE}, got {value}")
        self._width = width
        self._height = height
        self._rng: _RandomSource = rng if rng is not None else random.Random()

        # Apple in the middle (preferring top-right), head leftmost one row below it.
        apple_x = width // 2
        if height % 2:
            apple_y, head_y = height // 2, height // 2 + 1
        else:
            apple_y, head_y = height // 2 - 1, height // 2
        self._apple = (apple_x, apple_y)
        self._head = (0, head_y)
        self._body: list[tuple[int, int]] = []
        self._direction = Direction.RIGHT
        self._grid: list[list[CellState]] = []
        self._refresh()

    def is_game_won(self) -> bool:
        """True once the grid is full and no apple can be placed."""
        return self._apple == NO_APPLE

    def is_game_lost(self) -> bool:
        """True if the head left the grid or ran into the body."""
        x, y = self._head
        if not self._in_bounds(x, y):
            return True
        both = CellState.SNAKE_HEAD | CellState.SNAKE_BODY
        return any((cell & both) == both for row in self._grid for cell in row)

    def score(self) -> int:
        """Number of body segments behind the head."""
        return len(self._body)

    def update(self) -> None:
        """Advance one tick: move the snake one cell in its current direction."""
        dx, dy = self._direction.delta
        old_head = self._head
        self._head = (old_head[0] + dx, old_head[1] + dy)
        eaten = self._head == self._apple

        self._body.insert(0, old_head)
        if not eaten:
            self._body.pop()
        else:
            # Candidates come from the scene as it was before this move.
            free = [
                (x, y)
                for y, row in enumerate(self._grid)
                for x, cell in enumerate(row)
                if cell == CellState.EMPTY
            ]
            self._apple = free[self._rng.randrange(len(free))] if free else NO_APPLE
        self._refresh()

    def set_direction(self, direction: Direction | str) -> None:
        """Turn the snake, unless that would reverse it into its own neck."""
        try:
            direction = Direction(direction)
        except ValueError:
            raise ValueError(f"invalid direction: {direction!r}") from None
        if self._body:
            dx, dy = direction.delta
            if self._body[0] == (self._head[0] + dx, self._head[1] + dy):
                return
        self._direction = direction

    def render(self) -> str:
        """Text picture of the grid: '.' empty, '@' apple, '$' head, '#' body."""
        lines = []
        for row in self._grid:
            lines.append(" ".join(self._cell_text(cell) for cell in row))
        return "\n".join(lines)

    def dimensions(self) -> tuple[int, int]:
        """Grid size as (width, height)."""
        return self._width, self._height

    def scene(self) -> tuple[tuple[CellState, ...], ...]:
        """Snapshot of the grid, indexed [y][x]."""
        return tuple(tuple(row) for row in self._grid)

    def head_position(self) -> tuple[int, int]:
        return self._head

    def apple_position(self) -> tuple[int, int]:
        """Apple coordinates, or (-1, -1) when the game is won."""
        return self._apple

    def place_apple(self, x: int, y: int) -> None:
        """Put the apple at (x, y) regardless of what is there."""
        if (x, y) != NO_APPLE and not self._in_bounds(x, y):
            raise ValueError(f"apple position ({x}, {y}) is outside the grid")
        self._apple = (x, y)
        self._refresh()

    def place_head(self, x: int, y: int) -> None:
        """Put the snake head at (x, y) regardless of what is there."""
        self._head = (x, y)
        self._refresh()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    @staticmethod
    def _cell_text(cell: CellState) -> str:
        if cell == CellState.EMPTY:
            return "."
        text = ""
        if cell & CellState.APPLE:
            text += "@"
        if cell & CellState.SNAKE_HEAD:
            text += "$"
        if cell & CellState.SNAKE_BODY:
            text += "#"
        return text

    def _refresh(self) -> None:
        grid = [[CellState.EMPTY] * self._width for _ in range(self._height)]
        if self._apple != NO_APPLE:
            ax, ay = self._apple
            grid[ay][ax] |= CellState.APPLE
        hx, hy = self._head
        if self._in_bounds(hx, hy):
            grid[hy][hx] |= CellState.SNAKE_HEAD
        for bx, by in self._body:
            if not self._in_bounds(bx, by):
                raise RuntimeError(f"snake body at ({bx}, {by}) is outside the grid")
            grid[by][bx] |= CellState.SNAKE_BODY
        self._grid = grid