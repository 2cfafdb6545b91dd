"""Window front end for the snake game."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from gridsnake.game import CellState
from gridsnake.session import (
    MAP_MARGIN_PX,
    MIN_CPU_DELAY_MS,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Action,
    GameSession,
    centered_boundary,
    status_message,
)

BLACK = (0, 0, 0)
TEXT_GAP_PX = 10
FONT_SIZE = 18

_KEY_ACTIONS = {
    pygame.K_ESCAPE: Action.PAUSE,
    pygame.K_w: Action.UP,
    pygame.K_UP: Action.UP,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_SPACE: Action.SPEED_UP,
    pygame.K_r: Action.RESTART,
}


def cell_color(state: CellState) -> Optional[tuple[int, int, int]]:
    """Fill colour for a cell, or None for an empty (black) cell."""
    r = 255 if state & CellState.APPLE else 0
    g = 255 if state & CellState.SNAKE_BODY else 0
    b = 255 if state & CellState.SNAKE_HEAD else 0
    if r or g or b:
        return (r, g, b)
    return None


def draw(surface: pygame.Surface, font: pygame.font.Font, session: GameSession, margin: int = MAP_MARGIN_PX) -> bool:
    """Draw the map, snake, apple and status line; False if there is no room."""
    surface.fill(BLACK)
    width, height = surface.get_size()
    box = centered_boundary(width, height, margin, margin)
    if box.w <= 0 or box.h <= 0:
        return False
    pygame.draw.rect(surface, WHITE, pygame.Rect(int(box.x), int(box.y), int(box.w), int(box.h)), 1)

    cols, rows = session.game.dimensions()
    cell_w = box.w / cols
    cell_h = box.h / rows
    for y, row in enumerate(session.game.scene()):
        top = int(box.y + y * cell_h)
        bottom = int(box.y + (y + 1) * cell_h)
        for x, cell in enumerate(row):
            color = cell_color(cell)
            if color is None:
                continue
            left = int(box.x + x * cell_w)
            right = int(box.x + (x + 1) * cell_w)
            surface.fill(color, pygame.Rect(left, top, right - left, bottom - top))

    text, color = status_message(session.game, session.paused)
    rendered = font.render(text, True, color)
    surface.blit(rendered, (int(box.x), int(box.y + box.h + TEXT_GAP_PX)))
    return True


def action_for_key(key: int) -> Optional[Action]:
    """Action bound to a keyboard key, or None."""
    return _KEY_ACTIONS.get(key)


def run(width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
    """Open a window and play until the player quits."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Snake Game")
        font = pygame.font.Font(None, FONT_SIZE)
        session = GameSession()

        def redraw() -> None:
            draw(screen, font, session)
            pygame.display.flip()

        redraw()
        previous = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = action_for_key(event.key)
                    if action is None:
                        continue
                    game_before = session.game
                    if not session.press(action):
                        running = False
                        break
                    if session.game is not game_before:
                        previous = pygame.time.get_ticks()
                    redraw()
                elif event.type == pygame.KEYUP:
                    action = action_for_key(event.key)
                    if action is not None:
                        session.release(action)
            if not running:
                break

            now = pygame.time.get_ticks()
            dt_ms = max(0, now - previous)
            previous = now
            if session.advance(dt_ms):
                redraw()
            pygame.time.delay(MIN_CPU_DELAY_MS)
    finally:
        pygame.quit()


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake in a window.")
    parser.add_argument("--width", type=_positive_int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=_positive_int, default=WINDOW_HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    run(args.width, args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())