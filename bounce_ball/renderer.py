"""Drawing helpers.

Nothing in here changes game state.  The board is drawn onto its own
subsurface so every coordinate in :mod:`bounce_ball.state` maps one-to-one to
pixels, and the HUD strip above it carries the readouts and the mode buttons.
"""

from __future__ import annotations

import functools
from typing import Dict, List, Optional, Tuple

import pygame

from bounce_ball.config import (
    ACCENT,
    BLACK,
    BOARD_ORIGIN,
    GREY,
    MARGIN,
    ORANGE,
    WALL,
    WALL_THICKNESS,
    WHITE,
    WIDTH,
    WINDOW_BG,
)
from bounce_ball.state import GameState, Mode, Phase, paddle_rect

BUTTON_H = 30
BUTTON_GAP = 10
HINT_GAP = 24
SERVE_HINT = "Move the paddle to serve"


@functools.lru_cache(maxsize=None)
def get_font(size: int) -> pygame.font.Font:
    """Default font at ``size``, built once and reused every frame."""

    return pygame.font.Font(None, size)


def render_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], size: int = 28,
                color: Tuple[int, int, int] = WHITE, center: bool = False) -> pygame.Rect:
    """Draw text onto the surface and return the resulting rectangle."""

    font = get_font(size)
    text_surface = font.render(text, True, color)
    text_rect = text_surface.get_rect()
    if center:
        text_rect.center = pos
    else:
        text_rect.topleft = pos
    surface.blit(text_surface, text_rect)
    return text_rect


def mode_buttons() -> Dict[Mode, pygame.Rect]:
    """Screen rectangles of the four mode buttons, in menu order."""

    modes = list(Mode)
    width = (WIDTH - 2 * MARGIN - BUTTON_GAP * (len(modes) - 1)) // len(modes)
    return {
        mode: pygame.Rect(MARGIN + index * (width + BUTTON_GAP), 12, width, BUTTON_H)
        for index, mode in enumerate(modes)
    }


def draw_walls(surface: pygame.Surface, mode: Mode) -> None:
    """Outline the three closed edges; the open edge stays bare."""

    w, h = surface.get_size()
    t = WALL_THICKNESS
    edges = {
        Mode.OPEN_TOP: pygame.Rect(0, 0, w, t),
        Mode.OPEN_BOTTOM: pygame.Rect(0, h - t, w, t),
        Mode.OPEN_LEFT: pygame.Rect(0, 0, t, h),
        Mode.OPEN_RIGHT: pygame.Rect(w - t, 0, t, h),
    }
    for edge, rect in edges.items():
        if edge is not mode:
            pygame.draw.rect(surface, WALL, rect)


def draw_board(surface: pygame.Surface, state: GameState) -> None:
    """Clear the board and draw walls, paddle and ball."""

    surface.fill(WHITE)
    draw_walls(surface, state.mode)

    x, y, w, h = paddle_rect(state)
    pygame.draw.rect(surface, BLACK, pygame.Rect(round(x), round(y), round(w), round(h)))

    ball = state.ball
    pygame.draw.circle(surface, ORANGE, (round(ball.x), round(ball.y)), round(ball.radius))


def draw_hud(surface: pygame.Surface, state: GameState) -> Tuple[pygame.Rect, Optional[pygame.Rect]]:
    """Mode buttons plus the score, lives and timer readouts.

    Returns the readouts rectangle and the serve hint rectangle (``None`` unless
    the session is idle).  The hint is right-aligned but never starts before
    the end of the readouts, however long the numbers grow.
    """

    for mode, rect in mode_buttons().items():
        active = mode is state.mode
        pygame.draw.rect(surface, ACCENT if active else GREY, rect, border_radius=6)
        render_text(surface, mode.label, rect.center, size=24, color=BLACK if active else WHITE, center=True)

    session = state.session
    readouts = f"Score: {session.score}    Lives: {session.lives}    Time: {session.elapsed_seconds}s"
    readouts_rect = render_text(surface, readouts, (MARGIN, 56), size=30)
    if session.phase is not Phase.IDLE:
        return readouts_rect, None

    hint_width = get_font(24).size(SERVE_HINT)[0]
    left = max(readouts_rect.right + HINT_GAP, WIDTH - MARGIN - hint_width)
    hint_rect = render_text(surface, SERVE_HINT, (left, 58), size=24, color=ACCENT)
    return readouts_rect, hint_rect


def draw_frame(screen: pygame.Surface, state: GameState) -> None:
    """Render the whole window for ``state``."""

    screen.fill(WINDOW_BG)
    draw_hud(screen, state)
    board_rect = pygame.Rect(BOARD_ORIGIN, (int(state.board.width), int(state.board.height)))
    draw_board(screen.subsurface(board_rect), state)


def draw_lines(surface: pygame.Surface, lines: List[str], top: int, size: int = 28, spacing: int = 34) -> None:
    """Centre ``lines`` horizontally, one below the other starting at ``top``."""

    center_x = surface.get_width() // 2
    for index, line in enumerate(lines):
        render_text(surface, line, (center_x, top + index * spacing), size=size, center=True)
