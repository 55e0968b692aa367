"""Screens and the main loop.

The game moves through three screens:

- the play screen, where the board, paddle and HUD live;
- the name entry screen, shown once the last life is lost;
- the leaderboard screen with the top five runs.

Each screen runs its own small event loop and returns to :func:`run` when it
is done, mirroring how the window flow is usually structured in small pygame
games.  Game rules stay in :class:`~bounce_ball.session.GameSession`.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import pygame

from bounce_ball.config import (
    ACCENT,
    BOARD_ORIGIN,
    FPS,
    GREY,
    HEIGHT,
    KEY_REPEAT,
    MAX_NAME_LENGTH,
    WHITE,
    WIDTH,
    WINDOW_BG,
)
from bounce_ball.controls import to_board
from bounce_ball.renderer import draw_frame, draw_lines, mode_buttons, render_text
from bounce_ball.session import GameSession
from bounce_ball.state import Mode

logger = logging.getLogger(__name__)

# Number keys select the modes in the same order as the HUD buttons.
MODE_KEYS: Dict[int, Mode] = dict(zip((pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4), Mode))


def handle_play_event(session: GameSession, event: pygame.event.Event) -> None:
    """Route one pygame event to the session."""

    if event.type == pygame.KEYDOWN:
        if event.key in MODE_KEYS:
            session.switch_mode(MODE_KEYS[event.key])
        else:
            session.press(event.key)
    elif event.type == pygame.MOUSEMOTION:
        position = to_board(event.pos, BOARD_ORIGIN, session.state)
        if position is not None:
            session.point(*position)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        for mode, rect in mode_buttons().items():
            if rect.collidepoint(event.pos):
                session.switch_mode(mode)
                break


def play_screen(screen: pygame.Surface, clock: pygame.time.Clock, session: GameSession) -> bool:
    """Run the game until the last life is lost.

    Returns
    -------
    bool
        ``True`` when the game ended, ``False`` if the player closed the window
        or pressed Escape.
    """

    clock.tick()
    while True:
        dt = clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            handle_play_event(session, event)

        session.tick(dt)

        draw_frame(screen, session.state)
        pygame.display.flip()

        if session.state.session.game_over:
            return True


def name_entry_screen(screen: pygame.Surface, clock: pygame.time.Clock, score: int, seconds: int) -> str | None:
    """Ask for the player's name after a game over.

    Enter confirms the typed name; Escape confirms an empty one, which the
    leaderboard records as the default player.  ``None`` means the window was
    closed.
    """

    name = ""
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return ""
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    return name
                if event.key == pygame.K_BACKSPACE:
                    name = name[:-1]
                elif event.unicode and event.unicode.isprintable() and len(name) < MAX_NAME_LENGTH:
                    name += event.unicode

        screen.fill(WINDOW_BG)
        render_text(screen, "Game Over!", (WIDTH // 2, 110), size=64, color=ACCENT, center=True)
        render_text(screen, f"Score: {score}    Time: {seconds}s", (WIDTH // 2, 180), size=32, center=True)
        render_text(screen, "Enter your name:", (WIDTH // 2, 260), size=32, center=True)

        input_box = pygame.Rect(WIDTH // 2 - 150, 290, 300, 50)
        pygame.draw.rect(screen, WHITE, input_box, 2)
        render_text(screen, name or "Guest", (input_box.x + 10, input_box.y + 12), size=32,
                    color=WHITE if name else GREY)

        render_text(screen, "ENTER to save, ESC to save as Guest", (WIDTH // 2, HEIGHT - 60), size=26, center=True)

        pygame.display.flip()
        clock.tick(FPS)


def leaderboard_screen(screen: pygame.Surface, clock: pygame.time.Clock, rankings: List[str]) -> bool:
    """Show the top runs; return ``True`` to play again."""

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    return True
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                return True

        screen.fill(WINDOW_BG)
        render_text(screen, "Leaderboard", (WIDTH // 2, 100), size=56, color=ACCENT, center=True)
        if rankings:
            draw_lines(screen, rankings, top=180)
        else:
            render_text(screen, "No records yet", (WIDTH // 2, 180), size=28, center=True)
        render_text(screen, "SPACE or ENTER to play again, ESC to quit", (WIDTH // 2, HEIGHT - 60), size=26,
                    center=True)

        pygame.display.flip()
        clock.tick(FPS)


def run(session: GameSession | None = None) -> None:
    """Open the window and cycle through the screens until the player quits."""

    pygame.init()
    pygame.display.set_caption("Bounce Ball")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    pygame.key.set_repeat(*KEY_REPEAT)

    session = session or GameSession()
    logger.info("Leaderboard file: %s", session.store.path)

    while True:
        if not play_screen(screen, clock, session):
            break

        final = session.state.session
        name = name_entry_screen(screen, clock, final.score, final.elapsed_seconds)
        if name is None:
            # Closing the window still keeps the run on the board.
            session.finish_game("")
            break

        rankings = session.finish_game(name)
        if not leaderboard_screen(screen, clock, rankings):
            break

    pygame.quit()
