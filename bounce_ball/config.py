"""Constants shared across the game.

The board is a 600x500 playfield with a paddle one third of the board long
and a 15 unit ball.  Layout constants for the HUD strip that
sits above the board live here too so the renderer and the input mapping agree
on where the board starts inside the window.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

# --------------------------------------------------------------------------------------
# Board geometry
# --------------------------------------------------------------------------------------
BOARD_W, BOARD_H = 600, 500
BALL_RADIUS = 15
PADDLE_THICKNESS = 10

# Distance the paddle travels for a single arrow key press (or key repeat).
PADDLE_STEP = 20
# Pointer movements smaller than this are treated as jitter and ignored.
POINTER_DEADZONE = 1

# Key repeat delay/interval in milliseconds, roughly matching OS key repeat.
KEY_REPEAT = (200, 30)

# --------------------------------------------------------------------------------------
# Session rules
# --------------------------------------------------------------------------------------
START_LIVES = 5
FPS = 60

# --------------------------------------------------------------------------------------
# Window layout
# --------------------------------------------------------------------------------------
HUD_H = 90
MARGIN = 20
WIDTH = BOARD_W + 2 * MARGIN
HEIGHT = HUD_H + BOARD_H + MARGIN
BOARD_ORIGIN: Tuple[int, int] = (MARGIN, HUD_H)

# --------------------------------------------------------------------------------------
# Leaderboard storage
# --------------------------------------------------------------------------------------
LEADERBOARD_KEY = "BounceBallRecord"
LEADERBOARD_DIR = os.path.expanduser("~/.bounce-ball")
LEADERBOARD_FILE = os.path.join(LEADERBOARD_DIR, f"{LEADERBOARD_KEY}.json")
LEADERBOARD_SIZE = 5
DEFAULT_PLAYER = "Guest"
MAX_NAME_LENGTH = 12

# --------------------------------------------------------------------------------------
# Colour palette
# --------------------------------------------------------------------------------------
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
ORANGE = (255, 165, 0)
GREY = (70, 70, 80)
WINDOW_BG = (24, 24, 32)
WALL = (40, 40, 40)
ACCENT = (255, 190, 70)
WALL_THICKNESS = 4


@dataclass(frozen=True)
class Board:
    """Playfield dimensions plus the paddle sizes derived from them."""

    width: float = BOARD_W
    height: float = BOARD_H

    @property
    def horizontal_paddle_length(self) -> float:
        return self.width / 3

    @property
    def vertical_paddle_length(self) -> float:
        return self.height / 3
