import os

# Render off-screen so the tests run without a display or sound card.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from bounce_ball.leaderboard import LeaderboardStore  # noqa: E402
from bounce_ball.session import GameSession  # noqa: E402


@pytest.fixture
def store(tmp_path):
    return LeaderboardStore(str(tmp_path / "BounceBallRecord.json"))


@pytest.fixture
def session(store):
    return GameSession(store=store)
