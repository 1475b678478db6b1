import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from brickbreaker.game import GameEnv


@pytest.fixture
def env():
    # 1000x1000 keeps the layout arithmetic round: 20px ball, 142px paddle at y=900
    game = GameEnv(screen_size=(1000, 1000))
    yield game
    game.close()


@pytest.fixture
def small_env():
    game = GameEnv(screen_size=(1000, 1000), brick_rows=2, brick_cols=2)
    yield game
    game.close()
