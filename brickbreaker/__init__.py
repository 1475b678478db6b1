"""Single-screen brick breaking game built on pygame and gymnasium."""

from brickbreaker.bricks import BrickGrid, Collision
from brickbreaker.game import GameEnv
from brickbreaker.layout import Layout, make_layout

__all__ = ["BrickGrid", "Collision", "GameEnv", "Layout", "make_layout"]
