import logging
from collections import namedtuple

import numpy as np
import pygame

logger = logging.getLogger(__name__)

# --- Brick kinds ---
EMPTY = 0
TYPE1 = 1
TYPE2 = 2

BRICK_POINTS = {TYPE1: 5, TYPE2: 20}
BRICK_COLORS = {
    TYPE1: (30, 144, 255),
    TYPE2: (255, 105, 180),
}
COLOR_BRICK_BORDER = (0, 0, 0)
BRICK_BORDER_WIDTH = 2

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

Collision = namedtuple("Collision", ["row", "col", "kind", "points", "axis"])


class BrickGrid:
    """Checkerboard of two brick kinds laid out from a ``Layout``.

    The grid only ever empties cells; the caller applies the returned
    ``Collision`` to its own score, brick count and ball direction.
    """

    def __init__(self, layout):
        self.layout = layout
        rows, cols = np.indices((layout.rows, layout.cols))
        checker = (rows % 2 == 0) ^ (cols % 2 == 0)
        self.cells = np.where(checker, TYPE2, TYPE1).astype(np.int8)

    @property
    def shape(self):
        return self.cells.shape

    def kind_at(self, row, col):
        return int(self.cells[row, col])

    def remaining(self):
        return int(np.count_nonzero(self.cells))

    def brick_rect(self, row, col):
        lo = self.layout
        x = int(col * lo.brick_width + lo.brick_left)
        y = int(row * lo.brick_height + lo.brick_top)
        return pygame.Rect(x, y, lo.brick_width, lo.brick_height)

    def render(self, surface):
        for row, col in zip(*np.nonzero(self.cells)):
            rect = self.brick_rect(row, col)
            pygame.draw.rect(surface, BRICK_COLORS[self.kind_at(row, col)], rect)
            pygame.draw.rect(surface, COLOR_BRICK_BORDER, rect, BRICK_BORDER_WIDTH)

    def resolve_collision(self, ball_x, ball_y, ball_size):
        """Destroy the first brick (row-major) overlapping the ball's box.

        Returns ``None`` if nothing was hit. At most one brick is resolved
        per call even when the ball overlaps several.
        """
        ball_rect = pygame.Rect(ball_x, ball_y, ball_size, ball_size)
        n_rows, n_cols = self.cells.shape
        for row in range(n_rows):
            for col in range(n_cols):
                kind = self.kind_at(row, col)
                if kind == EMPTY:
                    continue
                brick = self.brick_rect(row, col)
                if not ball_rect.colliderect(brick):
                    continue

                self.cells[row, col] = EMPTY
                # Ball edge outside the brick's span: side hit
                if ball_x + ball_size - 1 <= brick.x or ball_x + 1 >= brick.x + brick.width:
                    axis = HORIZONTAL
                else:
                    axis = VERTICAL
                logger.debug("Brick (%d, %d) destroyed, %s bounce", row, col, axis)
                return Collision(row, col, kind, BRICK_POINTS[kind], axis)
        return None
