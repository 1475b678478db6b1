import logging
import sys

import pygame

from brickbreaker.game import GameEnv, MOVE_LEFT, MOVE_RIGHT, CONFIRM, QUIT
from brickbreaker.layout import TICK_INTERVAL_MS

KEY_BINDINGS = {
    pygame.K_LEFT: MOVE_LEFT,
    pygame.K_RIGHT: MOVE_RIGHT,
    pygame.K_RETURN: CONFIRM,
    pygame.K_KP_ENTER: CONFIRM,
    pygame.K_ESCAPE: QUIT,
}


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # For human play, we want a real fullscreen display.
    pygame.display.init()
    info = pygame.display.Info()
    size = (info.current_w, info.current_h)
    screen = pygame.display.set_mode(size, pygame.FULLSCREEN)
    pygame.display.set_caption("Brick Breaker")
    pygame.key.set_repeat(250, 30)

    env = GameEnv(screen_size=size)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in KEY_BINDINGS:
                if not env.apply_input(KEY_BINDINGS[event.key]):
                    running = False

        env.advance()
        screen.blit(env.render_frame(), (0, 0))
        pygame.display.flip()

        clock.tick(1000 // TICK_INTERVAL_MS)

    print(f"Final Score: {env.score}")
    env.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
