import random

import pygame

from gem_runner.settings import WIDTH, HEIGHT


class StarfieldBackground:
    """
    Space sky behind the level.

    Stars are generated once from a seed onto a screen-sized surface which is
    tiled horizontally and scrolled at a fraction of the camera speed.
    """
    def __init__(self, seed=7, star_count=120, speed=0.2):
        rnd = random.Random(seed)
        self.speed = speed
        self.image = pygame.Surface((WIDTH, HEIGHT))
        self.image.fill((10, 12, 30))
        for _ in range(star_count):
            x, y = rnd.randrange(WIDTH), rnd.randrange(HEIGHT)
            shade = rnd.randint(120, 255)
            self.image.set_at((x, y), (shade, shade, shade))

    def draw(self, surf, camera_x: float):
        iw = self.image.get_width()
        offset_x = -camera_x * self.speed
        x = int(offset_x) % iw - iw
        while x < WIDTH:
            surf.blit(self.image, (x, 0))
            x += iw
