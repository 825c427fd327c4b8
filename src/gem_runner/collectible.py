from enum import Enum

import pygame

from gem_runner.settings import TILE_SIZE, TOUCH_DISTANCE, GEM_POINTS, HEART_POINTS


class CollectibleKind(Enum):
    GEM = "gem"
    HEART = "heart"


POINTS = {
    CollectibleKind.GEM: GEM_POINTS,
    CollectibleKind.HEART: HEART_POINTS,
}


class Collectible(pygame.sprite.Sprite):
    """Pickup worth a fixed number of points. Removed from its groups when collected."""

    def __init__(self, pos, kind):
        super().__init__()
        self.x, self.y = pos
        self.kind = kind
        self.points = POINTS[kind]
        self.rect = pygame.Rect(0, 0, TILE_SIZE, TILE_SIZE)
        self.rect.center = pos

    def touching(self, x, y):
        return abs(self.x - x) < TOUCH_DISTANCE and abs(self.y - y) < TOUCH_DISTANCE
