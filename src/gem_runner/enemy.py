import pygame

from gem_runner.settings import TILE_SIZE, TOUCH_DISTANCE


class Enemy(pygame.sprite.Sprite):
    """Static monster. Touching it costs the player a life."""

    def __init__(self, pos):
        super().__init__()
        self.x, self.y = pos
        self.rect = pygame.Rect(0, 0, TILE_SIZE, TILE_SIZE)
        self.rect.center = pos

    def touching(self, x, y):
        return abs(self.x - x) < TOUCH_DISTANCE and abs(self.y - y) < TOUCH_DISTANCE
