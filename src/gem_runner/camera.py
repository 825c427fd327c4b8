import pygame

from gem_runner.settings import WIDTH, HEIGHT, CAMERA_HALF_W, CAMERA_HALF_H


def clamp(value, low, high):
    # a level smaller than the view has high < low; pin to low then
    return max(low, min(value, max(low, high)))


class Camera:
    """Top-left corner of the view, centred on the player and kept inside the level."""

    def __init__(self, level_width_px, level_height_px):
        self.level_width_px = level_width_px
        self.level_height_px = level_height_px
        self.offset = pygame.Vector2(0, 0)

    def follow(self, x, y):
        self.offset.x = clamp(x - CAMERA_HALF_W, 0, self.level_width_px - WIDTH)
        self.offset.y = clamp(y - CAMERA_HALF_H, 0, self.level_height_px - HEIGHT)
