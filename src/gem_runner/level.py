import logging

import pygame

from gem_runner.collectible import Collectible
from gem_runner.enemy import Enemy
from gem_runner.player import Player
from gem_runner.camera import Camera
from gem_runner.settings import SPAWN, DEATH_PAUSE, KILL_PLANE_MARGIN

logger = logging.getLogger(__name__)


class Level:
    """
    One loaded level: the tile grid plus everything living on it.

    Each frame runs player motion, then pickups, then enemy contact, then the
    camera. After a death the world stays frozen for DEATH_PAUSE seconds.
    """

    def __init__(self, grid, player=None, spawn=SPAWN):
        self.grid = grid
        self.collectibles = pygame.sprite.Group()
        self.enemies = pygame.sprite.Group()
        self.camera = Camera(grid.width_px, grid.height_px)
        self.freeze_timer = 0.0
        self.kill_plane_y = grid.height_px + KILL_PLANE_MARGIN

        if player is None:
            player = Player(grid, spawn)
        else:
            # player carried over from a previous level keeps score and lives
            player.grid = grid
            player.spawn = spawn
            player.respawn()
        self.player = player

        self.build()
        self.camera.follow(self.player.x, self.player.y)

    def build(self):
        self.collectibles.empty()
        self.enemies.empty()
        for kind, pos in self.grid.pickup_spawns:
            self.collectibles.add(Collectible(pos, kind))
        for pos in self.grid.enemy_spawns:
            self.enemies.add(Enemy(pos))

    @property
    def frozen(self):
        return self.freeze_timer > 0

    def try_to_jump(self):
        if self.frozen:
            return False
        return self.player.try_to_jump()

    def try_collect(self):
        caught = [c for c in self.collectibles if c.touching(self.player.x, self.player.y)]
        for c in caught:
            self.player.collect(c)
            c.kill()
            logger.debug("collected %s worth %d at (%d, %d)", c.kind.value, c.points, c.x, c.y)
        return caught

    def touching_enemy(self):
        return any(e.touching(self.player.x, self.player.y) for e in self.enemies)

    def fell_out(self):
        return self.player.y > self.kill_plane_y

    def kill_player(self, cause):
        self.player.die()
        self.freeze_timer = DEATH_PAUSE
        logger.info("player killed by %s, %d lives left", cause, self.player.lives)

    def update(self, dt, move_x):
        if self.frozen:
            self.freeze_timer = max(0.0, self.freeze_timer - dt)
            return

        self.player.update(move_x, dt)
        self.try_collect()

        # at most one death per frame
        if self.touching_enemy():
            self.kill_player("enemy")
        elif self.fell_out():
            self.kill_player("fall")

        self.camera.follow(self.player.x, self.player.y)

    def collected_all(self):
        return len(self.collectibles) == 0
