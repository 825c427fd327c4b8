from enum import Enum

from gem_runner.settings import (GRAVITY, JUMP_VELOCITY, PLAYER_HEIGHT, SPAWN, START_LIVES,
                      WALK_FRAME_MS)


class AnimState(Enum):
    STANDING = "standing"
    WALK1 = "walk1"
    WALK2 = "walk2"
    JUMP = "jump"


class Player:
    """
    Player kinematics on a TileGrid.

    x is the horizontal centre of the hitbox and y the pixel under the feet.
    Movement is stepped one pixel at a time so the player never tunnels into
    a tile, whatever the speed.
    """

    def __init__(self, grid, spawn=SPAWN, lives=START_LIVES):
        self.grid = grid
        self.spawn = spawn
        self.x, self.y = spawn
        self.vy = 0
        self.facing = -1  # -1 left, 1 right
        self.score = 0
        self.lives = lives
        self.anim_state = AnimState.STANDING
        self.anim_time = 0.0

    def would_fit(self, dx, dy):
        # probe at the feet and at the head
        x, y = self.x + dx, self.y + dy
        return not self.grid.is_solid(x, y) and not self.grid.is_solid(x, y - PLAYER_HEIGHT)

    def is_grounded(self):
        return self.grid.is_solid(self.x, self.y + 1)

    def _set_anim_state(self, move_x, dt):
        self.anim_time += dt
        if move_x == 0:
            self.anim_state = AnimState.STANDING
        elif int(self.anim_time * 1000 / WALK_FRAME_MS) % 2 == 0:
            self.anim_state = AnimState.WALK1
        else:
            self.anim_state = AnimState.WALK2
        if self.vy < 0:
            self.anim_state = AnimState.JUMP

    def horizontal_movement(self, move_x):
        if move_x == 0:
            return
        step = 1 if move_x > 0 else -1
        self.facing = step
        for _ in range(abs(move_x)):
            if not self.would_fit(step, 0):
                break
            self.x += step

    def apply_gravity(self):
        # no terminal velocity: the fall keeps accelerating
        self.vy += GRAVITY

    def vertical_movement(self):
        if self.vy == 0:
            return
        step = 1 if self.vy > 0 else -1
        for _ in range(abs(self.vy)):
            if not self.would_fit(0, step):
                self.vy = 0
                break
            self.y += step

    def update(self, move_x, dt=0.0):
        self._set_anim_state(move_x, dt)
        self.horizontal_movement(move_x)
        self.apply_gravity()
        self.vertical_movement()

    def try_to_jump(self):
        if self.is_grounded():
            self.vy = JUMP_VELOCITY
            return True
        return False

    def collect(self, collectible):
        self.score += collectible.points

    def respawn(self):
        self.x, self.y = self.spawn
        self.vy = 0

    def die(self):
        self.lives -= 1
        self.respawn()
