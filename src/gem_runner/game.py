import logging

from gem_runner.level import Level
from gem_runner.settings import SPAWN

logger = logging.getLogger(__name__)

STATE_PLAYING = "playing"
STATE_LOST = "lost"
STATE_VICTORY = "victory"


class Game:
    """
    Frame orchestration over a pack of levels.

    Input is handled first (jump is a discrete event, horizontal intent is held),
    then the level update. Collecting every pickup moves on to the next level;
    running out of lives ends the game.
    """

    def __init__(self, grids, spawn=SPAWN):
        self.grids = list(grids)
        if not self.grids:
            raise ValueError("Game needs at least one level")
        self.spawn = spawn
        self.state = STATE_PLAYING
        self.level_index = 0
        self.level = Level(self.grids[0], spawn=spawn)

    @property
    def player(self):
        return self.level.player

    def next_level(self):
        self.level_index += 1
        if self.level_index >= len(self.grids):
            self.state = STATE_VICTORY
            logger.info("all %d levels cleared with score %d", len(self.grids), self.player.score)
            return
        self.level = Level(self.grids[self.level_index], self.player, self.spawn)
        logger.info("entering level %d/%d", self.level_index + 1, len(self.grids))

    def update(self, dt, move_x, jump_pressed=False):
        if self.state != STATE_PLAYING:
            return

        if jump_pressed:
            self.level.try_to_jump()
        self.level.update(dt, move_x)

        if self.player.lives < 0:
            self.state = STATE_LOST
            logger.info("game over with score %d", self.player.score)
        # a death freeze plays out on the current level before moving on
        elif self.level.collected_all() and not self.level.frozen:
            self.next_level()
