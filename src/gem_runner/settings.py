import os
from pathlib import Path

WIDTH, HEIGHT = 640, 480
TITLE = "Gem Runner"
FPS = 60

TILE_SIZE = 50
# Camera keeps the player at the centre of the view until a level edge is reached
CAMERA_HALF_W = WIDTH // 2
CAMERA_HALF_H = HEIGHT // 2

GRAVITY = 1
JUMP_VELOCITY = -20
# Horizontal pixels per frame while a direction key is held
PLAYER_SPEED = 5
# Distance from the feet to the head probe
PLAYER_HEIGHT = 45
SPAWN = (400, 100)
START_LIVES = 5

# Half the sprite size; closer than this on both axes counts as touching
TOUCH_DISTANCE = 50
GEM_POINTS = 3
HEART_POINTS = 15

# World stays frozen this long (seconds) after the player dies
DEATH_PAUSE = 2.0
# Falling this far below the bottom of the level kills the player
KILL_PLANE_MARGIN = 200

WALK_FRAME_MS = 175

# levels and media ship inside the package
PACKAGE_DIR = Path(__file__).resolve().parent
LEVELS_DIR = Path(os.getenv("GEM_RUNNER_LEVELS", PACKAGE_DIR / "levels"))
MEDIA_DIR = PACKAGE_DIR / "media"

LOG_LEVEL = os.getenv("GEM_RUNNER_LOG_LEVEL", "INFO")
