import logging
import math
import sys

import pygame

from gem_runner.settings import (WIDTH, HEIGHT, TITLE, FPS, TILE_SIZE, PLAYER_SPEED, LEVELS_DIR,
                      MEDIA_DIR, LOG_LEVEL)
from gem_runner.tile import TileKind, LevelFormatError, load_level
from gem_runner.collectible import CollectibleKind
from gem_runner.player import AnimState
from gem_runner.game import Game, STATE_PLAYING, STATE_LOST, STATE_VICTORY
from gem_runner.background import StarfieldBackground
from gem_runner.utils import (try_load_tiles, placeholder_tile, placeholder_gem,
                   placeholder_player_frames, placeholder_enemy)

logger = logging.getLogger(__name__)

HUD_COLOR = (255, 255, 0)
ANIM_ORDER = [AnimState.STANDING, AnimState.WALK1, AnimState.WALK2, AnimState.JUMP]


def load_assets():
    """Sprites keyed by the semantic kinds the game exposes. Missing media falls back to drawn shapes."""
    assets = {}

    frames = try_load_tiles(MEDIA_DIR / "player.png", TILE_SIZE, TILE_SIZE, len(ANIM_ORDER))
    if frames is None:
        frames = placeholder_player_frames()
    assets['player'] = dict(zip(ANIM_ORDER, frames))

    tileset = try_load_tiles(MEDIA_DIR / "tileset.png", TILE_SIZE, TILE_SIZE, 2)
    if tileset is None:
        tileset = [placeholder_tile((120, 80, 40), (70, 170, 60)), placeholder_tile((120, 80, 40))]
    assets['tiles'] = {TileKind.GRASS: tileset[0], TileKind.EARTH: tileset[1]}

    assets['collectibles'] = {
        CollectibleKind.GEM: placeholder_gem((200, 30, 60)),
        CollectibleKind.HEART: placeholder_gem((250, 120, 200)),
    }
    assets['enemy'] = placeholder_enemy()
    return assets


def load_levels(levels_dir):
    paths = sorted(levels_dir.glob("*.txt"))
    if not paths:
        raise LevelFormatError(f"no level files found in {levels_dir}")
    return [load_level(p) for p in paths]


def read_move_x(keys):
    move_x = 0
    if keys[pygame.K_LEFT]:
        move_x -= PLAYER_SPEED
    if keys[pygame.K_RIGHT]:
        move_x += PLAYER_SPEED
    return move_x


def draw_centered_text(screen, font, text, y, color=(240, 240, 240)):
    surf = font.render(text, True, color)
    screen.blit(surf, (WIDTH // 2 - surf.get_width() // 2, y))


def draw_level(screen, level, assets, sky, ticks):
    cam_x, cam_y = level.camera.offset
    sky.draw(screen, cam_x)

    def draw_tile(kind, x, y):
        screen.blit(assets['tiles'][kind], (x - cam_x, y - cam_y))

    level.grid.draw(draw_tile)

    for c in level.collectibles:
        # slow wobble, hearts turn the other way
        angle = 25 * math.sin(ticks / 133.7)
        if c.kind is CollectibleKind.HEART:
            angle = -angle
        img = pygame.transform.rotate(assets['collectibles'][c.kind], -angle)
        screen.blit(img, img.get_rect(center=(c.x - cam_x, c.y - cam_y)))

    for e in level.enemies:
        screen.blit(assets['enemy'], (e.rect.x - cam_x, e.rect.y - cam_y))

    player = level.player
    img = assets['player'][player.anim_state]
    # sprite sheet faces left
    if player.facing == 1:
        img = pygame.transform.flip(img, True, False)
    screen.blit(img, (player.x - TILE_SIZE // 2 - cam_x, player.y - 49 - cam_y))


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        grids = load_levels(LEVELS_DIR)
    except LevelFormatError as exc:
        logger.error("cannot start: %s", exc)
        sys.exit(1)
    logger.info("loaded %d levels from %s", len(grids), LEVELS_DIR)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 28)
    big = pygame.font.SysFont(None, 48)

    assets = load_assets()
    sky = StarfieldBackground()
    game = Game(grids)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        jump_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    jump_pressed = True
                elif event.key == pygame.K_RETURN and game.state != STATE_PLAYING:
                    game = Game(grids)

        game.update(dt, read_move_x(pygame.key.get_pressed()), jump_pressed)

        draw_level(screen, game.level, assets, sky, pygame.time.get_ticks())
        screen.blit(font.render(f"Score: {game.player.score}", True, HUD_COLOR), (10, 10))
        screen.blit(font.render(f"Lives: {max(game.player.lives, 0)}", True, HUD_COLOR), (500, 10))

        if game.state == STATE_LOST:
            draw_centered_text(screen, big, "Game Over", HEIGHT // 2 - 40)
            draw_centered_text(screen, font, "ENTER = Retry  •  ESC = Quit", HEIGHT // 2 + 10)
        elif game.state == STATE_VICTORY:
            draw_centered_text(screen, big, "You Win!", HEIGHT // 2 - 40)
            draw_centered_text(screen, font, "ENTER = Play again  •  ESC = Quit", HEIGHT // 2 + 10)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
