import pygame

from gem_runner.settings import TILE_SIZE


def load_tiles(path, frame_w, frame_h):
    """Cut a sprite sheet into frames, left to right then top to bottom."""
    sheet = pygame.image.load(path).convert_alpha()
    frames = []
    sheet_w, sheet_h = sheet.get_size()
    for y in range(0, sheet_h - frame_h + 1, frame_h):
        for x in range(0, sheet_w - frame_w + 1, frame_w):
            frames.append(sheet.subsurface(pygame.Rect(x, y, frame_w, frame_h)))
    return frames


def try_load_tiles(path, frame_w, frame_h, count):
    """Like load_tiles but returns None when the file is missing or too small."""
    try:
        frames = load_tiles(str(path), frame_w, frame_h)
    except (pygame.error, FileNotFoundError):
        return None
    return frames if len(frames) >= count else None


def placeholder_tile(color, top_color=None):
    surf = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
    surf.fill(color)
    if top_color:
        pygame.draw.rect(surf, top_color, (0, 0, TILE_SIZE, TILE_SIZE // 5))
    return surf


def placeholder_gem(color):
    size = TILE_SIZE // 2
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    half = size // 2
    pygame.draw.polygon(surf, color, [(half, 0), (size - 1, half), (half, size - 1), (0, half)])
    return surf


def placeholder_player_frames():
    """Standing, two walk frames and jump, drawn facing left like the sprite sheet."""
    frames = []
    for leg_offset in (0, 6, -6, 0):
        surf = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
        pygame.draw.rect(surf, (200, 40, 50), (15, 8, 20, 26), border_radius=4)
        pygame.draw.circle(surf, (250, 210, 170), (22, 10), 7)
        pygame.draw.line(surf, (40, 40, 90), (20, 34), (20 + leg_offset, 49), 4)
        pygame.draw.line(surf, (40, 40, 90), (30, 34), (30 - leg_offset, 49), 4)
        frames.append(surf)
    jump = frames[3]
    pygame.draw.line(jump, (200, 40, 50), (15, 14), (6, 4), 4)
    return frames


def placeholder_enemy():
    surf = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
    pygame.draw.circle(surf, (230, 230, 220), (TILE_SIZE // 2, 18), 14)
    pygame.draw.circle(surf, (20, 20, 20), (19, 16), 4)
    pygame.draw.circle(surf, (20, 20, 20), (31, 16), 4)
    pygame.draw.rect(surf, (230, 230, 220), (17, 32, 16, 18))
    return surf
