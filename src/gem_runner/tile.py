import logging
from enum import Enum

from gem_runner.collectible import CollectibleKind
from gem_runner.settings import TILE_SIZE

logger = logging.getLogger(__name__)


class TileKind(Enum):
    GRASS = "grass"
    EARTH = "earth"
    EMPTY = "empty"


class LevelFormatError(ValueError):
    """Level text could not be read or parsed."""


SOLID_CHARS = {
    '"': TileKind.GRASS,
    '#': TileKind.EARTH,
}
PICKUP_CHARS = {
    'x': CollectibleKind.GEM,
    'h': CollectibleKind.HEART,
}
ENEMY_CHAR = 'm'


def cell_center(col, row):
    return col * TILE_SIZE + TILE_SIZE // 2, row * TILE_SIZE + TILE_SIZE // 2


class TileGrid:
    """
    Read-only tile map of a level.

    tiles[row][col] holds a TileKind. Spawn characters leave an EMPTY cell and
    record a spawn point at the cell centre in pickup_spawns / enemy_spawns.
    """

    def __init__(self, tiles, pickup_spawns=None, enemy_spawns=None):
        self.tiles = tiles
        self.height = len(tiles)
        self.width = len(tiles[0]) if tiles else 0
        self.pickup_spawns = list(pickup_spawns or [])
        self.enemy_spawns = list(enemy_spawns or [])

    @classmethod
    def from_lines(cls, lines):
        rows = [line.rstrip("\r\n") for line in lines]
        if not rows or not rows[0]:
            raise LevelFormatError("level is empty or its first line is blank")

        width = len(rows[0])
        tiles = []
        pickups = []
        enemies = []
        for r, text in enumerate(rows):
            # short rows are padded with empty space, long rows are cut to the first row's width
            text = text.ljust(width)[:width]
            row = []
            for c, ch in enumerate(text):
                if ch in SOLID_CHARS:
                    row.append(SOLID_CHARS[ch])
                    continue
                if ch in PICKUP_CHARS:
                    pickups.append((PICKUP_CHARS[ch], cell_center(c, r)))
                elif ch == ENEMY_CHAR:
                    enemies.append(cell_center(c, r))
                row.append(TileKind.EMPTY)
            tiles.append(row)

        grid = cls(tiles, pickups, enemies)
        logger.debug("parsed %dx%d level with %d pickups and %d enemies",
                     grid.width, grid.height, len(pickups), len(enemies))
        return grid

    @property
    def width_px(self):
        return self.width * TILE_SIZE

    @property
    def height_px(self):
        return self.height * TILE_SIZE

    def kind_at(self, col, row):
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"tile ({col}, {row}) outside {self.width}x{self.height} grid")
        return self.tiles[row][col]

    def is_solid(self, x, y):
        # Above the map is solid so nothing escapes upwards
        if y < 0:
            return True
        col = x // TILE_SIZE
        # Left and right edges behave like walls
        if col < 0 or col >= self.width:
            return True
        row = y // TILE_SIZE
        # Below the map is open; the level's kill plane takes over there
        if row >= self.height:
            return False
        return self.tiles[row][col] is not TileKind.EMPTY

    def draw(self, callback):
        """Call callback(kind, x, y) for every non-empty tile with its top-left pixel."""
        for r, row in enumerate(self.tiles):
            for c, kind in enumerate(row):
                if kind is not TileKind.EMPTY:
                    callback(kind, c * TILE_SIZE, r * TILE_SIZE)


def load_level(path):
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as exc:
        raise LevelFormatError(f"cannot read level file {path}: {exc}") from exc
    try:
        grid = TileGrid.from_lines(lines)
    except LevelFormatError as exc:
        raise LevelFormatError(f"{path}: {exc}") from exc
    logger.debug("loaded level %s", path)
    return grid
