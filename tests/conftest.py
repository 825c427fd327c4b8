import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from gem_runner.tile import TileGrid

W = 20

# 20x10 tiles: open air over a floor of earth on the bottom row.
FLAT = [" " * W] * 9 + ["#" * W]


def grid_from(rows):
    return TileGrid.from_lines([r + "\n" for r in rows])


def with_row(rows, index, text):
    """Copy of rows with row `index` replaced by text, padded to the full width."""
    rows = list(rows)
    rows[index] = text.ljust(W)
    return rows


@pytest.fixture
def flat_grid():
    return grid_from(FLAT)
