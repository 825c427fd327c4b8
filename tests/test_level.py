"""Tests for pickups, enemy contact and the death freeze."""

from conftest import FLAT, grid_from, with_row
from gem_runner.level import Level
from gem_runner.settings import DEATH_PAUSE, START_LIVES

GROUND_Y = 449
SPAWN = (700, GROUND_Y)


def test_gem_collected_within_range():
    # gem centre at (175, 425)
    level = Level(grid_from(with_row(FLAT, 8, "   x")), spawn=SPAWN)
    level.player.x = 175 + 49

    level.update(1 / 60, 0)

    assert level.player.score == 3
    assert len(level.collectibles) == 0
    assert level.collected_all()


def test_gem_out_of_range_stays():
    level = Level(grid_from(with_row(FLAT, 8, "   x")), spawn=SPAWN)
    level.player.x = 175 + 50

    level.update(1 / 60, 0)

    assert level.player.score == 0
    assert len(level.collectibles) == 1


def test_several_pickups_collected_in_one_frame():
    level = Level(grid_from(with_row(FLAT, 8, "   xh")), spawn=SPAWN)
    level.player.x = 200

    caught = level.try_collect()

    assert len(caught) == 2
    assert level.player.score == 3 + 15
    assert level.collected_all()


def test_enemy_contact_costs_one_life_even_with_two_enemies():
    # enemies at (175, 425) and (225, 425)
    level = Level(grid_from(with_row(FLAT, 8, "   mm")), spawn=SPAWN)
    level.player.x = 200
    assert level.touching_enemy()

    level.update(1 / 60, 0)

    assert level.player.lives == START_LIVES - 1
    assert (level.player.x, level.player.y) == SPAWN
    assert level.player.vy == 0
    assert len(level.enemies) == 2


def test_world_frozen_after_death():
    level = Level(grid_from(with_row(FLAT, 8, "   m")), spawn=SPAWN)
    level.player.x = 180
    level.update(1 / 60, 0)
    assert level.frozen

    level.update(DEATH_PAUSE / 2, 5)
    assert not level.try_to_jump()
    assert (level.player.x, level.player.y) == SPAWN

    level.update(DEATH_PAUSE / 2, 5)
    assert not level.frozen
    assert level.player.x == SPAWN[0]

    level.update(1 / 60, 5)
    assert level.player.x == SPAWN[0] + 5


def test_falling_out_of_level_kills():
    rows = list(FLAT)
    rows[9] = "#" * 10 + "  " + "#" * 8
    level = Level(grid_from(rows), spawn=(525, 100))

    for _ in range(60):
        level.update(1 / 60, 0)
        if level.player.lives < START_LIVES:
            break

    assert level.player.lives == START_LIVES - 1
    assert (level.player.x, level.player.y) == (525, 100)


def test_camera_follows_player():
    level = Level(grid_from(FLAT), spawn=(100, GROUND_Y))
    level.player.x = 990

    level.update(1 / 60, 0)

    assert level.camera.offset.x == 1000 - 640
    assert level.camera.offset.y == 500 - 480


def test_carried_player_keeps_score_and_moves_to_new_grid():
    first = Level(grid_from(FLAT), spawn=SPAWN)
    first.player.score = 12
    second_grid = grid_from(FLAT)

    second = Level(second_grid, first.player, spawn=(100, GROUND_Y))

    assert second.player is first.player
    assert second.player.grid is second_grid
    assert second.player.score == 12
    assert (second.player.x, second.player.y) == (100, GROUND_Y)


def test_death_is_logged(caplog):
    level = Level(grid_from(with_row(FLAT, 8, "   m")), spawn=SPAWN)
    level.player.x = 180

    with caplog.at_level("INFO", logger="gem_runner.level"):
        level.update(1 / 60, 0)

    assert "player killed by enemy" in caplog.text
