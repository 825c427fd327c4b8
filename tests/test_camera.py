"""Tests for camera clamping."""

from gem_runner.camera import Camera, clamp


def test_clamps_to_left_and_right_edges():
    camera = Camera(1000, 500)

    camera.follow(0, 0)
    assert camera.offset.x == 0

    camera.follow(990, 0)
    assert camera.offset.x == 1000 - 640


def test_centres_player_inside_level():
    camera = Camera(1000, 500)

    camera.follow(500, 250)

    assert camera.offset.x == 180
    assert camera.offset.y == 10


def test_vertical_clamp():
    camera = Camera(1000, 500)

    camera.follow(0, 10)
    assert camera.offset.y == 0
    camera.follow(0, 490)
    assert camera.offset.y == 500 - 480


def test_level_smaller_than_view_stays_at_origin():
    camera = Camera(300, 200)

    camera.follow(250, 180)

    assert (camera.offset.x, camera.offset.y) == (0, 0)


def test_clamp_with_inverted_bounds():
    assert clamp(50, 0, -100) == 0
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
