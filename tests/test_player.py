import math

import pytest

from cubcaster.geometry import PLAYER_LOOK, PLAYER_SPEED, Vector
from cubcaster.map_check import MapError
from cubcaster.player import Player, find_start


def box(marker="N"):
    return ["11111", "10001", "10" + marker + "01", "10001", "11111"]


def test_find_start_returns_first_marker():
    assert find_start(box("W")) == (2, 2, "W")


def test_find_start_without_marker_raises():
    with pytest.raises(MapError):
        find_start(["111", "101", "111"])


def test_spawn_places_player_in_cell_centre_and_clears_marker():
    rows = box("N")
    player = Player.spawn(rows, 10)
    assert player.pos == Vector(2.5, 2.5)
    assert rows[2] == "10001"
    assert player.size == 5
    assert player.angle == pytest.approx(math.pi * 1.5)
    assert player.show_map is True


@pytest.mark.parametrize(
    "marker, angle",
    [("N", math.pi / 2 * 3), ("S", math.pi / 2), ("E", 0.0), ("W", math.pi)],
)
def test_spawn_angle_per_direction(marker, angle):
    player = Player.spawn(box(marker), 10)
    assert player.angle == pytest.approx(angle)
    assert math.hypot(player.delta.x, player.delta.y) == pytest.approx(PLAYER_SPEED)


def test_move_forward_then_back_returns_to_start():
    player = Player.spawn(box("S"), 10)
    start = player.pos
    player.m_up = True
    player.move()
    assert player.pos.y == pytest.approx(start.y + PLAYER_SPEED)
    player.m_up = False
    player.m_down = True
    player.move()
    assert player.pos.x == pytest.approx(start.x)
    assert player.pos.y == pytest.approx(start.y)


def test_opposite_keys_cancel():
    player = Player.spawn(box("E"), 10)
    start = player.pos
    player.m_up = player.m_down = True
    player.m_left = player.m_right = True
    player.move()
    assert player.pos == start


def test_strafe_left_and_right_are_opposite():
    player = Player.spawn(box("E"), 10)
    start = player.pos
    player.m_right = True
    player.move()
    moved = player.pos
    assert moved.y == pytest.approx(start.y + PLAYER_SPEED)
    player.m_right = False
    player.m_left = True
    player.move()
    assert player.pos.x == pytest.approx(start.x)
    assert player.pos.y == pytest.approx(start.y)


def test_collision_keeps_player_out_of_walls():
    rows = ["11111", "1E001", "11111"]
    player = Player.spawn(rows, 10)
    player.m_up = True
    for _ in range(100):
        player.move_with_collision(rows)
    assert 3.0 < player.pos.x < 4.0
    assert rows[int(player.pos.y)][int(player.pos.x)] == "0"
    assert player.pos.y == pytest.approx(1.5)


def test_collision_allows_free_movement():
    rows = box("E")
    player = Player.spawn(rows, 10)
    player.m_up = True
    player.move_with_collision(rows)
    assert player.pos.x == pytest.approx(2.5 + PLAYER_SPEED)


def test_look_right_turns_and_refreshes_delta():
    player = Player.spawn(box("S"), 10)
    player.l_right = True
    player.look()
    assert player.angle == pytest.approx(math.pi / 2 + PLAYER_LOOK)
    assert player.delta.x == pytest.approx(math.cos(player.angle) * PLAYER_SPEED)


def test_look_left_wraps_below_zero():
    player = Player.spawn(box("E"), 10)
    player.l_left = True
    player.look()
    assert player.angle == pytest.approx(2 * math.pi - PLAYER_LOOK)


def test_look_without_turning_keeps_delta_unless_refreshed():
    player = Player.spawn(box("E"), 10)
    old_delta = player.delta
    player.angle = math.pi
    player.look(False)
    assert player.delta == old_delta
    player.look(True)
    assert player.delta.x == pytest.approx(-PLAYER_SPEED)


def test_within_bounds():
    rows = box("N")
    player = Player.spawn(rows, 10)
    assert player.within_bounds(rows) is True
    player.pos = Vector(0.5, 0.5)
    assert player.within_bounds(rows) is False
    player.pos = Vector(-0.5, 2.5)
    assert player.within_bounds(rows) is False
    player.pos = Vector(2.5, 9.5)
    assert player.within_bounds(rows) is False