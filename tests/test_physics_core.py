import random

import pytest

from flappy_dragon.data_models import Player, Obstacle
from flappy_dragon.physics_core import PhysicsCore


@pytest.fixture
def core(fixed_rng_factory):
    return PhysicsCore(rng=fixed_rng_factory(gap_y=30, speed=1.5))


@pytest.mark.parametrize("velocity, expected", [
    (0.0, 0.8),
    (1.0, 1.8),
    (1.5, 2.0),
    (-2.7, -1.9),
    (2.0, 2.0),
    (5.0, 5.0),
])
def test_gravity_accelerates_up_to_fall_limit(core, velocity, expected):
    player = Player(velocity=velocity)
    core.apply_gravity_and_movement(player)
    assert player.velocity == pytest.approx(expected)


def test_gravity_moves_player_by_truncated_velocity(core):
    player = Player(x=5, y=25, velocity=1.5)
    core.apply_gravity_and_movement(player)
    # velocity 2.0 -> two cells down, one cell forward
    assert (player.x, player.y) == (6, 27)

    player = Player(x=5, y=25, velocity=-2.7)
    core.apply_gravity_and_movement(player)
    # -1.9 truncates toward zero
    assert player.y == 24


@pytest.mark.parametrize("y, velocity", [(0, -2.7), (1, -2.7), (0, -50.0)])
def test_gravity_never_leaves_player_above_the_top(core, y, velocity):
    player = Player(y=y, velocity=velocity)
    core.apply_gravity_and_movement(player)
    assert player.y == 0


@pytest.mark.parametrize("velocity", [-10.0, 0.0, 1.3, 2.0])
def test_flap_sets_fixed_impulse(core, velocity):
    player = Player(velocity=velocity)
    core.flap(player)
    assert player.velocity == -2.7


@pytest.mark.parametrize("score, size", [
    (0, 20), (4, 20), (5, 19), (25, 15), (50, 10), (90, 2), (1000, 2),
])
def test_gap_size_shrinks_with_score(core, score, size):
    assert core.new_obstacle(100, score).size == size


def test_new_obstacle_uses_injected_random_source(core):
    obstacle = core.new_obstacle(85, 0)
    assert obstacle.x == 85
    assert obstacle.gap_y == 30
    assert obstacle.x_velocity == pytest.approx(-1.5)

    faster = core.new_obstacle(85, 50)
    assert faster.x_velocity == pytest.approx(-6.5)


def test_new_obstacle_ranges_with_real_random():
    core = PhysicsCore(rng=random.Random(1234))
    for _ in range(200):
        easy = core.new_obstacle(0, 0)
        assert 10 <= easy.gap_y < 40
        assert easy.size == 20
        assert -3.0 < easy.x_velocity <= -1.0

        hard = core.new_obstacle(0, 50)
        assert hard.size == 10
        assert -8.0 < hard.x_velocity <= -6.0


def test_update_obstacle_moves_by_truncated_velocity(core):
    obstacle = Obstacle(x=50, gap_y=25, size=20, x_velocity=-2.9)
    core.update_obstacle(obstacle)
    assert obstacle.x == 48


@pytest.fixture
def wall():
    # gap band is rows [20, 30]
    return Obstacle(x=40, gap_y=25, size=10, x_velocity=-1.0)


@pytest.mark.parametrize("x", [38, 42, 0, 100])
@pytest.mark.parametrize("y", [0, 19, 25, 31, 49])
def test_no_collision_when_horizontally_apart(core, wall, x, y):
    assert not core.hit_obstacle(wall, Player(x=x, y=y))


@pytest.mark.parametrize("x", [39, 40, 41])
@pytest.mark.parametrize("y", [20, 25, 30])
def test_no_collision_inside_gap(core, wall, x, y):
    assert not core.hit_obstacle(wall, Player(x=x, y=y))


@pytest.mark.parametrize("x", [39, 40, 41])
@pytest.mark.parametrize("y", [19, 31, 0, 49])
def test_collision_outside_gap(core, wall, x, y):
    assert core.hit_obstacle(wall, Player(x=x, y=y))


def test_odd_gap_size_uses_floor_half(core):
    wall = Obstacle(x=40, gap_y=25, size=5, x_velocity=-1.0)
    assert not core.hit_obstacle(wall, Player(x=40, y=27))
    assert core.hit_obstacle(wall, Player(x=40, y=28))
    assert core.hit_obstacle(wall, Player(x=40, y=22))
