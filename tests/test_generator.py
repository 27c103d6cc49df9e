import math

import numpy as np
import pytest

from galaxy.generator import generate_galaxy, split_evenly
from galaxy.physics import SOFTENING

CENTER = (400.0, 300.0)


def galaxy(**overrides):
    params = dict(
        center=CENTER,
        total_count=100,
        arm_count=2,
        arm_tightness=10.0,
        arm_spread=0.1,
        bulge_fraction=0.12,
        max_radius=200.0,
        mass=10.0,
        G=1.0,
        sprite_count=0,
        rng=np.random.default_rng(7),
    )
    params.update(overrides)
    return generate_galaxy(**params)


def radius(body):
    return math.hypot(body.position[0] - CENTER[0], body.position[1] - CENTER[1])


def test_split_evenly_gives_remainder_to_first_arms():
    assert split_evenly(10, 3) == [4, 3, 3]
    assert split_evenly(9, 3) == [3, 3, 3]
    assert split_evenly(2, 4) == [1, 1, 0, 0]


def test_bulge_takes_its_fraction():
    # A max radius below the arm scale skips every arm star, leaving the bulge
    bodies = galaxy(max_radius=5.0)
    assert len(bodies) == 12
    assert all(radius(b) <= 0.2 * 5.0 + 1e-9 for b in bodies)


def test_length_never_exceeds_total():
    for max_radius in (20.0, 100.0, 1e3, 1e6):
        assert len(galaxy(max_radius=max_radius)) <= 100


def test_length_non_decreasing_in_max_radius():
    lengths = [len(galaxy(max_radius=r)) for r in (5.0, 15.0, 40.0, 100.0, 300.0, 1e4)]
    assert lengths == sorted(lengths)
    assert lengths[-1] == 100


def test_bulge_and_arm_masses():
    bodies = galaxy(max_radius=1e6)
    bulge, arms = bodies[:12], bodies[12:]
    assert all(10.0 <= b.mass < 20.0 for b in bulge)
    assert all(8.0 <= b.mass < 12.0 for b in arms)


def test_arm_stars_orbit_counter_clockwise():
    bodies = galaxy(bulge_fraction=0.0, arm_spread=0.0, max_radius=1e4)
    for b in bodies:
        rx, ry = b.position[0] - CENTER[0], b.position[1] - CENTER[1]
        vx, vy = b.velocity
        r = math.hypot(rx, ry)
        speed = math.hypot(vx, vy)
        assert abs(rx * vx + ry * vy) <= 1e-9 * r * speed + 1e-12
        assert rx * vy - ry * vx > 0


def test_orbital_speed_uses_enclosed_mass():
    max_radius = 1e4
    bodies = galaxy(total_count=10, arm_count=1, bulge_fraction=0.0, arm_spread=0.0,
                    max_radius=max_radius, G=2.0)
    first = bodies[0]
    # First arm star sits at the spiral scale radius
    assert radius(first) == pytest.approx(10.0)

    enclosed = 10 * 10.0 * 10.0 / max_radius
    expected = math.sqrt(2.0 * enclosed / (10.0 + SOFTENING))
    assert math.hypot(*first.velocity) == pytest.approx(expected)


def test_zero_gravity_gives_resting_arms():
    bodies = galaxy(bulge_fraction=0.0, G=0.0, max_radius=1e4)
    assert all(b.velocity == (0.0, 0.0) for b in bodies)


def test_spread_does_not_change_velocity():
    tight = galaxy(arm_spread=0.0, bulge_fraction=0.0, max_radius=1e4)
    loose = galaxy(arm_spread=0.5, bulge_fraction=0.0, max_radius=1e4)
    assert [b.velocity for b in tight] == [b.velocity for b in loose]
    assert [b.position for b in tight] != [b.position for b in loose]


def test_arms_are_evenly_populated():
    # Zero spread puts every arm star on its ideal spiral point
    bodies = galaxy(total_count=101, arm_count=4, bulge_fraction=0.0, arm_spread=0.0,
                    max_radius=1e6)
    assert len(bodies) == 101
    first_of_each_arm = [bodies[i] for i in (0, 26, 51, 76)]
    angles = [math.atan2(b.position[1] - CENTER[1], b.position[0] - CENTER[0])
              for b in first_of_each_arm]
    offsets = [(a - angles[0]) % (2 * math.pi) for a in angles]
    assert offsets == pytest.approx([0.0, math.pi / 2, math.pi, 3 * math.pi / 2])


def test_smaller_tightness_gives_more_compact_spiral():
    tight = galaxy(arm_tightness=5.0, bulge_fraction=0.0, arm_spread=0.0, max_radius=1e6)
    loose = galaxy(arm_tightness=20.0, bulge_fraction=0.0, arm_spread=0.0, max_radius=1e6)
    assert np.mean([radius(b) for b in tight]) < np.mean([radius(b) for b in loose])


def test_same_seed_same_galaxy():
    first = galaxy(rng=np.random.default_rng(3))
    second = galaxy(rng=np.random.default_rng(3))
    assert [(b.position, b.velocity, b.mass) for b in first] == \
        [(b.position, b.velocity, b.mass) for b in second]


def test_ids_unique_and_sprites_in_range(ids):
    bodies = galaxy(ids=ids, sprite_count=5)
    assert len({b.id for b in bodies}) == len(bodies)
    assert all(0 <= b.sprite_index < 5 for b in bodies)

    assert all(b.sprite_index is None for b in galaxy(sprite_count=0))


@pytest.mark.parametrize("overrides", [
    {"total_count": -1},
    {"arm_count": 0},
    {"bulge_fraction": 1.5},
    {"max_radius": 0.0},
])
def test_invalid_arguments_raise(overrides):
    with pytest.raises(ValueError):
        galaxy(**overrides)


def test_empty_galaxy():
    assert galaxy(total_count=0) == []


def test_bodies_hold_plain_python_values():
    for b in galaxy(sprite_count=3, max_radius=1e4):
        assert type(b.mass) is float
        assert all(type(v) is float for v in b.position + b.velocity)
        assert type(b.sprite_index) is int
