import math

import pytest

from tank_assault.core.projectile import Projectile
from tank_assault.core.tank import Tank
from tank_assault.core.world import Side


def test_advance_moves_along_heading():
    projectile = Projectile(x=100, y=100, angle=math.pi / 2, side=Side.PLAYER)

    projectile.advance()

    assert projectile.x == pytest.approx(100)
    assert projectile.y == pytest.approx(108)


def test_out_of_bounds_is_exclusive_of_edges():
    assert Projectile(x=0, y=0, angle=0, side=Side.ENEMY).is_out_of_bounds(1200, 800) is False
    assert Projectile(x=1200, y=800, angle=0, side=Side.ENEMY).is_out_of_bounds(1200, 800) is False
    assert Projectile(x=-0.1, y=400, angle=0, side=Side.ENEMY).is_out_of_bounds(1200, 800) is True
    assert Projectile(x=600, y=800.1, angle=0, side=Side.ENEMY).is_out_of_bounds(1200, 800) is True


def test_collision_is_circular():
    tank = Tank(x=500, y=500)

    # Radius is half the tank plus half the shell: 15 + 2.
    assert Projectile(x=516.9, y=500, angle=0, side=Side.PLAYER).collides_with(tank)
    assert not Projectile(x=517, y=500, angle=0, side=Side.PLAYER).collides_with(tank)
    # The square hull corner is outside the circle.
    assert not Projectile(x=514, y=514, angle=0, side=Side.PLAYER).collides_with(tank)


def test_side_reports_owner():
    assert Projectile(x=0, y=0, angle=0, side=Side.PLAYER).from_player is True
    assert Projectile(x=0, y=0, angle=0, side=Side.ENEMY).from_player is False
