import pytest

from tank_assault.core.game import Game
from tank_assault.core.levels import LevelController
from tank_assault.core.tank import Tank
from tank_assault.core.world import Obstacle, Side, World, WorldSettings


@pytest.fixture
def settings() -> WorldSettings:
    return WorldSettings()


@pytest.fixture
def open_world(settings: WorldSettings) -> World:
    """Provide a battlefield with the player at its spawn, no cover and no enemies."""

    player = Tank(*settings.player_spawn, side=Side.PLAYER)
    return World(player, settings)


@pytest.fixture
def walled_world(open_world: World) -> World:
    open_world.obstacles = [Obstacle(300, 350, 60, 100)]
    return open_world


@pytest.fixture
def controller() -> LevelController:
    return LevelController()


@pytest.fixture
def game(controller: LevelController) -> Game:
    return Game(controller)
