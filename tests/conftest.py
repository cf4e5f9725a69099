from __future__ import annotations

import random
from collections.abc import Generator

import fakeredis
import pytest

from dulp.core.levels import Level, LevelCatalog
from dulp.core.scheduling import VirtualClock
from dulp.game import Game, build_game


def _even(n: int) -> tuple[int, ...]:
    return tuple(360 // n for _ in range(n))


@pytest.fixture()
def catalog() -> LevelCatalog:
    """Small hermetic catalog with predictable sector positions.

    - level 1: one sector, still wheel.
    - level 2: five sectors of 72 degrees, still wheel.
    - level 3: two halves spinning at 90 deg/s.
    """

    return LevelCatalog.from_levels(
        [
            Level(number=1, color_slots=(360,), rotation_speed=0, projectile_speed=1000, projectile_distance=100),
            Level(number=2, color_slots=_even(5), rotation_speed=0, projectile_speed=1000, projectile_distance=100),
            Level(number=3, color_slots=_even(2), rotation_speed=90, projectile_speed=1000, projectile_distance=100),
        ]
    )


@pytest.fixture()
def clock() -> VirtualClock:
    return VirtualClock()


@pytest.fixture()
def redis_store() -> fakeredis.FakeRedis:
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def game(catalog: LevelCatalog, clock: VirtualClock, redis_store: fakeredis.FakeRedis) -> Game:
    return build_game(
        store=redis_store,
        catalog=catalog,
        scheduler=clock,
        clock=clock,
        rng=random.Random(1234),
    )


@pytest.fixture()
def client(game: Game) -> Generator:
    """FastAPI TestClient bound to the hermetic `game` (fakeredis + virtual clock)."""

    from fastapi.testclient import TestClient

    from dulp.main import app
    from dulp.runtime import install_game, shutdown_game

    install_game(game)
    with TestClient(app) as c:
        yield c
    shutdown_game()
