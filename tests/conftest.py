"""
Pytest fixtures

每個測試都有自己的 GameService（獨立的 Result Log）和自己的 app
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core.game_service import GameService
from main import create_app
from models import Move
from services.move_service import FixedMoveSupplier

START_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TickingClock:
    """每次呼叫前進一秒的假時鐘"""

    def __init__(self, start: datetime = START_TIME):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def service(clock: TickingClock) -> GameService:
    return GameService(move_supplier=FixedMoveSupplier(Move.SCISSORS), clock=clock)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(log_level="WARNING", random_seed=42)


@pytest.fixture
def client(test_settings: Settings, service: GameService) -> Iterator[TestClient]:
    app = create_app(settings=test_settings, service=service)
    with TestClient(app) as test_client:
        yield test_client
