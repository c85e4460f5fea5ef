"""Pytest fixtures for the prize draw tests."""

from __future__ import annotations

import random

import pytest

from prizedraw import create_app
from prizedraw.config import TestingConfig
from prizedraw.repositories.session_store import SessionStore
from prizedraw.services.draw_service import DrawService
from prizedraw.services.lottery_service import LotteryService


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> SessionStore:
    return SessionStore(clock=clock)


@pytest.fixture
def draw_service() -> DrawService:
    return DrawService(rng=random.Random(42))


@pytest.fixture
def service(store: SessionStore, draw_service: DrawService) -> LotteryService:
    return LotteryService(store=store, draw_service=draw_service, max_idle_seconds=3600)


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_service(app) -> LotteryService:
    return app.extensions["lottery_service"]
