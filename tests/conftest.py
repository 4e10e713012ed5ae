"""Shared pytest fixtures for Limbrix tests."""

import random

import pytest

from core.config import AppConfig
from physics.flake import FieldBounds, Flake
from physics.flake_system import FlakeSystem
from physics.generator import FlakeGenerator


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def bounds() -> FieldBounds:
    return FieldBounds(width=800.0, height=600.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(now=100.0)


@pytest.fixture
def system(clock) -> FlakeSystem:
    """Flake system with a fake clock and a seeded generator."""
    config = AppConfig()
    generator = FlakeGenerator(config=config.flakes, rng=random.Random(1234))
    return FlakeSystem(config=config, generator=generator, clock=clock)


@pytest.fixture
def make_flake():
    def factory(x: float, y: float, velocity=(30.0, 0.0)) -> Flake:
        return Flake(position=(x, y), color=(255, 0, 0), size=20.0, velocity=velocity)

    return factory
