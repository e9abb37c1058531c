"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path
from typing import Iterable

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from raytracer.core.rendering.scene import Material, Triangle  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-image renders")


class ScriptedRandom(random.Random):
    """random.Random whose random() replays a fixed list of values in a loop."""

    def __init__(self, values: Iterable[float]):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def scripted_random():
    """Factory for random sources with scripted samples."""
    return ScriptedRandom


@pytest.fixture
def make_material():
    def _make(color=(255, 0, 0), transparency=0.0, roughness=0.0):
        return Material(color=color, transparency=transparency, roughness=roughness)
    return _make


@pytest.fixture
def facing_triangle(make_material):
    """Triangle in the plane z=`z` that faces rays travelling along +z."""
    def _make(z, color=(255, 0, 0), **material):
        return Triangle(
            origin=(0, 0, z),
            points=[(0, 1, z), (1, -1, z), (-1, -1, z)],
            material=make_material(color=color, **material),
        )
    return _make


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return Path(__file__).parent.parent
