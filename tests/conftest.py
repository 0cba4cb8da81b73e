import os
import sys

import pytest

# Ensure project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from world import Grid, make_rng


@pytest.fixture
def grid():
    return Grid(10, 10)


@pytest.fixture
def rng():
    return make_rng(1234)[0]
