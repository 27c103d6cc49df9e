import itertools
import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from galaxy.settings import LiveSettings


@pytest.fixture
def settings():
    return LiveSettings(width=800, height=600)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def ids():
    return itertools.count(1)
