import matplotlib

# headless: never open a window while testing
matplotlib.use("Agg")

import numpy as np
import pytest

from neuron.boundary import Boundary
from neuron.perceptron import Perceptron
from neuron.trainer import Trainer


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_trainer():
    def _make(a=1, b=0, seed=0, **kwargs):
        rng = np.random.default_rng(seed)
        return Trainer(Boundary(a, b), Perceptron(2, rng=rng), rng=rng, **kwargs)
    return _make
