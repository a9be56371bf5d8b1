import numpy as np
import pytest
from nnfs.datasets import spiral_data

from neuralnet import NeuralNet


@pytest.fixture
def spiral_inputs():
    # 2-feature points, same batch on every run
    np.random.seed(0)
    X, y = spiral_data(samples=20, classes=3)
    return X


@pytest.fixture
def net():
    return NeuralNet(2, [2], 1)
