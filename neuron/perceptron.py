# neuron/perceptron.py
import operator

import numpy as np


class Perceptron:
    """
    Single neuron with a step activation.
    - number_of_inputs: length of the weight vector, fixed for the model's lifetime
    - rng: numpy Generator used for the initial weights and bias
    Weights and bias start uniform in [-1, 1].
    """
    def __init__(self, number_of_inputs, rng=None):
        try:
            number_of_inputs = operator.index(number_of_inputs)
        except TypeError:
            raise ValueError(f"number_of_inputs must be an integer, got {number_of_inputs!r}") from None
        if number_of_inputs <= 0:
            raise ValueError(f"number_of_inputs must be positive, got {number_of_inputs}")
        if rng is None:
            rng = np.random.default_rng()
        self.weights = rng.uniform(-1.0, 1.0, size=number_of_inputs)
        self.bias = float(rng.uniform(-1.0, 1.0))

    @property
    def number_of_inputs(self):
        return len(self.weights)

    def _as_inputs(self, inputs):
        x = np.asarray(inputs, dtype=float)
        if x.ndim != 1 or x.shape[0] != len(self.weights):
            raise ValueError(
                f"expected {len(self.weights)} inputs, got shape {x.shape}")
        return x

    def net(self, inputs):
        return float(np.dot(self.weights, self._as_inputs(inputs)) + self.bias)

    def activate(self, inputs):
        # a sum of exactly 0 is class 1
        return 1 if self.net(inputs) >= 0 else 0

    def adjust(self, inputs, delta, learning_rate):
        """
        One step of the perceptron learning rule.
        delta is expected - actual (-1, 0 or 1).
        """
        x = self._as_inputs(inputs)
        step = delta * learning_rate
        self.weights += x * step
        self.bias += step
