# neuron/trainer.py
import logging
import operator

import numpy as np

logger = logging.getLogger(__name__)

COORDINATE_RANGE = (-100, 100)
VERIFY_SAMPLES = 100


class Trainer:
    """
    Drives a perceptron against a ground truth boundary.
    - boundary: Boundary giving the correct label of every point
    - perceptron: the model being trained, owned by this trainer
    - rng: numpy Generator all sample points are drawn from
    - observer: optional callable(point, label), called after every
      classification the perceptron makes. point is a tuple of ints and
      label is the perceptron's answer.
    train(...) mutates the perceptron, verify(...) only reads it.
    """
    def __init__(self, boundary, perceptron, rng=None, observer=None,
                 coordinate_range=COORDINATE_RANGE):
        low, high = (int(v) for v in coordinate_range)
        if low > high:
            raise ValueError(f"empty coordinate range ({low}, {high})")
        if rng is None:
            rng = np.random.default_rng()
        self.boundary = boundary
        self.perceptron = perceptron
        self.rng = rng
        self.observer = observer
        self.coordinate_range = (low, high)

    def sample_point(self):
        low, high = self.coordinate_range
        return self.rng.integers(low, high, size=2, endpoint=True)

    def _notify(self, observer, point, label):
        observer = observer if observer is not None else self.observer
        if observer is not None:
            observer(tuple(point.tolist()), label)

    def train(self, number_of_iterations, learning_rate, observer=None):
        try:
            number_of_iterations = operator.index(number_of_iterations)
        except TypeError:
            raise ValueError(
                f"number_of_iterations must be an integer, got {number_of_iterations!r}") from None
        learning_rate = float(learning_rate)
        if number_of_iterations < 1:
            raise ValueError(
                f"number_of_iterations must be at least 1, got {number_of_iterations}")
        if not 0.0 < learning_rate <= 1.0:
            raise ValueError(f"learning_rate must be in (0, 1], got {learning_rate}")

        updates = 0
        for _ in range(number_of_iterations):
            point = self.sample_point()
            actual = self.perceptron.activate(point)
            self._notify(observer, point, actual)
            expected = self.boundary.classify(point)
            delta = expected - actual
            if delta != 0:
                updates += 1
            self.perceptron.adjust(point, delta, learning_rate)

        logger.debug("trained %d iterations at rate %g: %d updates, w=%s b=%.4f",
                     number_of_iterations, learning_rate, updates,
                     tuple(self.perceptron.weights.tolist()), self.perceptron.bias)

    def verify(self, samples=VERIFY_SAMPLES, observer=None):
        """Return how many of `samples` fresh points the perceptron labels correctly."""
        try:
            samples = operator.index(samples)
        except TypeError:
            raise ValueError(f"samples must be an integer, got {samples!r}") from None
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")

        correct = 0
        for _ in range(samples):
            point = self.sample_point()
            result = self.perceptron.activate(point)
            self._notify(observer, point, result)
            if result == self.boundary.classify(point):
                correct += 1

        logger.debug("verified %d/%d", correct, samples)
        return correct
