import numpy as np
import pytest

from neuron.boundary import Boundary
from neuron.perceptron import Perceptron
from neuron.trainer import Trainer


def test_sample_points_are_integer_pairs_in_range(make_trainer):
    trainer = make_trainer()
    points = np.array([trainer.sample_point() for _ in range(500)])
    assert points.shape == (500, 2)
    assert np.issubdtype(points.dtype, np.integer)
    assert points.min() >= -100 and points.max() <= 100


def test_custom_coordinate_range(make_trainer):
    trainer = make_trainer(coordinate_range=(-3, 3))
    points = np.array([trainer.sample_point() for _ in range(200)])
    assert points.min() >= -3 and points.max() <= 3


def test_empty_coordinate_range_rejected():
    with pytest.raises(ValueError):
        Trainer(Boundary(0, 0), Perceptron(2), coordinate_range=(5, -5))


def test_train_learns_the_diagonal():
    rng = np.random.default_rng(42)
    trainer = Trainer(Boundary(1, 0), Perceptron(2, rng=rng), rng=rng)
    trainer.train(10000, 0.1)
    assert trainer.verify() > 70


def test_train_mutates_perceptron(make_trainer):
    trainer = make_trainer(a=2, b=-10)
    w = trainer.perceptron.weights.copy()
    trainer.train(500, 0.5)
    assert not np.array_equal(trainer.perceptron.weights, w)
    assert len(trainer.perceptron.weights) == 2


@pytest.mark.parametrize("iterations", [0, -1])
def test_non_positive_iterations_rejected(make_trainer, iterations):
    trainer = make_trainer()
    w, b = trainer.perceptron.weights.copy(), trainer.perceptron.bias
    with pytest.raises(ValueError, match="at least 1"):
        trainer.train(iterations, 0.1)
    assert np.array_equal(trainer.perceptron.weights, w)
    assert trainer.perceptron.bias == b


@pytest.mark.parametrize("iterations", [1.9, 10.0])
def test_non_integral_iterations_rejected(make_trainer, iterations):
    trainer = make_trainer()
    w, b = trainer.perceptron.weights.copy(), trainer.perceptron.bias
    with pytest.raises(ValueError, match="integer"):
        trainer.train(iterations, 0.1)
    assert np.array_equal(trainer.perceptron.weights, w)
    assert trainer.perceptron.bias == b


@pytest.mark.parametrize("rate", [0, -0.1, 1.5])
def test_learning_rate_outside_unit_interval_rejected(make_trainer, rate):
    trainer = make_trainer()
    w = trainer.perceptron.weights.copy()
    with pytest.raises(ValueError, match="learning_rate"):
        trainer.train(10, rate)
    assert np.array_equal(trainer.perceptron.weights, w)


def test_learning_rate_of_one_is_allowed(make_trainer):
    make_trainer().train(5, 1.0)


def test_verify_is_in_range_and_read_only(make_trainer):
    trainer = make_trainer(a=-3, b=20)
    trainer.train(50, 0.1)
    w, b = trainer.perceptron.weights.copy(), trainer.perceptron.bias
    for _ in range(20):
        result = trainer.verify()
        assert isinstance(result, int)
        assert 0 <= result <= 100
    assert np.array_equal(trainer.perceptron.weights, w)
    assert trainer.perceptron.bias == b


def test_verify_rejects_empty_sample(make_trainer):
    with pytest.raises(ValueError):
        make_trainer().verify(samples=0)


def test_verify_rejects_fractional_sample(make_trainer):
    with pytest.raises(ValueError, match="integer"):
        make_trainer().verify(samples=2.5)


def test_seeded_runs_are_reproducible(make_trainer):
    first = make_trainer(a=2, b=5, seed=99)
    second = make_trainer(a=2, b=5, seed=99)
    first.train(300, 0.2)
    second.train(300, 0.2)
    assert np.array_equal(first.perceptron.weights, second.perceptron.weights)
    assert first.perceptron.bias == second.perceptron.bias
    assert [first.verify() for _ in range(10)] == [second.verify() for _ in range(10)]


def test_observer_sees_every_classification(make_trainer):
    seen = []
    trainer = make_trainer(observer=lambda point, label: seen.append((point, label)))
    trainer.train(25, 0.1)
    assert len(seen) == 25
    trainer.verify(samples=10)
    assert len(seen) == 35
    for point, label in seen:
        assert isinstance(point, tuple) and len(point) == 2
        assert all(isinstance(v, int) for v in point)
        assert label in (0, 1)


def test_observer_labels_are_the_perceptrons(make_trainer):
    trainer = make_trainer(a=0, b=0)
    trainer.perceptron.weights = np.array([0.0, 0.0])
    trainer.perceptron.bias = -1.0
    labels = []
    trainer.verify(samples=30, observer=lambda point, label: labels.append(label))
    assert labels == [0] * 30


def test_call_observer_overrides_constructor_observer(make_trainer):
    default, override = [], []
    trainer = make_trainer(observer=lambda p, l: default.append(p))
    trainer.verify(samples=5, observer=lambda p, l: override.append(p))
    assert default == []
    assert len(override) == 5


def test_on_line_points_disagree_between_model_and_boundary():
    # The model's step puts a zero sum in class 1 while the boundary puts a
    # point on the line in class 0, so even an exact fit misses these points.
    rng = np.random.default_rng(0)
    trainer = Trainer(Boundary(1, 0), Perceptron(2, rng=rng), rng=rng,
                      coordinate_range=(7, 7))
    trainer.perceptron.weights = np.array([-1.0, 1.0])
    trainer.perceptron.bias = 0.0
    assert trainer.perceptron.activate((7, 7)) == 1
    assert trainer.boundary.classify((7, 7)) == 0
    assert trainer.verify() == 0
    assert trainer.perceptron.activate((7, 8)) == trainer.boundary.classify((7, 8)) == 1
    assert trainer.perceptron.activate((7, 6)) == trainer.boundary.classify((7, 6)) == 0
