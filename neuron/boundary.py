# neuron/boundary.py
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Boundary:
    """Ground truth line y = a*x + b."""
    a: int
    b: int

    def evaluate(self, x: int) -> int:
        return self.a * x + self.b

    def classify(self, point: Sequence[int]) -> int:
        if len(point) != 2:
            raise ValueError(f"point must be (x, y), got {point!r}")
        x, y = point
        # on the line counts as below
        return 1 if y > self.evaluate(x) else 0

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        a_range: Tuple[int, int] = (-5, 5),
        b_range: Tuple[int, int] = (-50, 50),
    ) -> "Boundary":
        a = int(rng.integers(a_range[0], a_range[1], endpoint=True))
        b = int(rng.integers(b_range[0], b_range[1], endpoint=True))
        return cls(a, b)
