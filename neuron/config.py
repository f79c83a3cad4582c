# neuron/config.py
import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from neuron.trainer import COORDINATE_RANGE


@dataclass
class RunConfig:
    iterations: int = 1000
    learning_rate: float = 0.1
    a_range: Tuple[int, int] = (-5, 5)
    b_range: Tuple[int, int] = (-50, 50)
    rounds: int = 100
    seed: Optional[int] = None
    coordinate_range: Tuple[int, int] = COORDINATE_RANGE

    def validate(self) -> "RunConfig":
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if not 0.0 < self.learning_rate <= 1.0:
            raise ValueError(f"learning rate must be in (0, 1], got {self.learning_rate}")
        if self.rounds < 3:
            raise ValueError(f"rounds must be at least 3, got {self.rounds}")
        for name in ("a_range", "b_range", "coordinate_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} is empty: ({low}, {high})")
        return self


def build_parser() -> argparse.ArgumentParser:
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        description="train a perceptron to separate points around a random line")
    parser.add_argument("--iterations", type=int, default=defaults.iterations,
                        help="number of training points")
    parser.add_argument("--learning-rate", type=float, default=defaults.learning_rate,
                        help="step size, 0 < rate <= 1")
    parser.add_argument("--a-range", type=int, nargs=2, metavar=("LO", "HI"),
                        default=defaults.a_range, help="range of the line's slope")
    parser.add_argument("--b-range", type=int, nargs=2, metavar=("LO", "HI"),
                        default=defaults.b_range, help="range of the line's intercept")
    parser.add_argument("--rounds", type=int, default=defaults.rounds,
                        help="number of verification rounds in the success-rate series")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--save", metavar="PATH", default=None,
                        help="write the graph to an image file")
    parser.add_argument("--no-gui", action="store_true",
                        help="do not open the Qt window")
    parser.add_argument("--verbose", action="store_true")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None):
    """Return (RunConfig, argparse.Namespace). Invalid values exit through parser.error."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = RunConfig(
        iterations=args.iterations,
        learning_rate=args.learning_rate,
        a_range=tuple(args.a_range),
        b_range=tuple(args.b_range),
        rounds=args.rounds,
        seed=args.seed,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return config, args
