# neuron/report.py
import operator
from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class Summary:
    mean: float
    minimum: int
    maximum: int
    rounds: int


def success_rate_series(trainer, rounds: int = 100) -> List[int]:
    """
    Call trainer.verify() once per round.
    The first entry is pinned to 0 and the last to 100 so a plot of the
    series always spans the full scale. Those two are not measurements.
    """
    try:
        rounds = operator.index(rounds)
    except TypeError:
        raise ValueError(f"rounds must be an integer, got {rounds!r}") from None
    # at least one measured round between the pinned ends
    if rounds < 3:
        raise ValueError(f"rounds must be at least 3, got {rounds}")

    series = []
    for i in range(rounds):
        if i == 0:
            series.append(0)
        elif i == rounds - 1:
            series.append(100)
        else:
            series.append(trainer.verify())
    return series


def summarize(series: List[int]) -> Summary:
    """Statistics over the measured entries, i.e. without the pinned first and last."""
    measured = np.asarray(series[1:-1], dtype=float)
    if measured.size == 0:
        raise ValueError("series has no measured entries")
    return Summary(
        mean=float(measured.mean()),
        minimum=int(measured.min()),
        maximum=int(measured.max()),
        rounds=int(measured.size),
    )
