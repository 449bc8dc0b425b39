"""Weighted passenger selection.

A passenger twice as heavy is twice as likely to be chosen. The target is
a real number drawn from (0, total_weight]; the passenger list is scanned
in order, subtracting each weight, and the first passenger that brings the
target to ≤ 0 is selected. Weights are never truncated, so the odds are
exactly weight / total for any positive weights.

Floating-point residue can leave the target a hair above zero after the
last subtraction; the last passenger is selected in that case.
"""

from __future__ import annotations

import math
from typing import Sequence

from canoe_sim.engine.rng import RandomSource, draw_upper
from canoe_sim.models.person import Person


def total_weight(passengers: Sequence[Person], scale: float = 1.0) -> float:
    return sum(p.weight / scale for p in passengers)


def pick_by_target(
    passengers: Sequence[Person],
    target: float,
    scale: float = 1.0,
) -> Person | None:
    """Scan ``passengers`` subtracting ``weight / scale`` from ``target``.

    Returns ``None`` for an empty sequence.
    """
    if not passengers:
        return None

    for person in passengers:
        target -= person.weight / scale
        if target <= 0:
            return person

    return passengers[-1]


def select_weighted(passengers: Sequence[Person], rng: RandomSource) -> Person | None:
    """Pick one passenger with probability proportional to weight.

    Consumes exactly one ``rng.random()`` draw when ``passengers`` is
    non-empty and none otherwise.
    """
    if not passengers:
        return None

    scale = 1.0
    total = total_weight(passengers)
    if not math.isfinite(total):
        # Finite weights whose sum overflows: compare shares of the heaviest
        scale = max(p.weight for p in passengers)
        total = total_weight(passengers, scale)

    target = draw_upper(rng, total)
    return pick_by_target(passengers, target, scale)
