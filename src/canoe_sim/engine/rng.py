"""Random source seam for the crash engine.

Anything with a ``random()`` method returning a float in [0, 1) works:
``numpy.random.Generator`` (the default), ``random.Random``, or a scripted
stand-in for hand-computed traces.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform real in [0, 1)."""
        ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Seeded NumPy generator. ``None`` seeds from OS entropy."""
    return np.random.default_rng(seed)


def draw_upper(rng: RandomSource, upper: float) -> float:
    """Uniform real in (0, upper]."""
    return upper * (1.0 - float(rng.random()))
