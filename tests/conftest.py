"""Shared test fixtures — the demo canoe and a scripted random source."""

from __future__ import annotations

from typing import Iterable

import pytest

from canoe_sim.config import CanoeSpec, PassengerSpec, Scenario, SimulationConfig
from canoe_sim.engine.canoe import Canoe
from canoe_sim.models.person import Person


class SequenceRNG:
    """Random source that replays a fixed list of ``random()`` values.

    The engine maps a draw ``u`` to ``upper × (1 − u)``, so ``u = 0.0``
    gives the top of the range and ``u → 1`` approaches zero.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError(f"SequenceRNG exhausted after {self.calls} draws")
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.calls


@pytest.fixture
def isaac() -> Person:
    return Person("Isaac", 250)


@pytest.fixture
def axel() -> Person:
    return Person("Axel", 90)


@pytest.fixture
def micah() -> Person:
    return Person("Micah", 170)


@pytest.fixture
def wood_canoe() -> Canoe:
    return Canoe(5.0, 0.85, 0.35, "Wood")


@pytest.fixture
def loaded_canoe(wood_canoe: Canoe, isaac: Person, axel: Person, micah: Person) -> Canoe:
    for person in (isaac, axel, micah):
        wood_canoe.embark(person)
    return wood_canoe


@pytest.fixture
def scenario() -> Scenario:
    return Scenario(
        canoe=CanoeSpec(length=5.0, width=0.85, depth=0.35, material="Wood"),
        passengers=[
            PassengerSpec(name="Isaac", weight=250),
            PassengerSpec(name="Axel", weight=90),
            PassengerSpec(name="Micah", weight=170),
        ],
        simulation=SimulationConfig(random_seed=7, crash_count=1),
    )
