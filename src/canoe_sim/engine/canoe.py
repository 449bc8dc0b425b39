"""Canoe — passenger management and the crash simulation.

One crash event:
  1. coeff     = durability(material) − damage          (evaluated once)
  2. threshold = crash_threshold(coeff, volume)          (evaluated once)
  3. while anyone is aboard and roll ∈ (0, 20] > threshold:
       pick a passenger by weight → remove → log → kill → damage += 0.25

Damage only ever grows, and only inside ``crash()``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from canoe_sim.config.canoe import CanoeSpec, Material
from canoe_sim.config.crash import CrashConfig
from canoe_sim.engine.durability import crash_threshold, durability_coefficient, is_breached
from canoe_sim.engine.rng import RandomSource, draw_upper, make_rng
from canoe_sim.engine.selection import select_weighted
from canoe_sim.models.person import Person
from canoe_sim.models.results import CanoeStatus, CrashReport

logger = logging.getLogger(__name__)


class Canoe:
    """A canoe of fixed geometry and material carrying passengers.

    Usage::

        canoe = Canoe(5, 0.85, 0.35, "Wood", rng=np.random.default_rng(7))
        canoe.embark(Person("Isaac", 250))
        report = canoe.crash()
        canoe.print_stat()

    Parameters
    ----------
    length, width, depth : float
        Hull dimensions; each must be > 0 (``pydantic.ValidationError`` otherwise).
    material : Material | str
        Hull material. Unrecognized names are accepted as ``Material.OTHER``.
    crash_config : CrashConfig | None
        Crash formula constants.
    rng : RandomSource | None
        Default random source for ``crash()``. A fresh unseeded NumPy
        generator is used when omitted.
    """

    def __init__(
        self,
        length: float,
        width: float,
        depth: float,
        material: Material | str,
        *,
        crash_config: CrashConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._spec = CanoeSpec(length=length, width=width, depth=depth, material=material)
        self._crash = crash_config or CrashConfig()
        self._rng = rng if rng is not None else make_rng()
        self._damage = 0.0
        self._passengers: list[Person] = []

    @classmethod
    def from_spec(
        cls,
        spec: CanoeSpec,
        *,
        crash_config: CrashConfig | None = None,
        rng: RandomSource | None = None,
    ) -> Canoe:
        return cls(
            spec.length, spec.width, spec.depth, spec.material,
            crash_config=crash_config, rng=rng,
        )

    # ── Accessors ───────────────────────────────────────────────────────

    @property
    def spec(self) -> CanoeSpec:
        return self._spec

    @property
    def length(self) -> float:
        return self._spec.length

    @property
    def width(self) -> float:
        return self._spec.width

    @property
    def depth(self) -> float:
        return self._spec.depth

    @property
    def material(self) -> Material:
        return self._spec.material

    @property
    def volume(self) -> float:
        return self._spec.volume

    @property
    def damage(self) -> float:
        """Accumulated hull damage; grows by ``damage_per_death`` per death."""
        return self._damage

    @property
    def passengers(self) -> tuple[Person, ...]:
        """Snapshot of who is aboard, in boarding order."""
        return tuple(self._passengers)

    @property
    def durability_coefficient(self) -> float:
        return durability_coefficient(self.material)

    @property
    def effective_coefficient(self) -> float:
        return self.durability_coefficient - self._damage

    # ── Passenger management ────────────────────────────────────────────

    def embark(self, person: Person) -> None:
        """Add ``person`` to the end of the passenger list.

        Boarding the same person twice is allowed; they then count twice
        towards the total weight.
        """
        self._passengers.append(person)
        logger.debug("%s embarked (%d aboard)", person.name, len(self._passengers))

    def disembark(self, person: Person) -> bool:
        """Remove the first occurrence of ``person``. Returns whether one was aboard."""
        try:
            self._passengers.remove(person)
        except ValueError:
            return False
        logger.debug("%s disembarked (%d aboard)", person.name, len(self._passengers))
        return True

    # ── Crash simulation ────────────────────────────────────────────────

    def crash(self, rng: RandomSource | None = None) -> CrashReport:
        """Simulate one crash; passengers may die and the hull takes damage.

        Parameters
        ----------
        rng : RandomSource | None
            Overrides the canoe's random source for this call.

        Returns
        -------
        CrashReport
            Threshold used, who died (in order) and damage before/after.
        """
        rng = rng if rng is not None else self._rng
        damage_before = self._damage

        coeff = self.effective_coefficient
        threshold = crash_threshold(coeff, self.volume, self._crash)
        catastrophic = is_breached(coeff)
        if catastrophic and self._passengers:
            logger.warning(
                "%s canoe hull breached (coefficient %.2f); nobody aboard survives",
                self.material.value, coeff,
            )
        logger.debug("crash: coefficient=%.4f threshold=%d", coeff, threshold)

        deaths: list[str] = []
        while self._passengers and draw_upper(rng, self._crash.roll_faces) > threshold:
            chosen = select_weighted(self._passengers, rng)
            self._passengers.remove(chosen)
            logger.info("[ ! ] %s has died", chosen.name)
            chosen.kill()
            self._damage += self._crash.damage_per_death
            deaths.append(chosen.name)

        return CrashReport(
            material=self.material,
            effective_coefficient=coeff,
            threshold=threshold,
            catastrophic=catastrophic,
            damage_before=damage_before,
            damage_after=self._damage,
            deaths=deaths,
            survivors=[p.name for p in self._passengers],
        )

    # ── Status ──────────────────────────────────────────────────────────

    def status(self) -> CanoeStatus:
        return CanoeStatus(
            material=self.material,
            length=self.length,
            width=self.width,
            depth=self.depth,
            damage=self._damage,
            passengers=[p.name for p in self._passengers],
        )

    def format_status(self) -> str:
        return self.status().format_text()

    def print_stat(self, file: TextIO | None = None) -> None:
        print(f"\n{self.format_status()}\n", file=file or sys.stdout)

    def __repr__(self) -> str:
        return (
            f"Canoe({self.length}, {self.width}, {self.depth}, {self.material.value!r}, "
            f"damage={self._damage}, passengers={len(self._passengers)})"
        )
