"""Result types — immutable snapshots produced by the engine.

The ``Canoe`` and ``Person`` objects are mutable and shared with callers;
everything here is a copy taken at a point in time, safe to serialize and
compare across runs.
"""

from __future__ import annotations

from pydantic import BaseModel

from canoe_sim.config.canoe import Material


# ═══════════════════════════════════════════════════════════════════════════
# Single crash event
# ═══════════════════════════════════════════════════════════════════════════

class CrashReport(BaseModel):
    """Outcome of one ``Canoe.crash()`` call."""

    material: Material
    effective_coefficient: float
    """Durability coefficient minus damage, evaluated when the crash began."""

    threshold: int
    """Death-chance threshold. A roll above it kills a passenger."""

    catastrophic: bool = False
    """True when the hull was already breached (coefficient ≤ 0); threshold is 0."""

    damage_before: float
    damage_after: float

    deaths: list[str]
    """Names of passengers lost, in the order they died."""

    survivors: list[str]
    """Names of passengers still aboard after the crash."""

    @property
    def death_count(self) -> int:
        return len(self.deaths)


# ═══════════════════════════════════════════════════════════════════════════
# Canoe state
# ═══════════════════════════════════════════════════════════════════════════

class CanoeStatus(BaseModel):
    """Point-in-time view of a canoe (what ``print_stat`` shows)."""

    material: Material
    length: float
    width: float
    depth: float
    damage: float
    passengers: list[str]

    def format_text(self) -> str:
        """Human-readable block: material, dimensions, damage, passengers."""
        lines = [
            f"{self.material.value} Canoe:",
            f"  {self.length} x {self.width} x {self.depth}",
            f"  Damage: {self.damage}",
            "  Passengers:",
        ]
        lines.extend(f"    {name}" for name in self.passengers)
        return "\n".join(lines)


class PassengerOutcome(BaseModel):
    """Fate of one scenario passenger at the end of a run."""

    name: str
    weight: float
    dead: bool
    died_in_crash: int | None = None
    """1-indexed crash event that killed the passenger. None if alive."""


# ═══════════════════════════════════════════════════════════════════════════
# Scenario / Monte-Carlo results
# ═══════════════════════════════════════════════════════════════════════════

class MonteCarloSummary(BaseModel):
    """Aggregate statistics across N independent runs."""

    num_runs: int

    death_rate_by_passenger: dict[str, float]
    """Fraction of runs in which each passenger died."""

    mean_deaths: float
    max_deaths: int

    damage_p10: float
    damage_p50: float
    damage_p90: float

    catastrophic_rate: float
    """Fraction of runs that hit at least one catastrophic hull failure."""


class ScenarioResult(BaseModel):
    """Complete output of one run."""

    seed: int | None
    crashes: list[CrashReport]
    final_status: CanoeStatus
    passengers: list[PassengerOutcome]
    monte_carlo: MonteCarloSummary | None = None

    @property
    def total_deaths(self) -> int:
        return sum(c.death_count for c in self.crashes)

    @property
    def any_catastrophic(self) -> bool:
        return any(c.catastrophic for c in self.crashes)
