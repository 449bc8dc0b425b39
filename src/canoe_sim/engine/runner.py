"""Scenario runner — single runs and Monte-Carlo aggregation.

Entry point: ``run_engine(scenario)``
  - ``monte_carlo_runs == 1`` → one run with ``random_seed``
  - ``monte_carlo_runs  > 1`` → N runs with seeds base_seed + i, aggregated
    into a ``MonteCarloSummary`` attached to the median-damage run
"""

from __future__ import annotations

import logging

import numpy as np

from canoe_sim.config.scenario import Scenario
from canoe_sim.engine.canoe import Canoe
from canoe_sim.engine.rng import make_rng
from canoe_sim.models.person import Person
from canoe_sim.models.results import (
    CrashReport,
    MonteCarloSummary,
    PassengerOutcome,
    ScenarioResult,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_SEED = 42


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def run_engine(scenario: Scenario) -> ScenarioResult:
    """Run a single scenario or a Monte-Carlo batch, per ``scenario.simulation``."""
    if scenario.simulation.monte_carlo_runs > 1:
        return run_monte_carlo(scenario)
    return run_scenario(scenario, scenario.simulation.random_seed)


# ═══════════════════════════════════════════════════════════════════════════
# Single run
# ═══════════════════════════════════════════════════════════════════════════

def run_scenario(scenario: Scenario, seed: int | None = None) -> ScenarioResult:
    """Board every passenger, crash ``crash_count`` times, collect the outcome."""
    canoe = Canoe.from_spec(scenario.canoe, crash_config=scenario.crash, rng=make_rng(seed))
    people = [Person(p.name, p.weight) for p in scenario.passengers]
    for person in people:
        canoe.embark(person)

    crashes: list[CrashReport] = []
    died_in: dict[int, int] = {}
    for event in range(1, scenario.simulation.crash_count + 1):
        before = {id(p) for p in people if p.is_dead}
        crashes.append(canoe.crash())
        for person in people:
            if person.is_dead and id(person) not in before:
                died_in[id(person)] = event

    outcomes = [
        PassengerOutcome(
            name=p.name,
            weight=p.weight,
            dead=p.is_dead,
            died_in_crash=died_in.get(id(p)),
        )
        for p in people
    ]

    return ScenarioResult(
        seed=seed,
        crashes=crashes,
        final_status=canoe.status(),
        passengers=outcomes,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Monte-Carlo aggregation
# ═══════════════════════════════════════════════════════════════════════════

def run_monte_carlo(scenario: Scenario) -> ScenarioResult:
    """Run N independent scenarios and aggregate survival statistics.

    Strategy:
      1. Run N simulations with sequential seeds (base_seed + i)
      2. Collect deaths, final damage and catastrophic flags per run
      3. Compute MonteCarloSummary with damage percentiles
      4. Return the run closest to median damage with the summary attached
    """
    base_seed = (
        scenario.simulation.random_seed
        if scenario.simulation.random_seed is not None
        else DEFAULT_BASE_SEED
    )
    num_runs = scenario.simulation.monte_carlo_runs

    results = [run_scenario(scenario, base_seed + i) for i in range(num_runs)]

    damage = np.array([r.final_status.damage for r in results])
    deaths = np.array([r.total_deaths for r in results])
    catastrophic = np.array([r.any_catastrophic for r in results], dtype=bool)

    # Positional, so passengers sharing a name are counted separately
    dead_matrix = np.array([[o.dead for o in r.passengers] for r in results], dtype=bool)
    death_rate: dict[str, float] = {}
    for idx, spec in enumerate(scenario.passengers):
        rate = float(dead_matrix[:, idx].mean()) if dead_matrix.size else 0.0
        key, n = spec.name, idx + 1
        while key in death_rate:
            key = f"{spec.name} #{n}"
            n += 1
        death_rate[key] = rate

    mc = MonteCarloSummary(
        num_runs=num_runs,
        death_rate_by_passenger=death_rate,
        mean_deaths=float(deaths.mean()),
        max_deaths=int(deaths.max()),
        damage_p10=float(np.percentile(damage, 10)),
        damage_p50=float(np.percentile(damage, 50)),
        damage_p90=float(np.percentile(damage, 90)),
        catastrophic_rate=float(catastrophic.mean()),
    )
    logger.debug("monte carlo: %d runs, mean deaths %.3f", num_runs, mc.mean_deaths)

    median_idx = int(np.argmin(np.abs(damage - mc.damage_p50)))
    return results[median_idx].model_copy(update={"monte_carlo": mc})
