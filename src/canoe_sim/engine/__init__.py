"""Engine — durability, weighted selection, crash simulation and runners."""

from canoe_sim.engine.rng import RandomSource, make_rng
from canoe_sim.engine.durability import (
    BREACHED_THRESHOLD,
    DURABILITY_COEFFICIENTS,
    crash_threshold,
    durability_coefficient,
)
from canoe_sim.engine.selection import pick_by_target, select_weighted
from canoe_sim.engine.canoe import Canoe
from canoe_sim.engine.runner import run_engine, run_monte_carlo, run_scenario

__all__ = [
    "RandomSource",
    "make_rng",
    "BREACHED_THRESHOLD",
    "DURABILITY_COEFFICIENTS",
    "crash_threshold",
    "durability_coefficient",
    "pick_by_target",
    "select_weighted",
    "Canoe",
    # Runners
    "run_engine",
    "run_scenario",
    "run_monte_carlo",
]
