"""Top-level scenario — canoe, passengers, crash model and run settings."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from canoe_sim.config.canoe import CanoeSpec
from canoe_sim.config.crash import CrashConfig
from canoe_sim.config.passenger import PassengerSpec


def _demo_passengers() -> list[PassengerSpec]:
    return [
        PassengerSpec(name="Isaac", weight=250),
        PassengerSpec(name="Axel", weight=90),
        PassengerSpec(name="Micah", weight=170),
    ]


class SimulationConfig(BaseModel):
    """Run-level settings."""

    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. None = non-deterministic.",
    )
    crash_count: int = Field(default=1, ge=0, description="Crash events per run")
    monte_carlo_runs: int = Field(
        default=1,
        ge=1,
        le=100_000,
        description="Independent runs to aggregate. 1 = single run.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    canoe: CanoeSpec = Field(default_factory=CanoeSpec)
    passengers: list[PassengerSpec] = Field(default_factory=_demo_passengers)
    crash: CrashConfig = Field(default_factory=CrashConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)


def load_scenario(path: str | Path) -> Scenario:
    """Read a YAML scenario file. Missing sections take their defaults."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario.model_validate(data)
