"""Domain objects and result models."""

from canoe_sim.models.person import Person
from canoe_sim.models.results import (
    CanoeStatus,
    CrashReport,
    MonteCarloSummary,
    PassengerOutcome,
    ScenarioResult,
)

__all__ = [
    "Person",
    "CanoeStatus",
    "CrashReport",
    "MonteCarloSummary",
    "PassengerOutcome",
    "ScenarioResult",
]
