"""Configuration models — scenario inputs."""

from canoe_sim.config.canoe import CanoeSpec, Material
from canoe_sim.config.passenger import PassengerSpec
from canoe_sim.config.crash import CrashConfig
from canoe_sim.config.scenario import Scenario, SimulationConfig, load_scenario

__all__ = [
    "CanoeSpec",
    "Material",
    "PassengerSpec",
    "CrashConfig",
    "SimulationConfig",
    "Scenario",
    "load_scenario",
]
