"""Command-line entry point.

Usage:
    # Demo: wooden canoe, Isaac/Axel/Micah, one crash
    canoe-sim

    # Reproducible run from a scenario file
    canoe-sim --scenario scenarios/demo.yaml --seed 7 --crashes 3

    # 1,000 runs → survival statistics
    canoe-sim --runs 1000 --seed 42

    # Machine-readable output
    canoe-sim --seed 7 --json
"""

from __future__ import annotations

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from canoe_sim.config.scenario import Scenario, SimulationConfig, load_scenario
from canoe_sim.engine.runner import run_engine
from canoe_sim.logging_setup import setup_logging
from canoe_sim.models.results import ScenarioResult

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canoe-sim",
        description="Crash a canoe full of passengers and see who survives.",
    )
    parser.add_argument("--scenario", type=str, default=None,
                        help="YAML scenario file (default: built-in demo)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--crashes", type=int, default=None, help="Crash events per run")
    parser.add_argument("--runs", type=int, default=None, help="Monte-Carlo runs")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def _apply_overrides(scenario: Scenario, args: argparse.Namespace) -> Scenario:
    updates = {}
    if args.seed is not None:
        updates["random_seed"] = args.seed
    if args.crashes is not None:
        updates["crash_count"] = args.crashes
    if args.runs is not None:
        updates["monte_carlo_runs"] = args.runs
    if not updates:
        return scenario
    sim = SimulationConfig.model_validate({**scenario.simulation.model_dump(), **updates})
    return scenario.model_copy(update={"simulation": sim})


def format_result(result: ScenarioResult) -> str:
    """Plain-text report: per-crash deaths, final canoe status, MC stats."""
    status = result.final_status
    lines: list[str] = []
    for i, crash in enumerate(result.crashes, start=1):
        outcome = ", ".join(crash.deaths) if crash.deaths else "no casualties"
        flag = " (hull breached)" if crash.catastrophic else ""
        lines.append(f"Crash {i}: threshold {crash.threshold}{flag}: {outcome}")

    lines += ["", status.format_text()]

    mc = result.monte_carlo
    if mc is not None:
        lines += [
            "",
            f"Monte Carlo ({mc.num_runs} runs):",
            f"  Mean deaths: {mc.mean_deaths:.3f} (max {mc.max_deaths})",
            f"  Damage P10/P50/P90: {mc.damage_p10} / {mc.damage_p50} / {mc.damage_p90}",
            f"  Catastrophic runs: {mc.catastrophic_rate:.1%}",
            "  Death rate:",
        ]
        lines.extend(f"    {name}: {rate:.1%}" for name, rate in mc.death_rate_by_passenger.items())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        scenario = load_scenario(args.scenario) if args.scenario else Scenario()
        scenario = _apply_overrides(scenario, args)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger.debug("running scenario: %s", scenario.model_dump())
    result = run_engine(scenario)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
