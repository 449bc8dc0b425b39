"""Tests for engine/runner.py and scenario loading.

Covers:
  - Seeded runs are reproducible
  - Result internals agree (deaths, damage, outcomes, crash index)
  - crash_count = 0 and empty passenger lists
  - Monte-Carlo aggregation: bounds, consistency, weight bias
  - run_engine routing
  - YAML scenario loading (full, partial, empty, unknown material)
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from canoe_sim.config import Material, Scenario, SimulationConfig, load_scenario
from canoe_sim.engine.runner import run_engine, run_monte_carlo, run_scenario

SCENARIOS_DIR = Path(__file__).parent.parent / "scenarios"


def _with_sim(scenario: Scenario, **kwargs) -> Scenario:
    sim = SimulationConfig(**{**scenario.simulation.model_dump(), **kwargs})
    return scenario.model_copy(update={"simulation": sim})


# ═══════════════════════════════════════════════════════════════════════════
# Single run
# ═══════════════════════════════════════════════════════════════════════════

class TestRunScenario:

    def test_reproducible(self, scenario: Scenario):
        a = run_scenario(scenario, seed=7)
        b = run_scenario(scenario, seed=7)
        assert a.model_dump() == b.model_dump()

    def test_seed_recorded(self, scenario: Scenario):
        assert run_scenario(scenario, seed=3).seed == 3

    def test_internal_consistency(self, scenario: Scenario):
        scenario = _with_sim(scenario, crash_count=5)
        for seed in range(20):
            result = run_scenario(scenario, seed=seed)
            dead = [o for o in result.passengers if o.dead]

            assert len(result.crashes) == 5
            assert result.total_deaths == len(dead)
            assert result.final_status.damage == pytest.approx(0.25 * len(dead))
            assert sorted(result.final_status.passengers) == sorted(
                o.name for o in result.passengers if not o.dead
            )
            for o in result.passengers:
                assert (o.died_in_crash is not None) == o.dead
                if o.dead:
                    assert o.name in result.crashes[o.died_in_crash - 1].deaths

    def test_crash_reports_chain(self, scenario: Scenario):
        scenario = _with_sim(scenario, crash_count=4)
        result = run_scenario(scenario, seed=11)
        for prev, nxt in zip(result.crashes, result.crashes[1:]):
            assert nxt.damage_before == prev.damage_after

    def test_zero_crashes(self, scenario: Scenario):
        result = run_scenario(_with_sim(scenario, crash_count=0), seed=1)
        assert result.crashes == []
        assert result.final_status.damage == 0.0
        assert not any(o.dead for o in result.passengers)

    def test_no_passengers(self):
        result = run_scenario(Scenario(passengers=[]), seed=1)
        assert result.total_deaths == 0
        assert result.final_status.passengers == []


# ═══════════════════════════════════════════════════════════════════════════
# Monte Carlo
# ═══════════════════════════════════════════════════════════════════════════

class TestMonteCarlo:

    @pytest.fixture
    def mc_scenario(self, scenario: Scenario) -> Scenario:
        return _with_sim(scenario, random_seed=100, monte_carlo_runs=400, crash_count=2)

    def test_summary_attached(self, mc_scenario: Scenario):
        result = run_monte_carlo(mc_scenario)
        mc = result.monte_carlo
        assert mc is not None
        assert mc.num_runs == 400
        assert set(mc.death_rate_by_passenger) == {"Isaac", "Axel", "Micah"}

    def test_bounds(self, mc_scenario: Scenario):
        mc = run_monte_carlo(mc_scenario).monte_carlo
        assert all(0.0 <= r <= 1.0 for r in mc.death_rate_by_passenger.values())
        assert 0.0 <= mc.catastrophic_rate <= 1.0
        assert mc.damage_p10 <= mc.damage_p50 <= mc.damage_p90
        assert 0 <= mc.mean_deaths <= mc.max_deaths <= 3

    def test_mean_deaths_equals_sum_of_rates(self, mc_scenario: Scenario):
        mc = run_monte_carlo(mc_scenario).monte_carlo
        assert mc.mean_deaths == pytest.approx(sum(mc.death_rate_by_passenger.values()))

    def test_heavier_passenger_dies_more_often(self, scenario: Scenario):
        mc = run_monte_carlo(_with_sim(scenario, random_seed=1, monte_carlo_runs=2_000)).monte_carlo
        rates = mc.death_rate_by_passenger
        assert rates["Isaac"] > rates["Axel"]

    def test_reproducible(self, mc_scenario: Scenario):
        assert run_monte_carlo(mc_scenario).model_dump() == run_monte_carlo(mc_scenario).model_dump()

    def test_duplicate_names_kept_apart(self):
        scenario = Scenario.model_validate({
            "passengers": [{"name": "Sam", "weight": 80}, {"name": "Sam", "weight": 120}],
            "simulation": {"random_seed": 5, "monte_carlo_runs": 50},
        })
        mc = run_monte_carlo(scenario).monte_carlo
        assert list(mc.death_rate_by_passenger) == ["Sam", "Sam #2"]

    def test_generated_key_never_overwrites_real_name(self):
        scenario = Scenario.model_validate({
            "passengers": [
                {"name": "Sam", "weight": 80},
                {"name": "Sam", "weight": 120},
                {"name": "Sam #2", "weight": 100},
            ],
            "simulation": {"random_seed": 5, "monte_carlo_runs": 50},
        })
        mc = run_monte_carlo(scenario).monte_carlo
        assert list(mc.death_rate_by_passenger) == ["Sam", "Sam #2", "Sam #2 #3"]
        assert mc.mean_deaths == pytest.approx(sum(mc.death_rate_by_passenger.values()))


# ═══════════════════════════════════════════════════════════════════════════
# Routing
# ═══════════════════════════════════════════════════════════════════════════

class TestRunEngine:

    def test_single_run(self, scenario: Scenario):
        result = run_engine(scenario)
        assert result.monte_carlo is None
        assert result.seed == 7

    def test_monte_carlo(self, scenario: Scenario):
        result = run_engine(_with_sim(scenario, monte_carlo_runs=10))
        assert result.monte_carlo is not None
        assert result.monte_carlo.num_runs == 10


# ═══════════════════════════════════════════════════════════════════════════
# YAML loading
# ═══════════════════════════════════════════════════════════════════════════

class TestLoadScenario:

    def test_demo_file(self):
        s = load_scenario(SCENARIOS_DIR / "demo.yaml")
        assert s.canoe.material is Material.WOOD
        assert s.canoe.length == 5
        assert [p.name for p in s.passengers] == ["Isaac", "Axel", "Micah"]
        assert [p.weight for p in s.passengers] == [250, 90, 170]

    def test_partial_file_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "kevlar.yaml"
        path.write_text(yaml.safe_dump({"canoe": {"material": "Kevlar"}}))
        s = load_scenario(path)
        assert s.canoe.material is Material.KEVLAR
        assert s.canoe.width == 0.85
        assert len(s.passengers) == 3

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_scenario(path) == Scenario()

    def test_unknown_material(self, tmp_path: Path):
        path = tmp_path / "ti.yaml"
        path.write_text("canoe:\n  material: Titanium\n")
        assert load_scenario(path).canoe.material is Material.OTHER

    def test_invalid_values_rejected(self, tmp_path: Path):
        from pydantic import ValidationError

        path = tmp_path / "bad.yaml"
        path.write_text("passengers:\n  - name: Ghost\n    weight: 0\n")
        with pytest.raises(ValidationError):
            load_scenario(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "nope.yaml")
