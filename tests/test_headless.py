import json

import pytest

from flocksim.core.config import SimulationConfig, SimulationParameters
from flocksim.simulation.headless import HeadlessSimulation, STATS_INTERVAL, classification_counts


@pytest.fixture
def small_sim():
    params = SimulationParameters(target_population=15)
    config = SimulationConfig(width=300, height=200)
    return HeadlessSimulation(params, config, predator_orbit=40.0)


def test_run_collects_time_series(small_sim):
    results = small_sim.run(3 * STATS_INTERVAL, verbose=False)

    assert results["frames"] == 3 * STATS_INTERVAL
    assert results["final_boid_count"] == 15
    assert len(results["timeseries"]) == 3
    for sample in results["timeseries"]:
        assert sample["boid_count"] == 15
        assert sum(sample["classification"].values()) == 15
        assert sample["cohesion"] >= 0
        assert 0 <= sample["avg_speed"] <= 5.0 + 1e-6


def test_results_are_json_serialisable(small_sim):
    results = small_sim.run(STATS_INTERVAL, verbose=False)
    json.dumps(results)
    assert results["params"]["target_population"] == 15


def test_predator_follows_orbit(small_sim):
    assert small_sim.predator_position().length() == pytest.approx(40.0)
    small_sim.update()
    assert small_sim.predator_position().length() == pytest.approx(40.0)


def test_no_predator_by_default():
    sim = HeadlessSimulation(SimulationParameters(target_population=3))
    assert sim.predator_position() is None
    sim.update()
    assert sim.frame_count == 1


def test_empty_flock_reports_zero_metrics():
    sim = HeadlessSimulation(SimulationParameters(target_population=0))
    results = sim.run(5, verbose=False)
    assert results["avg_speed"] == 0.0
    assert results["timeseries"] == []
    assert sum(results["final_classification_counts"].values()) == 0


def test_classification_counts_keys(small_sim):
    small_sim.update()
    counts = classification_counts(small_sim.flock)
    assert set(counts) == {"none", "separation", "alignment", "cohesion", "avoidance"}
