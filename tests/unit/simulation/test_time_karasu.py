"""
Tiny tests for time_karasu.py.  (We don't time anything here - just logic.)
"""

import karasu.simulation.time_karasu as tk


def test_measure_sim_times_logs(capinfo):
    gps = tk.measure_sim_times(n_games=20, seed=21, strategy="first", fruit=2, tokens=2)
    assert gps >= 0.0

    stages = {(rec.benchmark, rec.stage) for rec in capinfo.records if hasattr(rec, "benchmark")}
    assert ("time_karasu", "simulation") in stages
    assert ("batch", "simulation") in stages
    assert ("single_game", "simulation") in stages

    batch = next(rec for rec in capinfo.records if getattr(rec, "benchmark", None) == "batch")
    assert batch.n_games == 20
    assert 0 <= batch.player_wins <= 20
