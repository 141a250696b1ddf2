from __future__ import annotations

import json

from dspfeat.bench.feature_bench import bench_cases, main, run_bench


def test_run_bench_covers_every_feature():
    summaries = run_bench(frames=3, frame_size=1024, sample_rate=16000, seed=0)
    assert [s.name for s in summaries] == list(bench_cases(16000))
    assert all(s.calls == 3 for s in summaries)
    assert all(s.realtime_factor > 0.0 for s in summaries)
    assert all(s.p50_ms >= 0.0 for s in summaries)


def test_main_json_output(capsys):
    rc = main(["--frames", "2", "--frame-size", "512", "--json"])
    assert rc == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["tool"] == "dspfeat.bench.feature_bench"
    assert len(doc["results"]) == len(bench_cases(16000))


def test_main_table_output(capsys):
    assert main(["--frames", "1", "--frame-size", "256"]) == 0
    out = capsys.readouterr().out
    assert "compute_features" in out
