"""Multi-seed uniformity: one draw per distinct seed, bucketed and checked for flatness."""

from __future__ import annotations

import pytest

from fair_random import config
from fair_random.cli.uniformity import main as uniformity_main
from fair_random.stats.uniformity import check_uniformity


@pytest.mark.slow
def test_uniformity_100k_seeds_range_100():
    """100,000 seeds, range 100, 10 buckets of width 10: spread within 5% of the target frequency."""
    result = check_uniformity(n_seeds=100_000, range_=100, interval_count=10, master="uniformity-test", max_spread=0.05)
    report = result.report
    assert report.draws == 100_000
    assert report.interval_count == 10
    assert report.interval_size == 10
    assert report.target_freq == 10_000
    assert report.spread_to_target <= 0.05
    assert result.passed


@pytest.mark.slow
def test_uniformity_rejection_policy():
    """REJECTION policy also passes the uniformity check."""
    result = check_uniformity(
        n_seeds=20_000, range_=10, interval_count=10, master="rej", max_spread=0.2, policy="rejection"
    )
    assert result.report.draws == 20_000
    assert result.passed


def test_uniformity_small_run_uses_given_threshold():
    """Pass/fail follows the max_spread argument."""
    loose = check_uniformity(n_seeds=2_000, range_=10, interval_count=10, master="x", max_spread=1.0)
    assert loose.passed
    strict = check_uniformity(n_seeds=2_000, range_=10, interval_count=10, master="x", max_spread=0.0)
    assert not strict.passed
    assert strict.report.spread_abs > 0


def test_uniformity_cli_exit_codes(capsys):
    """CLI exits 0 on PASS and 1 on FAIL."""
    args = ["--seeds", "2000", "--range", "10", "--intervals", "10", "--seed", "x"]
    assert uniformity_main(args + ["--max-spread", "1.0"]) == 0
    assert "PASS" in capsys.readouterr().out
    assert uniformity_main(args + ["--max-spread", "0"]) == 1
    assert "FAIL" in capsys.readouterr().out


def test_uniformity_cli_bad_intervals(capsys):
    """More intervals than the range exits 1 with a message."""
    assert uniformity_main(["--seeds", "10", "--range", "10", "--intervals", "20"]) == 1
    assert "uniformity check failed" in capsys.readouterr().err


def test_uniformity_config_reads_do_not_scale_with_seeds(monkeypatch):
    """Config is resolved per run; 1,000 seeds cost the same config reads as 10."""
    calls = []
    real_load = config._load_yaml

    def counting_load():
        calls.append(1)
        return real_load()

    monkeypatch.setattr(config, "_load_yaml", counting_load)
    check_uniformity(n_seeds=10, range_=10, interval_count=10, master="cfg", max_spread=1.0)
    small = len(calls)
    calls.clear()
    check_uniformity(n_seeds=1_000, range_=10, interval_count=10, master="cfg", max_spread=1.0)
    assert len(calls) == small
    assert small <= 6


def test_uniformity_cli_unwritable_out_dir(capsys, tmp_path):
    """Artifact write failures exit 1 with a message instead of a traceback."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    args = ["--seeds", "10", "--range", "10", "--intervals", "10", "--out-dir", str(blocker / "sub")]
    assert uniformity_main(args) == 1
    assert "uniformity check failed" in capsys.readouterr().err
