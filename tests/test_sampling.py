"""Sampler: one session per line, reproducible from a master key."""

from __future__ import annotations

import io

import pytest

from fair_random import config
from fair_random.cli.sample import main as sample_main
from fair_random.core.errors import InvalidRangeError
from fair_random.core.seeding import derive_seed
from fair_random.draws import request_draws
from fair_random.sampling import sample_lines, session_seed, write_lines
from fair_random.stream import NumberStream


def test_sample_lines_reproducible_with_master():
    """Same master key, same lines; every value in range."""
    a = list(sample_lines(5, 100, columns=3, master="m"))
    b = list(sample_lines(5, 100, columns=3, master="m"))
    assert a == b
    assert len(a) == 5
    assert all(len(line) == 3 for line in a)
    assert all(0 <= v < 100 for line in a for v in line)


def test_sample_line_matches_session_seed_draws():
    """Line i is the draw sequence of derive_seed(master, i)."""
    lines = list(sample_lines(3, 1000, columns=2, master="m"))
    for i, line in enumerate(lines):
        expected = request_draws(NumberStream(derive_seed("m", i)), 1000, 2)
        assert line == list(expected)


def test_distinct_master_distinct_lines():
    """Different master keys give different batches."""
    a = list(sample_lines(20, 2**32, master="a"))
    b = list(sample_lines(20, 2**32, master="b"))
    assert a != b


def test_session_seed_without_master_is_random():
    """Without a master key seeds come from the OS."""
    s1 = session_seed(None, 0)
    s2 = session_seed(None, 0)
    assert len(s1) == 32
    assert s1 != s2


def test_write_lines_tab_separated_with_progress():
    """Lines are tab-separated; progress every 100 lines and at the end."""
    out = io.StringIO()
    calls = []
    lines = [[i, i + 1] for i in range(250)]
    n = write_lines(lines, out, total=250, on_progress=lambda done, total: calls.append((done, total)))
    assert n == 250
    text = out.getvalue().splitlines()
    assert text[0] == "0\t1"
    assert len(text) == 250
    assert calls == [(100, 250), (200, 250), (250, 250)]


def test_sample_cli_stdout(capsys):
    """Without --out, lines go to stdout."""
    assert sample_main(["--seed", "k", "--count", "3", "--range", "10", "--columns", "2"]) == 0
    rows = capsys.readouterr().out.splitlines()
    assert len(rows) == 3
    for row in rows:
        vals = [int(x) for x in row.split("\t")]
        assert len(vals) == 2
        assert all(0 <= v < 10 for v in vals)


def test_sample_cli_out_file(tmp_path, capsys):
    """With --out, lines go to the file and progress to stdout."""
    out = tmp_path / "draws.tsv"
    assert sample_main(["--seed", "k", "--count", "4", "--range", "10", "--out", str(out)]) == 0
    assert len(out.read_text(encoding="utf-8").splitlines()) == 4
    printed = capsys.readouterr().out
    assert "Results will be saved to" in printed
    assert "Current status: 4/4" in printed


def test_sample_cli_zero_range_fails(capsys):
    """Range 0 exits 1 with a message on stderr."""
    assert sample_main(["--seed", "k", "--count", "2", "--range", "0"]) == 1
    assert "sample failed" in capsys.readouterr().err


def test_batch_reads_config_once(monkeypatch):
    """A batch reads config.yaml a fixed number of times, not once per session."""
    calls = []
    real_load = config._load_yaml

    def counting_load():
        calls.append(1)
        return real_load()

    monkeypatch.setattr(config, "_load_yaml", counting_load)
    lines = list(sample_lines(500, 100, master="m"))
    assert len(lines) == 500
    assert len(calls) <= 2


def test_sample_lines_rejects_bad_range_before_iteration():
    """Invalid arguments raise on the call itself, not on the first next()."""
    with pytest.raises(InvalidRangeError):
        sample_lines(3, 0, master="m")


def test_sample_cli_bad_range_keeps_out_file(tmp_path, capsys):
    """A rejected request never opens (and truncates) the output file."""
    out = tmp_path / "draws.tsv"
    out.write_text("previous\n", encoding="utf-8")
    assert sample_main(["--seed", "k", "--count", "2", "--range", "0", "--out", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "previous\n"
    captured = capsys.readouterr()
    assert "sample failed" in captured.err
    assert "Results will be saved to" not in captured.out
