"""Tests for the sweep driver, report rendering and trial statistics."""

import json

import pytest

from bucketprobe.experiments.common import make_rng, random_keys, seed_loop
from bucketprobe.experiments.report import render_table
from bucketprobe.experiments.run import main, parse_args, run
from bucketprobe.experiments.sweeps import SWEEPS, Params, run_trial, unique_points
from bucketprobe.hashing import crc_hash, mix_hash
from bucketprobe.metrics.stats import mean_ci95, summarize_groups
from bucketprobe.probing import linear_rehash


def test_render_table():
    rows = [{"Load": "0.1", "Entries": "   10"}, {"Load": "0.25", "Entries": "1000"}]
    text = render_table(rows, ["Load", "Entries"])
    lines = text.split("\n")
    assert lines[0] == "Load  Entries"
    assert lines[1] == "----  -------"
    assert lines[2] == " 0.1       10"
    assert lines[3] == "0.25     1000"


def test_render_table_missing_cell():
    text = render_table([{"a": "1"}], ["a", "bb"], underline="")
    assert text.split("\n") == ["a  bb", "1    "]


def test_params_inserts():
    assert Params(size=101, bucket_size=10, load=0.5).inserts == 51


def test_run_trial_without_overflow_counts_failures():
    keys = list(range(200))
    stats = run_trial(Params(50, 5, 4.0), keys, mix_hash, linear_rehash)
    assert stats.occupied + stats.failures == 200
    assert stats.occupied == 50
    assert stats.overflows == 0


def test_run_trial_with_overflow_has_no_failures_below_capacity():
    keys = list(range(51))
    stats = run_trial(Params(101, 10, 0.5), keys, crc_hash, linear_rehash,
                      overflow_next_bucket=True)
    assert stats.failures == 0
    assert stats.occupied == 51


def test_random_keys_reproducible():
    a = random_keys(make_rng(5), 100)
    b = random_keys(make_rng(5), 100)
    assert a == b
    assert all(isinstance(k, int) and 0 <= k < 2**64 for k in a)
    assert seed_loop(3) == [0, 1, 2]


def test_mean_ci95():
    assert mean_ci95([]) == (0.0, 0.0, 0.0, 0.0)
    assert mean_ci95([2.0]) == (2.0, 2.0, 2.0, 0.0)
    mean, low, high, std = mean_ci95([1.0, 2.0, 3.0])
    assert mean == pytest.approx(2.0)
    assert std == pytest.approx(1.0)
    assert low < mean < high


def test_summarize_groups():
    rows = [
        {"label": 8, "failures": 1},
        {"label": 8, "failures": 3},
        {"label": 16, "failures": 0},
    ]
    summary = summarize_groups(rows, ["label"], ["failures", "missing"])
    assert list(summary) == [(8,), (16,)]
    assert summary[(8,)]["failures"]["mean"] == pytest.approx(2.0)
    assert "missing" not in summary[(16,)]


def test_sweep_points_defaults():
    args = parse_args(["--exp", "bucket_small", "--size", "1009"])
    points = SWEEPS["bucket_small"].points(args)
    assert [label for label, _ in points] == list(range(6, 21))
    assert all(p.size == 1009 and p.load == 0.8 for _, p in points)

    args = parse_args(["--exp", "load", "--size", "1009"])
    points = SWEEPS["load"].points(args)
    assert len(points) == 19
    assert all(p.bucket_size == 127 for _, p in points)


def test_parse_args_default_size():
    args = parse_args(["--exp", "low_load"])
    assert args.size == 999_983
    assert not args.overflow
    assert not args.hash_within_bucket


def test_parse_args_config_override(tmp_path):
    config = tmp_path / "sweep.yaml"
    config.write_text("size: 2003\nseeds: 2\nprobe: quadratic\noverflow: true\n")
    args = parse_args(["--exp", "bucket_pow2", "--config", str(config), "--seeds", "4"])
    assert args.size == 2003
    assert args.probe == "quadratic"
    assert args.overflow
    assert args.seeds == 4, "command line wins over the config file"


def test_parse_args_rejects_unknown_config_key(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("bucket_size: 10\n")
    with pytest.raises(SystemExit):
        parse_args(["--exp", "load", "--config", str(config)])


@pytest.mark.parametrize("text", ["probe: cubic\n", "hash: foo\n", "seeds: 0\n"])
def test_parse_args_rejects_bad_config_value(tmp_path, text):
    config = tmp_path / "bad.yaml"
    config.write_text(text)
    with pytest.raises(SystemExit):
        parse_args(["--exp", "low_load", "--size", "307", "--config", str(config)])


@pytest.mark.parametrize("seeds", ["0", "-2"])
def test_parse_args_rejects_non_positive_seeds(seeds):
    with pytest.raises(SystemExit):
        parse_args(["--exp", "low_load", "--size", "307", "--loads", "0.1", "--seeds", seeds])


@pytest.mark.parametrize("argv", [
    ["--exp", "load", "--size", "100"],
    ["--exp", "bucket_small", "--size", "211", "--bucket_sizes", "6", "300"],
    ["--exp", "bucket_small", "--size", "211", "--bucket_sizes", "0"],
    ["--exp", "low_load", "--size", "0"],
])
def test_parse_args_rejects_invalid_table_sizes(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_duplicate_sweep_labels_run_once():
    args = parse_args([
        "--exp", "bucket_small", "--size", "211", "--bucket_sizes", "6", "10", "6",
        "--seeds", "2",
    ])
    output = run(args)
    rows = output["table"].strip().splitlines()[2:]
    assert [row.split()[0] for row in rows] == ["6", "10"]

    points = unique_points(SWEEPS["bucket_small"].points(args))
    assert [label for label, _ in points] == [6, 10]


def test_plot_requires_out_dir():
    with pytest.raises(SystemExit):
        parse_args(["--exp", "load", "--plot"])


def test_run_writes_metrics_and_figure(tmp_path):
    args = parse_args([
        "--exp", "bucket_small", "--size", "211", "--bucket_sizes", "6", "10",
        "--seeds", "2", "--overflow", "--out_dir", str(tmp_path), "--plot",
    ])
    output = run(args)

    assert "Bucket Size" in output["table"]
    assert "Overflows" in output["table"]

    with open(output["metrics_path"]) as f:
        metrics = json.load(f)
    assert metrics["experiment_id"] == "bucket_small"
    assert metrics["seeds"] == [0, 1]
    assert len(metrics["raw_trials"]) == 4
    assert [p["label"] for p in metrics["summary"]] == [6, 10]
    for trial in metrics["raw_trials"]:
        assert trial["failures"] == 0
        assert trial["occupied"] == int(211 * 0.8) + 1

    assert (tmp_path / "figures" / "bucket_small.pdf").exists()
    assert (tmp_path / "log.txt").exists()


def test_main_prints_table(capsys):
    main(["--exp", "low_load", "--size", "307", "--loads", "0.1", "0.2"])
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == [
        "Load", "Entries", "Load", "%", "Av", "Length", "Max", "Length", "Failures", "Overflows",
    ]
    assert len(out.strip().splitlines()) == 4
