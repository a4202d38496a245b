from pathlib import Path

import export.open_file as open_file_mod
import main
from export.open_file import open_file
from tests.conftest import RecordingReporter


def _args(raw: Path, out: Path, *extra: str) -> list[str]:
    return ["--raw-dir", str(raw), "--out-dir", str(out), "--workers", "1", "2", *extra]


def test_main_succeeds_and_prints_summary(raw_store: Path, tmp_path: Path, capsys):
    out = tmp_path / "out"

    code = main.main(_args(raw_store, out))

    assert code == 0
    assert (out / "prepped_scaling_tp_1.csv").is_file()
    printed = capsys.readouterr().out
    assert "SCALING SUMMARY" in printed
    assert "p99_latency" in printed


def test_main_reports_partial_failure(raw_store: Path, tmp_path: Path, capsys):
    (raw_store / "st_1_5.csv").unlink()

    code = main.main(_args(raw_store, tmp_path / "out"))

    assert code == 1
    assert "failed stage(s)" in capsys.readouterr().out


def test_main_rejects_invalid_grid(raw_store: Path, tmp_path: Path):
    code = main.main(_args(raw_store, tmp_path / "out", "--sizes", "7"))

    assert code == 2


def test_main_opens_plot(raw_store: Path, tmp_path: Path, monkeypatch):
    opened: list[Path] = []
    monkeypatch.setattr(main, "open_file", lambda p, reporter=None: opened.append(p))

    code = main.main(_args(raw_store, tmp_path / "out", "--open-plot"))

    assert code == 0
    assert opened == [(tmp_path / "out").resolve() / "scaling_lat.png"]


def test_open_file_never_raises(tmp_path: Path, monkeypatch):
    rep = RecordingReporter()
    assert open_file(tmp_path / "missing.png", reporter=rep) is False

    png = tmp_path / "plot.png"
    png.write_bytes(b"")

    def boom(*args, **kwargs):
        raise OSError("no viewer")

    monkeypatch.setattr(open_file_mod, "_viewer_command", lambda p: ["xdg-open", str(p)])
    monkeypatch.setattr(open_file_mod.subprocess, "Popen", boom)

    assert open_file(png, reporter=rep) is False
    assert any("no viewer" in w for w in rep.warnings)


def test_main_reports_skipped_rows(raw_store: Path, tmp_path: Path, capsys):
    with (raw_store / "st_1_5.csv").open("a") as f:
        f.write("not|a|row\n")

    code = main.main(_args(raw_store, tmp_path / "out"))

    assert code == 0
    assert "Skipped 1 malformed raw row(s)" in capsys.readouterr().out
