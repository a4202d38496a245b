from pathlib import Path

import pytest

from cli import parse_cli_args


def test_flags_build_prep_config(tmp_path: Path):
    app = parse_cli_args(
        [
            "--raw-dir",
            str(tmp_path / "raw"),
            "--sizes",
            "5",
            "50",
            "--workers",
            "1",
            "2",
            "--dataset-size",
            "5=10",
            "--dataset-size",
            "50=20",
            "--strict",
            "--log-level",
            "INFO",
        ]
    )

    cfg = app.cfg
    assert cfg.raw_dir == (tmp_path / "raw").resolve()
    assert cfg.out_dir == (tmp_path / "prepped").resolve()
    assert cfg.payload_sizes == (5, 50)
    assert cfg.worker_counts == (1, 2)
    assert cfg.size_to_dataset_size == {5: 10, 50: 20}
    assert cfg.strict is True
    assert app.plot is False
    assert app.log_level == "INFO"


def test_open_plot_implies_plot(tmp_path: Path):
    app = parse_cli_args(["--raw-dir", str(tmp_path), "--open-plot"])

    assert app.plot is True
    assert app.open_plot is True


def test_raw_dir_is_required_without_env_file():
    with pytest.raises(SystemExit) as exc:
        parse_cli_args([])

    assert exc.value.code == 2


def test_bad_dataset_size_is_an_argument_error(tmp_path: Path):
    with pytest.raises(SystemExit):
        parse_cli_args(["--raw-dir", str(tmp_path), "--dataset-size", "5"])


def test_env_file_replaces_flags(tmp_path: Path):
    env = tmp_path / ".env"
    env.write_text(f"RAW_DIR={tmp_path}\nOUT_DIR={tmp_path / 'out'}\nWORKER_COUNTS=8\n")

    app = parse_cli_args(["--env-file", str(env)])

    assert app.cfg.worker_counts == (8,)
    assert app.cfg.out_dir == tmp_path / "out"


def test_env_file_rejects_other_config_flags(tmp_path: Path, capsys):
    env = tmp_path / ".env"
    env.write_text(f"RAW_DIR={tmp_path}\nOUT_DIR={tmp_path / 'out'}\n")

    with pytest.raises(SystemExit) as exc:
        parse_cli_args(["--env-file", str(env), "--plot", "--workers", "4"])

    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "--workers, --plot cannot be combined with --env-file" in err


def test_env_file_allows_log_level(tmp_path: Path):
    env = tmp_path / ".env"
    env.write_text(f"RAW_DIR={tmp_path}\nOUT_DIR={tmp_path / 'out'}\n")

    app = parse_cli_args(["--env-file", str(env), "--log-level", "DEBUG"])

    assert app.log_level == "DEBUG"
    assert app.plot is False
