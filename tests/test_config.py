from pathlib import Path

import pytest

from common.config import PrepConfig, validate_config
from common.env import load_env_config, parse_dataset_sizes
from common.errors import ConfigError


def test_default_grid_reports_unused_mapping():
    cfg = PrepConfig(raw_dir=Path("/raw"))

    assert cfg.payload_sizes == (5, 50, 200)
    assert cfg.worker_counts == (1, 2, 4, 8, 16, 32)
    assert cfg.unused_dataset_sizes() == (500,)
    validate_config(cfg)


def test_dataset_size_lookup():
    cfg = PrepConfig(raw_dir=Path("/raw"))

    assert cfg.dataset_size(50) == 250000
    with pytest.raises(ConfigError):
        cfg.dataset_size(7)


@pytest.mark.parametrize(
    "overrides",
    [
        {"payload_sizes": ()},
        {"worker_counts": ()},
        {"payload_sizes": (5, 5)},
        {"worker_counts": (0, 1)},
        {"payload_sizes": (5, 7)},
        {"reference_workers": 0},
    ],
)
def test_invalid_grids_are_rejected(overrides: dict):
    cfg = PrepConfig(raw_dir=Path("/raw"), **overrides)

    with pytest.raises(ConfigError):
        validate_config(cfg)


def test_parse_dataset_sizes():
    assert parse_dataset_sizes("5=10, 50=20") == {5: 10, 50: 20}
    assert parse_dataset_sizes(None)[500] == 1000000

    with pytest.raises(ConfigError):
        parse_dataset_sizes("5:10")


def test_load_env_config(tmp_path: Path):
    env = tmp_path / ".env"
    env.write_text(
        f"RAW_DIR={tmp_path / 'raw'}\n"
        f"OUT_DIR={tmp_path / 'out'}\n"
        "PAYLOAD_SIZES=5 50\n"
        "WORKER_COUNTS=1,4\n"
        "DATASET_SIZES=5=1 50=2\n"
        "STRICT=yes\n"
        "OPEN_PLOT=1\n"
    )

    app = load_env_config(env_path=env)

    assert app.cfg.raw_dir == tmp_path / "raw"
    assert app.cfg.payload_sizes == (5, 50)
    assert app.cfg.worker_counts == (1, 4)
    assert app.cfg.size_to_dataset_size == {5: 1, 50: 2}
    assert app.cfg.reference_workers == 32
    assert app.cfg.strict is True
    assert app.plot is True and app.open_plot is True


def test_env_requires_absolute_paths(tmp_path: Path):
    env = tmp_path / ".env"
    env.write_text("RAW_DIR=raw\nOUT_DIR=/out\n")

    with pytest.raises(ConfigError, match="RAW_DIR"):
        load_env_config(env_path=env)


def test_env_file_must_exist(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_env_config(env_path=tmp_path / "missing.env")
