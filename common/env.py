from pathlib import Path

from dotenv import dotenv_values

from common.config import AppConfig, PrepConfig
from common.constants import (
    DEFAULT_DATASET_SIZES,
    DEFAULT_PAYLOAD_SIZES,
    DEFAULT_REFERENCE_WORKERS,
    DEFAULT_WORKER_COUNTS,
)
from common.errors import ConfigError
from common.types import DatasetSize, PayloadSize


def _require_abs_path(var: str, raw: str | None) -> Path:
    if not raw:
        raise ConfigError(f"Missing {var} in .env")
    p = Path(raw)
    if not p.is_absolute():
        raise ConfigError(f"{var} must be an absolute path. Got: {raw}")
    return p


def _parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _parse_ints(var: str, raw: str | None, default: tuple[int, ...]) -> tuple[int, ...]:
    if not raw:
        return default
    try:
        return tuple(int(x) for x in raw.replace(",", " ").split())
    except ValueError:
        raise ConfigError(f"{var} must be a list of integers. Got: {raw}") from None


def parse_dataset_sizes(raw: str | None) -> dict[PayloadSize, DatasetSize]:
    """
    Parses 'SIZE=N' pairs separated by whitespace or commas,
    e.g. '5=100000 50=250000'.
    """
    if not raw:
        return dict(DEFAULT_DATASET_SIZES)

    out: dict[PayloadSize, DatasetSize] = {}
    for item in raw.replace(",", " ").split():
        size, sep, n = item.partition("=")
        if not sep:
            raise ConfigError(f"Invalid dataset size entry '{item}', expected SIZE=N")
        try:
            out[int(size)] = int(n)
        except ValueError:
            raise ConfigError(f"Invalid dataset size entry '{item}'") from None
    return out


def load_env_config(*, env_path: Path) -> AppConfig:
    """
    Loads config from .env and enforces that the raw/output directories are absolute.
    """
    values = dotenv_values(env_path) if env_path.exists() else {}
    if not values:
        raise ConfigError(f"Missing or empty env file: {env_path}")

    raw_dir = _require_abs_path("RAW_DIR", values.get("RAW_DIR"))
    out_dir = _require_abs_path("OUT_DIR", values.get("OUT_DIR"))

    payload_sizes = _parse_ints(
        "PAYLOAD_SIZES", values.get("PAYLOAD_SIZES"), DEFAULT_PAYLOAD_SIZES
    )
    worker_counts = _parse_ints(
        "WORKER_COUNTS", values.get("WORKER_COUNTS"), DEFAULT_WORKER_COUNTS
    )
    ref = _parse_ints(
        "REFERENCE_WORKERS",
        values.get("REFERENCE_WORKERS"),
        (DEFAULT_REFERENCE_WORKERS,),
    )
    if len(ref) != 1:
        raise ConfigError(f"REFERENCE_WORKERS must be a single integer. Got: {ref}")
    reference_workers = ref[0]

    cfg = PrepConfig(
        raw_dir=raw_dir,
        out_dir=out_dir,
        payload_sizes=payload_sizes,
        worker_counts=worker_counts,
        size_to_dataset_size=parse_dataset_sizes(values.get("DATASET_SIZES")),
        reference_workers=reference_workers,
        strict=_parse_bool(values.get("STRICT"), default=False),
    )

    open_plot = _parse_bool(values.get("OPEN_PLOT"), default=False)
    plot = _parse_bool(values.get("PLOT"), default=False) or open_plot

    return AppConfig(cfg=cfg, plot=plot, open_plot=open_plot)
