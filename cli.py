import argparse
from dataclasses import replace
from pathlib import Path

from common.config import AppConfig, PrepConfig
from common.constants import (
    DEFAULT_DATASET_SIZES,
    DEFAULT_PAYLOAD_SIZES,
    DEFAULT_REFERENCE_WORKERS,
    DEFAULT_WORKER_COUNTS,
)
from common.errors import ConfigError
from common.env import load_env_config
from common.types import DatasetSize, PayloadSize


def _parse_dataset_size_arg(arg_value: str) -> tuple[PayloadSize, DatasetSize]:
    """
    Parses a dataset size argument in the format 'SIZE=N'.
    Example: --dataset-size 5=100000
    """
    size, sep, n = arg_value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"Invalid format: '{arg_value}'. Must be SIZE=N (e.g., 5=100000)"
        )
    try:
        return int(size), int(n)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid dataset size: '{arg_value}'. SIZE and N must be integers"
        ) from None


def _get_default_output_dir(raw_dir: Path) -> Path:
    """
    Prepped files land next to the raw directory: <raw>/../prepped
    """
    return raw_dir.parent / "prepped"


# Settings a .env file owns; only --log-level may accompany --env-file
_ENV_FILE_CONFLICTS: tuple[tuple[str, str], ...] = (
    ("--raw-dir", "raw_dir"),
    ("--out-dir", "out_dir"),
    ("--sizes", "sizes"),
    ("--workers", "workers"),
    ("--dataset-size", "dataset_sizes"),
    ("--reference-workers", "reference_workers"),
    ("--strict", "strict"),
    ("--plot", "plot"),
    ("--open-plot", "open_plot"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchprep",
        description="Prepare raw benchmark CSVs into latency/throughput summary files.",
    )

    parser.add_argument(
        "--raw-dir",
        default=None,
        help="Directory holding tuples_*, tc_* and st_* raw files",
    )

    parser.add_argument(
        "--out-dir",
        default=None,
        help="Directory to write prepped files to. Defaults to <raw-dir>/../prepped",
    )

    parser.add_argument(
        "--env-file",
        default=None,
        help="Read the whole configuration from a .env file; only --log-level may accompany it",
    )

    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=None,
        help="Payload sizes to process (default: 5 50 200)",
    )

    parser.add_argument(
        "--workers",
        nargs="+",
        type=int,
        default=None,
        help="Worker counts to process (default: 1 2 4 8 16 32)",
    )

    parser.add_argument(
        "--dataset-size",
        action="append",
        type=_parse_dataset_size_arg,
        default=None,
        dest="dataset_sizes",
        help="Payload size to dataset size mapping in SIZE=N format. Can be repeated.",
    )

    parser.add_argument(
        "--reference-workers",
        type=int,
        default=None,
        help="Worker count baked into tuples_/tc_ file names (default: 32)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail a file on the first malformed row instead of skipping it",
    )

    parser.add_argument(
        "--plot",
        action="store_true",
        help="Write scaling_lat.png and scaling_tp.png to the output directory",
    )

    parser.add_argument(
        "--open-plot",
        action="store_true",
        help="Open the latency scaling plot when finished (implies --plot)",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Route messages through logging at this level instead of printing",
    )

    return parser


def parse_cli_args(argv: list[str] | None = None) -> AppConfig:
    """
    Parses command line arguments and returns a unified AppConfig object.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file:
        conflicts = [
            flag
            for flag, dest in _ENV_FILE_CONFLICTS
            if getattr(args, dest) is not None and getattr(args, dest) is not False
        ]
        if conflicts:
            parser.error(
                f"{', '.join(conflicts)} cannot be combined with --env-file"
            )

        try:
            app = load_env_config(env_path=Path(args.env_file).expanduser().resolve())
        except ConfigError as e:
            parser.error(str(e))
        return replace(app, log_level=args.log_level)

    if not args.raw_dir:
        parser.error("--raw-dir is required unless --env-file is given")

    raw_dir = Path(args.raw_dir).expanduser().resolve()
    out_dir = (
        Path(args.out_dir).expanduser().resolve()
        if args.out_dir
        else _get_default_output_dir(raw_dir)
    )

    dataset_sizes = (
        dict(args.dataset_sizes) if args.dataset_sizes else dict(DEFAULT_DATASET_SIZES)
    )

    cfg = PrepConfig(
        raw_dir=raw_dir,
        out_dir=out_dir,
        payload_sizes=tuple(args.sizes) if args.sizes else DEFAULT_PAYLOAD_SIZES,
        worker_counts=tuple(args.workers) if args.workers else DEFAULT_WORKER_COUNTS,
        size_to_dataset_size=dataset_sizes,
        reference_workers=(
            DEFAULT_REFERENCE_WORKERS
            if args.reference_workers is None
            else int(args.reference_workers)
        ),
        strict=bool(args.strict),
    )

    app = AppConfig(
        cfg=cfg,
        plot=bool(args.plot or args.open_plot),
        open_plot=bool(args.open_plot),
        log_level=args.log_level,
    )
    return app
