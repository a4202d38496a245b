from common.types import DatasetSize, PayloadSize, WorkerCount

DEFAULT_PAYLOAD_SIZES: tuple[PayloadSize, ...] = (5, 50, 200)
DEFAULT_WORKER_COUNTS: tuple[WorkerCount, ...] = (1, 2, 4, 8, 16, 32)

# 500 is mapped but not part of DEFAULT_PAYLOAD_SIZES; reported at startup.
DEFAULT_DATASET_SIZES: dict[PayloadSize, DatasetSize] = {
    5: 100000,
    50: 250000,
    200: 500000,
    500: 1000000,
}

DEFAULT_REFERENCE_WORKERS: WorkerCount = 32

RAW_DELIMITER: str = "|"
OUT_DELIMITER: str = " "


STAGE_TUPLES: str = "tuples"
STAGE_TC: str = "tc"
STAGE_ST: str = "st"
STAGE_LAT_VS_TP: str = "lat_vs_tp"
STAGE_SCALING_LAT: str = "scaling_lat"
STAGE_SCALING_TP: str = "scaling_tp"
