"""
Avoids loose strings and makes refactors safer.
"""

# ---- Normalized measurement rows ----
KEY = "key"
LATENCY = "latency"
TX = "tx"
PER_WORKER_TX = "per_worker_tx"

# ---- Distributions ----
VALUE = "value"
COUNT = "count"
CUM_BEFORE = "cum_before"

# ---- Scaling curves ----
DATASET_SIZE = "dataset_size"
METRIC = "metric"

# ---- Console / plot summaries ----
WORKERS = "workers"
SIZE = "size"
MEAN_LATENCY = "mean_latency"
THROUGHPUT = "throughput"
P50_LATENCY = "p50_latency"
P99_LATENCY = "p99_latency"
