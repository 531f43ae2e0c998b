"""Default configuration values for structure-metrics."""

# Thread pool size for independent engine stages (1 = sequential)
DEFAULT_MAX_WORKERS = 1

# Minimum number of types before the engine bothers with a thread pool
DEFAULT_PARALLEL_THRESHOLD = 500
