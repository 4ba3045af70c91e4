from pathlib import Path

# benchmark
PRINT_THRESHOLD = 20
SLOW_MAX_N = 10_000
BENCHMARK_SIZES = (6, 1_000, 10_000, 100_000)
INT_MIN, INT_MAX = -(2**31), 2**31 - 1

# statistics
SAMPLE_SEED = 0
STATISTICS_NS = tuple(range(2, 10)) + tuple(range(10, 100, 10)) + tuple(range(100, 1001, 100))
STATISTICS_SAMPLES = 20
RESULT_DIR = Path("logs/statistics.csv")
