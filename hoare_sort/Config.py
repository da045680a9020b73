from pathlib import Path

SAMPLE_SEED = 20221109
MAX_SAMPLE_TIME_MS = 2000

RESULT_DIR = Path("logs/statistics.csv")
STATISTICS_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1001, 100))

DEMO_ARRAY = [40, 10, 100, 90, 20, 60, 30]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

__all__ = ["SAMPLE_SEED", "MAX_SAMPLE_TIME_MS", "RESULT_DIR", "STATISTICS_NS", "DEMO_ARRAY", "LOG_FORMAT"]
