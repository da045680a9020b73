import argparse
import logging
import sys
from typing import Optional, Union

from .Config import *
from .sorting_algorithms.impl.hoare_quick_sort import sort
from .sorting_algorithms.impl.iterative_hoare_quick_sort import iterative_sort

logger = logging.getLogger(__name__)


def number(s: str) -> Union[int, float]:
    try:
        return int(s)
    except ValueError:
        return float(s)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hoare-sort", description="Sort numbers in place with Hoare-partition quick sort.")
    parser.add_argument("numbers", nargs="*", type=number, help=f"numbers to sort (default: {DEMO_ARRAY})")
    parser.add_argument("--iterative", action="store_true", help="use the explicit-stack driver instead of recursion")
    parser.add_argument("--statistics", action="store_true", help=f"write operation count statistics to {RESULT_DIR}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    if args.statistics:
        # pulls in numpy, pandas and tqdm, which plain sorting never needs
        from .generate_statistics import generate_statistics, sort_result

        generate_statistics()
        sort_result()
        return 0

    data = args.numbers or list(DEMO_ARRAY)
    driver = iterative_sort if args.iterative else sort
    logger.debug("sorting %d elements with %s", len(data), driver.__name__)
    try:
        print("Result", driver(data))
    except RecursionError:
        print("error: recursion limit reached, retry with --iterative", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
