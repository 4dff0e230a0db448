import logging
import sys
import time
from typing import Sequence, TextIO

from pydantic import ValidationError

from frequency import FrequencyTable
from settings import Settings
from strategies import Strategy
from topk import print_top_k

USAGE = "Usage: topk-words [FILES...]"

log = logging.getLogger(__name__)


def run_benchmark(
    strategy: Strategy,
    filenames: Sequence[str],
    settings: Settings,
    out: TextIO,
) -> bool:
    print(f"Starting test: {strategy.label}", file=out)

    start = time.perf_counter()
    table = FrequencyTable()

    for i in range(settings.test_count):
        table.clear()
        if not strategy.run(filenames, table, max_workers=settings.max_workers):
            print("Test failed\n", file=out)
            return False

        log.debug("%s: iteration %d done", strategy, i)

    print_top_k(table, settings.top_k, out)
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)
    print(f"Average elapsed time is {elapsed_us // settings.test_count} us\n", file=out)

    return True


def main(argv: Sequence[str] | None = None) -> int:
    filenames = list(sys.argv[1:] if argv is None else argv)
    if not filenames:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        settings = Settings()
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )

    ok = all(
        run_benchmark(strategy, filenames, settings, sys.stdout)
        for strategy in settings.strategies
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
