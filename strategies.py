import logging
import threading
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from enum import StrEnum
from typing import Sequence

from file_counter import OpenError, count_file
from frequency import FrequencyTable, merge_into

log = logging.getLogger(__name__)


def count_files_sequential(filenames: Sequence[str], table: FrequencyTable) -> bool:
    # Stops at the first file that cannot be opened.
    for filename in filenames:
        result = count_file(filename)
        if isinstance(result, OpenError):
            return False

        merge_into(result, table)

    return True


def count_file_locked(
    filename: str, table: FrequencyTable, lock: threading.Lock
) -> bool:
    result = count_file(filename)
    if isinstance(result, OpenError):
        return False

    with lock:
        merge_into(result, table)

    return True


def count_files_tasks(
    filenames: Sequence[str],
    table: FrequencyTable,
    max_workers: int | None = None,
) -> bool:
    lock = threading.Lock()
    with ThreadPoolExecutor(max_workers=max_workers) as exe:
        futures = [
            exe.submit(count_file_locked, filename, table, lock)
            for filename in filenames
        ]

        # Every future is awaited, even after a failure.
        total = True
        for future in futures:
            total = future.result() and total

    return total


def count_files_threads(filenames: Sequence[str], table: FrequencyTable) -> bool:
    lock = threading.Lock()
    failed = threading.Event()

    def worker(filename: str) -> None:
        ok = False
        try:
            ok = count_file_locked(filename, table, lock)
        finally:
            if not ok:
                failed.set()

    threads = [
        threading.Thread(target=worker, args=(filename,), name=f"count-{i}")
        for i, filename in enumerate(filenames)
    ]
    started: list[threading.Thread] = []
    try:
        for thread in threads:
            thread.start()
            started.append(thread)
    finally:
        for thread in started:
            thread.join()

    return not failed.is_set()


def count_files_processes(
    filenames: Sequence[str],
    table: FrequencyTable,
    max_workers: int | None = None,
) -> bool:
    # Workers send back whole tables; only this thread touches `table`.
    total = True
    with ProcessPoolExecutor(max_workers=max_workers) as exe:
        for result in exe.map(count_file, filenames):
            if isinstance(result, OpenError):
                total = False
            else:
                merge_into(result, table)

    return total


class Strategy(StrEnum):
    SEQUENTIAL = "sequential"
    TASKS = "tasks"
    THREADS = "threads"
    PROCESSES = "processes"

    @property
    def label(self) -> str:
        match self:
            case Strategy.SEQUENTIAL:
                return "Sync test"
            case Strategy.TASKS:
                return "Async test"
            case Strategy.THREADS:
                return "Threaded test"
            case Strategy.PROCESSES:
                return "Multiprocess test"

    def run(
        self,
        filenames: Sequence[str],
        table: FrequencyTable,
        max_workers: int | None = None,
    ) -> bool:
        log.debug("Running %s over %d files", self, len(filenames))
        match self:
            case Strategy.SEQUENTIAL:
                return count_files_sequential(filenames, table)
            case Strategy.TASKS:
                return count_files_tasks(filenames, table, max_workers)
            case Strategy.THREADS:
                return count_files_threads(filenames, table)
            case Strategy.PROCESSES:
                return count_files_processes(filenames, table, max_workers)


DEFAULT_STRATEGIES = (Strategy.SEQUENTIAL, Strategy.TASKS, Strategy.THREADS)
