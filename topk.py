import heapq
import sys
from typing import Mapping, TextIO

EMPTY_RESULT = "Empty result"


def sort_key(item: tuple[str, int]) -> tuple[int, str]:
    word, count = item
    return -count, word


def top_k(table: Mapping[str, int], k: int) -> list[tuple[str, int]] | None:
    """Return the `k` most frequent words, most frequent first.

    Equal counts are ordered by word. An empty table gives `None`.
    """
    if k < 0:
        raise ValueError("k must not be negative")

    if not table:
        return None

    return heapq.nsmallest(k, table.items(), key=sort_key)


def format_top_k(entries: list[tuple[str, int]] | None) -> str:
    if entries is None:
        return EMPTY_RESULT + "\n"

    return "".join(f"{count:>4} {word}\n" for word, count in entries)


def print_top_k(table: Mapping[str, int], k: int, file: TextIO | None = None) -> None:
    out = sys.stdout if file is None else file
    out.write(format_top_k(top_k(table, k)))
