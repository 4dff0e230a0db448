from typing import Iterable, Iterator, Mapping


class FrequencyTable(Mapping[str, int]):
    """Occurrence count per canonical word.

    Not synchronized: one writer at a time. Callers that merge several
    tables into a shared destination from many threads hold a lock
    around `merge_into`.
    """

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: dict[str, int] = {}
        if counts is not None:
            for word, count in counts.items():
                if count < 0:
                    raise ValueError(f"negative count for {word!r}")
                if count > 0:
                    self._counts[word] = count

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._counts!r})"

    def increment(self, word: str) -> None:
        self._counts[word] = self._counts.get(word, 0) + 1

    def update(self, words: Iterable[str]) -> None:
        counts = self._counts
        for word in words:
            counts[word] = counts.get(word, 0) + 1

    def clear(self) -> None:
        self._counts.clear()

    def is_empty(self) -> bool:
        return not self._counts

    def size(self) -> int:
        return len(self._counts)


def merge_into(source: Mapping[str, int], destination: FrequencyTable) -> None:
    counts = destination._counts
    for word, count in source.items():
        if count < 0:
            raise ValueError(f"negative count for {word!r}")
        if count > 0:
            counts[word] = counts.get(word, 0) + count


def merge_all(tables: Iterable[Mapping[str, int]]) -> FrequencyTable:
    result = FrequencyTable()
    for table in tables:
        merge_into(table, result)

    return result
