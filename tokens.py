import re
from typing import IO, Iterable, Iterator

# ASCII whitespace only: space, \t, \n, \v, \f, \r.
TOKEN = re.compile(r"[^ \t\n\v\f\r]+")


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    "Split text into whitespace-delimited tokens folded to lowercase."
    # tokenize(['The cat', '  THE  dog ']) → the cat the dog
    for line in lines:
        for token in TOKEN.findall(line):
            yield token.lower()


class Tokens(Iterable[str]):
    def __init__(self, source: Iterable[str] | IO[str]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[str]:
        seekable = getattr(self._source, "seekable", None)
        if seekable is not None and seekable():
            self._source.seek(0)  # type: ignore[union-attr]

        return tokenize(self._source)
