import logging
from dataclasses import dataclass
from typing import TypeAlias

from frequency import FrequencyTable
from tokens import tokenize

log = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "replace"


@dataclass(frozen=True)
class OpenError:
    filename: str
    reason: str


FileResult: TypeAlias = FrequencyTable | OpenError


def count_file(filename: str) -> FileResult:
    """Count the words of one file into a fresh table.

    Failure to open or read the file yields an `OpenError` and no counts.
    """
    table = FrequencyTable()
    try:
        with open(filename, encoding=ENCODING, errors=ERRORS) as file:
            table.update(tokenize(file))
    except (OSError, ValueError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        log.error("Failed to open file %s: %s", filename, reason)
        return OpenError(filename, reason)

    log.debug("Counted %d distinct words in %s", len(table), filename)
    return table
