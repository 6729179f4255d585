"""
Occurrence and inverted index data structures.

An occurrence records how many times a keyword appears in one document.
Each keyword's occurrence list is kept in descending order of frequency,
so a new document's occurrence is slotted in with a binary search.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Mapping

from .query import TOP_K, top_k_search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: opaque document identifier (the name as listed in the docs file)
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(
                f"Occurrence frequency must be positive, got {self.frequency} for {self.document!r}"
            )

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


class IndexFrozenError(RuntimeError):
    """Raised when a merge is attempted on an index that has finished building."""


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """
    Move the last occurrence of the list into its place by descending frequency.

    Entries 0..n-2 are already ordered. The spot for entry n-1 is found by
    binary search; on a tie the new entry goes right before the probed equal
    entry. Returns the midpoints probed, in order (empty for a one-entry list).
    """
    if not occurrences:
        raise ValueError("Cannot insert into an empty occurrence list")

    target = occurrences[-1].frequency
    low = 0
    high = len(occurrences) - 2
    mid = 0
    midpoints: list[int] = []

    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        if occurrences[mid].frequency > target:
            low = mid + 1
        elif occurrences[mid].frequency < target:
            high = mid - 1
        else:
            break

    position = mid + 1 if occurrences[mid].frequency > target else mid
    occurrences.insert(position, occurrences.pop())
    return midpoints


class InvertedIndex:
    """
    Keyword index: map from keyword -> occurrences in descending frequency.
    Mutable while documents are merged; call freeze() once indexing is done,
    after which the index is read-only and safe to share between readers.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "InvertedIndex":
        """End the indexing phase. Returns self for chaining."""
        self._frozen = True
        return self

    def merge_document(self, keyword_occurrences: Mapping[str, Occurrence]) -> None:
        """
        Merge one document's keyword occurrences into the index.
        Each occurrence is appended to its keyword's list and moved into place.
        """
        if self._frozen:
            raise IndexFrozenError("Index is frozen; no further documents can be merged")

        for keyword, occurrence in keyword_occurrences.items():
            occurrences = self._index.get(keyword)
            if occurrences is None:
                self._index[keyword] = [occurrence]
                continue
            occurrences.append(occurrence)
            midpoints = insert_last_occurrence(occurrences)
            logger.debug("merged %r into %r, probed %s", occurrence, keyword, midpoints)

    def get_occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        """Return the occurrences for a keyword, or an empty tuple."""
        return tuple(self._index.get(keyword, ()))

    def top5search(
        self,
        kw1: str,
        kw2: str,
        sink: Callable[[list[str]], None] | None = None,
    ) -> list[str] | None:
        """
        Documents containing kw1 or kw2, by descending frequency, at most 5.
        Ties go to kw1. Returns None when neither keyword is in the index.
        """
        first = self._index.get(kw1.lower())
        second = self._index.get(kw2.lower())
        return top_k_search(first, second, limit=TOP_K, sink=sink)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def total_occurrences(self) -> int:
        return sum(len(occurrences) for occurrences in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def to_dict(self) -> dict[str, list[list]]:
        """Serialize to a JSON-serializable dict for display."""
        return {
            keyword: [[o.document, o.frequency] for o in occurrences]
            for keyword, occurrences in self._index.items()
        }
