"""
Top-K "OR" search over two keywords' occurrence lists.

Both lists are in descending order of frequency. The result is the union of
their documents, ranked by the frequency that brought each one in, with ties
going to the first keyword and each document listed once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Set

if TYPE_CHECKING:
    from .posting import Occurrence

logger = logging.getLogger(__name__)

# Maximum number of documents returned by a search.
TOP_K = 5


def log_result(documents: List[str]) -> None:
    """Default diagnostic sink: log the result on one line."""
    logger.info("top search result: %s", " ".join(documents))


class _Ranking:
    """Collects distinct documents in emission order up to a limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.documents: List[str] = []
        self._seen: Set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.documents) >= self.limit

    def add(self, document: str) -> bool:
        """Add a document unless already ranked. Returns True once full."""
        if document not in self._seen:
            self._seen.add(document)
            self.documents.append(document)
        return self.full


def _take(occurrences: Sequence[Occurrence], limit: int) -> List[str]:
    return [o.document for o in occurrences[:limit]]


def _merge(
    first: Sequence[Occurrence],
    second: Sequence[Occurrence],
    limit: int,
) -> List[str]:
    ranking = _Ranking(limit)
    j = 0  # next unconsumed entry of second

    for occ in first:
        if j >= len(second):
            if ranking.add(occ.document):
                return ranking.documents
            continue

        other = second[j]
        if occ.frequency >= other.frequency:
            # On a tie the first keyword wins; a shared document is consumed from both.
            full = ranking.add(occ.document)
            if occ.document == other.document:
                j += 1
            if full:
                return ranking.documents
            continue

        while j < len(second) and second[j].frequency > occ.frequency:
            full = ranking.add(second[j].document)
            j += 1
            if full:
                return ranking.documents
        if ranking.add(occ.document):
            return ranking.documents

    for other in second[j:]:
        if ranking.add(other.document):
            break
    return ranking.documents


def top_k_search(
    first: Optional[Sequence[Occurrence]],
    second: Optional[Sequence[Occurrence]],
    limit: int = TOP_K,
    sink: Optional[Callable[[List[str]], None]] = None,
) -> Optional[List[str]]:
    """
    Rank the documents of two occurrence lists.

    Returns None when both lists are absent. When only one is present its
    documents are returned in order, truncated to `limit`. Otherwise the two
    lists are merged by descending frequency; ties favor `first`, documents
    appear once, and merging stops at `limit` documents. When `first` runs
    out, the rest of `second` is appended in its own order.

    The result is passed to `sink` (default: logged) before being returned.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    if first is None and second is None:
        return None

    if first is None:
        documents = _take(second, limit)
    elif second is None:
        documents = _take(first, limit)
    else:
        documents = _merge(first, second, limit)

    (sink or log_result)(documents)
    return documents
