"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
Each keyword's occurrence list is kept in descending order of frequency.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier, carried verbatim (usually a file path)
    - frequency: number of hits of the keyword in that document
    """

    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"Occurrence(document={self.document!r}, frequency={self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of occs to its place in descending frequency order.

    occs[0..n-2] must already be in descending order. The spot is found by
    binary search; an equal-frequency element found at a midpoint is pushed
    behind the new occurrence.

    Returns the midpoint indexes examined by the search, or None when the
    list has a single element (nothing to search).
    """
    if not occs:
        raise ValueError("occurrence list is empty")
    if len(occs) == 1:
        return None

    mids: list[int] = []
    occ = occs.pop()
    first = 0
    last = len(occs) - 1

    if len(occs) == 1:
        mids.append(0)
        if occs[0].frequency <= occ.frequency:
            occs.insert(0, occ)
        else:
            occs.append(occ)
        return mids

    while True:
        # last can fall to first - 1; mid must stay at first then
        mid = first + max(last - first, 0) // 2
        mids.append(mid)
        if first >= last:
            if occs[mid].frequency >= occ.frequency:
                occs.insert(mid + 1, occ)
            else:
                occs.insert(mid, occ)
            break
        if occs[mid].frequency == occ.frequency:
            occs.insert(mid, occ)
            break
        elif occs[mid].frequency > occ.frequency:
            first = mid + 1
        else:
            last = mid - 1
    return mids


class KeywordIndex:
    """
    Master index: map from keyword -> occurrence list, each list in
    descending order of frequency.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        """
        Merge one document's keyword map into the index. Each occurrence is
        appended to its keyword's list and moved into place.
        """
        for keyword, occ in kws.items():
            occ = Occurrence(occ.document, occ.frequency)
            if keyword not in self._index:
                self._index[keyword] = [occ]
            else:
                self._index[keyword].append(occ)
            insert_last_occurrence(self._index[keyword])
        logger.debug("Merged %d keywords", len(kws))

    def get_postings(self, keyword: str) -> list[Occurrence]:
        """Return the occurrence list for a keyword, or empty list."""
        return self._index.get(keyword, [])

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def is_sorted(self) -> bool:
        """True if every occurrence list is in non-increasing frequency order."""
        for occs in self._index.values():
            for prev, cur in zip(occs, occs[1:]):
                if prev.frequency < cur.frequency:
                    return False
        return True

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def __getitem__(self, keyword: str) -> list[Occurrence]:
        return self._index[keyword]

    def to_dict(self) -> dict:
        """JSON-serializable view: keyword -> [[document, frequency], ...]."""
        return {
            keyword: [[o.document, o.frequency] for o in occs]
            for keyword, occs in self._index.items()
        }
