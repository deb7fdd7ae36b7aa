"""
Ranked "kw1 OR kw2" retrieval over two occurrence lists.
"""

from .posting import Occurrence

TOP_K = 5


def top_k_search(
    occs1: list[Occurrence],
    occs2: list[Occurrence],
    k: int = TOP_K,
) -> list[str]:
    """
    Merge two occurrence lists (each in descending frequency order) into at
    most k distinct documents, highest frequency first. Ties go to occs1.

    Each list is cut to its first k entries before merging, so a document
    ranked below k in its own list never shows up.
    """
    a = occs1[:k]
    b = occs2[:k]
    result: list[str] = []
    seen: set[str] = set()

    def add(doc: str) -> None:
        if doc not in seen:
            seen.add(doc)
            result.append(doc)

    i = j = 0
    while len(result) < k:
        if i == len(a):
            for occ in b[j:]:
                if len(result) == k:
                    break
                add(occ.document)
            break
        if j == len(b):
            for occ in a[i:]:
                if len(result) == k:
                    break
                add(occ.document)
            break
        if a[i].frequency > b[j].frequency:
            add(a[i].document)
            i += 1
        elif a[i].frequency < b[j].frequency:
            add(b[j].document)
            j += 1
        else:
            add(a[i].document)
            i += 1
    return result
