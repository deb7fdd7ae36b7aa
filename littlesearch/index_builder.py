"""
Index builder: drives keyword extraction and merging over a document list
and answers two-keyword top-5 queries against the finished index.
"""

import enum
import logging
from pathlib import Path

from .tokenizer import (
    get_keyword,
    iter_document_lines,
    keywords_from_lines,
    load_document_list,
    load_noise_words,
)
from .posting import KeywordIndex, Occurrence, insert_last_occurrence
from .search import TOP_K, top_k_search

logger = logging.getLogger(__name__)


class DocumentNotFoundError(FileNotFoundError):
    """A document named in the document list could not be opened."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document not found: {doc_id}")
        self.doc_id = doc_id


class IndexState(enum.Enum):
    EMPTY = "empty"
    BUILDING = "building"
    READY = "ready"


class LittleSearchEngine:
    """
    Keyword index over a set of documents.

    Each keyword maps to the list of its occurrences in documents, kept in
    descending order of frequency. Noise words are never indexed.
    """

    def __init__(self, noise_words: set[str] | None = None, *, html: bool = False) -> None:
        self.noise_words: set[str] = set(noise_words or ())
        self.html = html
        self.index = KeywordIndex()
        self.documents: list[str] = []
        self._merges = 0
        self._building = False

    @property
    def state(self) -> IndexState:
        if self._building:
            return IndexState.BUILDING
        if not self._merges:
            return IndexState.EMPTY
        return IndexState.READY

    def get_keyword(self, word: str) -> str | None:
        return get_keyword(word, self.noise_words)

    def load_keywords_from_document(
        self,
        doc_id: str,
        *,
        root: Path | None = None,
    ) -> dict[str, Occurrence]:
        """
        Count the keywords of one document.
        The file is root / doc_id when root is given; the occurrences carry
        doc_id as-is. Raises DocumentNotFoundError if the file cannot be read.
        """
        path = Path(root) / doc_id if root is not None else Path(doc_id)
        try:
            kws = keywords_from_lines(
                doc_id, iter_document_lines(path, html=self.html), self.noise_words
            )
        except OSError as e:
            raise DocumentNotFoundError(doc_id) from e
        logger.debug("Scanned %s: %d keywords", doc_id, len(kws))
        return kws

    def _merge_document(self, kws: dict[str, Occurrence], doc_ids: list[str]) -> None:
        self.index.merge_keywords(kws)
        self.documents.extend(doc_ids)
        self._merges += 1

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        """Merge one document's keywords into the master index."""
        self._merge_document(kws, sorted({occ.document for occ in kws.values()}))

    def insert_last_occurrence(self, occs: list[Occurrence]) -> list[int] | None:
        return insert_last_occurrence(occs)

    def add_document(self, doc_id: str, *, root: Path | None = None) -> None:
        kws = self.load_keywords_from_document(doc_id, root=root)
        self._merge_document(kws, [doc_id])

    def make_index(
        self,
        docs_file: Path,
        noise_words_file: Path,
        *,
        root: Path | None = None,
    ) -> None:
        """
        Index every document listed in docs_file, after adding the noise
        words in noise_words_file.

        Raises FileNotFoundError if either input file or any document is
        missing. Documents merged before the failure stay in the index.
        """
        self.noise_words.update(load_noise_words(noise_words_file))
        doc_ids = load_document_list(docs_file)

        self._building = True
        try:
            for doc_id in doc_ids:
                self.add_document(doc_id, root=root)
        finally:
            self._building = False
        logger.info(
            "Indexed %d documents, %d keywords", len(self.documents), len(self.index)
        )

    def top5_search(self, kw1: str, kw2: str) -> list[str] | None:
        """
        Documents containing kw1 or kw2, highest frequency first, at most 5.
        Ties in frequency favor kw1. Keywords are looked up as given.
        Returns None if neither keyword is in the index.
        """
        if self.state is IndexState.BUILDING:
            raise RuntimeError("index is still being built")
        if kw1 not in self.index and kw2 not in self.index:
            return None
        return top_k_search(
            self.index.get_postings(kw1), self.index.get_postings(kw2), TOP_K
        )
