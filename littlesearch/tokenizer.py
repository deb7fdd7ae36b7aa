"""
Keyword extraction for the little search engine.
Reads plain-text (and, on request, HTML) documents line by line, splits
lines on the space character and normalizes each token into a keyword or rejects it.
"""

import logging
import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download
from nltk.corpus import stopwords as _nltk_stopwords

from .posting import Occurrence

logger = logging.getLogger(__name__)

# Only these are stripped, and only from the end of a token
TRAILING_PUNCTUATION = ".,!?:;"

# latin-1 decodes any byte sequence, so the fallback always succeeds
TEXT_ENCODING = "utf-8"
FALLBACK_ENCODING = "latin-1"

# Read as HTML only when html=True is passed to iter_document_lines
HTML_SUFFIXES = {".html", ".htm"}

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


def ascii_lower(word: str) -> str:
    """Lowercase A-Z only; every other character is passed through."""
    return word.translate(_ASCII_LOWER)


def get_keyword(word: str, noise_words: set[str] | frozenset[str] = frozenset()) -> str | None:
    """
    Normalize a raw token into a keyword.

    Trailing punctuation from TRAILING_PUNCTUATION is stripped, the rest is
    lowercased (ASCII rule), then the token is rejected if it is empty, a
    noise word, or contains anything but a-z. Returns None when the token
    is not a keyword.
    """
    word = word.rstrip(TRAILING_PUNCTUATION)
    word = ascii_lower(word)
    if not word or word in noise_words:
        return None
    if all(ch in _ASCII_LETTERS for ch in word):
        return word
    return None


def split_line(line: str) -> list[str]:
    """Split on the single space character; runs of spaces give empty tokens."""
    return line.split(" ")


def keywords_from_lines(
    doc_id: str,
    lines: Iterable[str],
    noise_words: set[str] | frozenset[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Scan one document and count keyword hits.
    Returns keyword -> Occurrence(doc_id, frequency), one entry per distinct keyword.
    """
    kws: dict[str, Occurrence] = {}
    for line in lines:
        for token in split_line(line):
            keyword = get_keyword(token, noise_words)
            if keyword is None:
                continue
            if keyword in kws:
                kws[keyword].frequency += 1
            else:
                kws[keyword] = Occurrence(doc_id, 1)
    return kws


def _read_lines(filepath: Path, encoding: str) -> list[str]:
    with open(filepath, "r", encoding=encoding) as f:
        return [line.rstrip("\n") for line in f]


def read_text_file(filepath: Path) -> str:
    """
    Read a text file as TEXT_ENCODING, falling back to FALLBACK_ENCODING.
    """
    try:
        return Path(filepath).read_text(encoding=TEXT_ENCODING)
    except UnicodeDecodeError:
        return Path(filepath).read_text(encoding=FALLBACK_ENCODING)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, one line per block of text.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator="\n", strip=True)


def iter_document_lines(filepath: Path, *, html: bool = False) -> Iterator[str]:
    """
    Yield the lines of a document without their line terminators.

    With html=True, files with a suffix in HTML_SUFFIXES are reduced to their
    visible text first; otherwise every file is read as plain text.
    Raises OSError (FileNotFoundError, IsADirectoryError, ...) if the file
    cannot be read.
    """
    filepath = Path(filepath)
    if html and filepath.suffix.lower() in HTML_SUFFIXES:
        yield from extract_text_from_html(read_text_file(filepath)).split("\n")
        return
    try:
        # Decode fully before yielding so a bad encoding is caught here
        lines = _read_lines(filepath, TEXT_ENCODING)
    except UnicodeDecodeError:
        lines = _read_lines(filepath, FALLBACK_ENCODING)
    yield from lines


def read_tokens(filepath: Path) -> list[str]:
    """
    Whitespace-separated tokens of a file, in order, unmodified.
    Raises FileNotFoundError if the file cannot be read.
    """
    filepath = Path(filepath)
    try:
        text = read_text_file(filepath)
    except OSError as e:
        raise FileNotFoundError(f"File not found: {filepath}") from e
    return text.split()


def load_noise_words(filepath: Path) -> set[str]:
    """Noise words file: each whitespace-separated token is added verbatim."""
    return set(read_tokens(filepath))


def load_document_list(filepath: Path) -> list[str]:
    """Document-list file: one document id per whitespace-separated token."""
    return read_tokens(filepath)


def _ensure_stopwords():
    _nltk_download("stopwords", quiet=True)


def nltk_noise_words(language: str = "english") -> set[str]:
    """
    NLTK's stop-word list for a language, downloading the corpus if needed.
    Only entries that are pure a-z are kept; others could never be keywords.
    """
    _ensure_stopwords()
    words = {w for w in _nltk_stopwords.words(language) if w and set(w) <= _ASCII_LETTERS}
    logger.debug("Loaded %d NLTK %s stop words", len(words), language)
    return words
