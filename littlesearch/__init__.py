"""Little search engine: keyword index with two-keyword top-5 search."""

from .posting import Occurrence, KeywordIndex, insert_last_occurrence
from .index_builder import LittleSearchEngine, DocumentNotFoundError, IndexState
from .search import top_k_search, TOP_K
from .tokenizer import get_keyword, keywords_from_lines
