from pathlib import Path

import pytest

from littlesearch import LittleSearchEngine

DOCS = {
    "d1.txt": "The quick brown fox. The quick fox!\n",
    "d2.txt": "fox fox fox jumps\nover the lazy dog.\n",
    "d3.txt": "Dog dog DOG, quick.\n",
}

NOISE_WORDS = "the\nover\n"


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Three small documents plus docs.txt and noisewords.txt."""
    for name, text in DOCS.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "docs.txt").write_text("\n".join(DOCS) + "\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text(NOISE_WORDS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def engine(corpus_dir: Path) -> LittleSearchEngine:
    eng = LittleSearchEngine()
    eng.make_index(corpus_dir / "docs.txt", corpus_dir / "noisewords.txt", root=corpus_dir)
    return eng
