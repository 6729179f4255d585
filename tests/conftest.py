"""Shared fixtures: small on-disk corpora."""

from pathlib import Path

import pytest


def write_corpus(root: Path, documents: dict[str, str], noise_words: list[str]) -> tuple[Path, Path]:
    """Write documents plus docs/noise list files under root. Returns (docs_file, noise_file)."""
    for name, text in documents.items():
        (root / name).write_text(text, encoding="utf-8")
    docs_file = root / "docs.txt"
    docs_file.write_text("\n".join(documents) + "\n", encoding="utf-8")
    noise_file = root / "noisewords.txt"
    noise_file.write_text("\n".join(noise_words) + "\n", encoding="utf-8")
    return docs_file, noise_file


@pytest.fixture
def cat_corpus(tmp_path):
    """Two documents sharing 'cat', with 'the' as the only noise word."""
    return write_corpus(
        tmp_path,
        {"d1.txt": "the cat sat.", "d2.txt": "the cat ran!"},
        ["the"],
    )


@pytest.fixture
def ranked_corpus(tmp_path):
    """Documents with distinct frequencies for 'deep' and 'world'."""
    return write_corpus(
        tmp_path,
        {
            "a.txt": "deep deep deep world",
            "b.txt": "world world world world deep",
            "c.txt": "Deep, deep.",
            "d.txt": "world! nothing else here",
        },
        ["a", "an", "the", "else"],
    )


@pytest.fixture
def make_corpus(tmp_path):
    """Factory fixture: make_corpus(documents, noise_words) -> (docs_file, noise_file)."""

    def _make(documents: dict[str, str], noise_words: list[str] = ()) -> tuple[Path, Path]:
        return write_corpus(tmp_path, documents, list(noise_words))

    return _make
