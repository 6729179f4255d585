"""
Index builder: constructs the keyword index from a list of documents.
Documents are scanned one at a time; each document's keyword counts are
merged into the index before the next document is read.
"""

import logging
from collections import Counter
from pathlib import Path

from .posting import InvertedIndex, Occurrence
from .tokenizer import (
    KeywordNormalizer,
    load_noise_words,
    read_document_text,
    read_text_file,
    tokenize,
)

logger = logging.getLogger(__name__)


def read_document_list(docs_file: Path) -> list[str]:
    """Return the document names listed in docs_file, in order."""
    return tokenize(read_text_file(docs_file))


def _resolve_document(name: str, base_dir: Path) -> Path:
    """Relative document names are looked up next to the documents file."""
    path = Path(name)
    if path.is_absolute():
        return path
    return base_dir / path


def load_keywords(
    filepath: Path,
    normalizer: KeywordNormalizer,
    document: str | None = None,
) -> dict[str, Occurrence]:
    """
    Scan a document and count its keywords.
    Returns keyword -> Occurrence(document, frequency), one entry per keyword.
    The document identifier defaults to the path as given.
    """
    if filepath is None:
        raise FileNotFoundError("No document file given")
    document = document if document is not None else str(filepath)
    text = read_document_text(Path(filepath))

    counts = Counter()
    for word in tokenize(text):
        keyword = normalizer.get_keyword(word)
        if keyword is not None:
            counts[keyword] += 1

    return {
        keyword: Occurrence(document=document, frequency=frequency)
        for keyword, frequency in counts.items()
    }


def build_index_from_documents(
    documents: list[str],
    normalizer: KeywordNormalizer,
    *,
    base_dir: Path = Path("."),
) -> InvertedIndex:
    """
    Index the named documents in order and return the frozen index.
    Halts on the first document that cannot be found.
    """
    index = InvertedIndex()
    for name in documents:
        keywords = load_keywords(_resolve_document(name, base_dir), normalizer, document=name)
        index.merge_document(keywords)
        logger.debug("indexed %s: %d keywords", name, len(keywords))

    logger.info("indexed %d documents, %d keywords", len(documents), len(index))
    return index.freeze()


def make_index(docs_file: Path, noise_words_file: Path) -> InvertedIndex:
    """
    Build the index for every document listed in docs_file, skipping the
    noise words listed in noise_words_file.
    Raises FileNotFoundError if either file or any listed document is missing.
    """
    docs_file = Path(docs_file)
    normalizer = KeywordNormalizer(load_noise_words(noise_words_file))
    logger.debug("loaded %d noise words", len(normalizer.noise_words))
    documents = read_document_list(docs_file)
    return build_index_from_documents(documents, normalizer, base_dir=docs_file.parent)
