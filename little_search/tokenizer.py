"""
Document reader and keyword normalizer for the search engine index.
Reads plain-text or HTML documents, splits them on whitespace, and decides
which words count as keywords.
"""

import warnings
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

_TOKENIZER = WhitespaceTokenizer()

# Trailing punctuation that may be stripped from a keyword
PUNCTUATION = ".,?:;!"

# Documents with these suffixes have their visible text extracted first
HTML_SUFFIXES = (".html", ".htm")


class KeywordNormalizer:
    """
    Keyword test against a set of noise words.

    A keyword is a word that, after lower-casing and stripping TRAILING
    punctuation (. , ? : ; !), consists only of letters and is not a noise word.
    Single-character words are never keywords.
    """

    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self.noise_words = frozenset(w.lower() for w in noise_words)

    def get_keyword(self, word: str) -> str | None:
        """Return the keyword for word, or None if it is not one."""
        word = word.lower()
        if len(word) <= 1:
            return None

        while word and not word[-1].isalpha():
            if word[-1] not in PUNCTUATION:
                return None
            word = word[:-1]

        if not word or not word.isalpha():
            return None
        if word in self.noise_words:
            return None
        return word

    __call__ = get_keyword


def tokenize(text: str) -> list[str]:
    """Split text into raw whitespace-separated words."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"File not found: {filepath}")
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_document_text(filepath: Path) -> str:
    """Return the text of a document; HTML documents are reduced to visible text."""
    content = read_text_file(filepath)
    if Path(filepath).suffix.lower() in HTML_SUFFIXES:
        return extract_text_from_html(content)
    return content


def load_noise_words(filepath: Path) -> frozenset[str]:
    """Load noise words, one or more per line, lower-cased."""
    return frozenset(w.lower() for w in tokenize(read_text_file(filepath)))
