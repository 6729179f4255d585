"""Little search engine package."""

from .posting import Occurrence, InvertedIndex, IndexFrozenError, insert_last_occurrence
from .query import TOP_K, top_k_search
from .index_builder import make_index, load_keywords, build_index_from_documents
from .tokenizer import KeywordNormalizer, tokenize, load_noise_words
