"""Tests for building the index from documents on disk."""

import pytest

from little_search.index_builder import (
    build_index_from_documents,
    load_keywords,
    make_index,
    read_document_list,
)
from little_search.posting import IndexFrozenError, Occurrence
from little_search.tokenizer import KeywordNormalizer


class TestLoadKeywords:
    def test_counts_keywords(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("The cat saw the Cat. A cat? dog-house", encoding="utf-8")

        keywords = load_keywords(path, KeywordNormalizer(["the"]), document="doc")

        assert keywords == {
            "cat": Occurrence("doc", 3),
            "saw": Occurrence("doc", 1),
        }

    def test_document_defaults_to_path(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("hello", encoding="utf-8")

        keywords = load_keywords(path, KeywordNormalizer())

        assert keywords["hello"].document == str(path)

    def test_missing_document(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_keywords(tmp_path / "nope.txt", KeywordNormalizer())

    def test_no_document(self):
        with pytest.raises(FileNotFoundError):
            load_keywords(None, KeywordNormalizer())


class TestMakeIndex:
    """End-to-end indexing from a documents file and a noise-words file."""

    def test_cat_corpus(self, cat_corpus):
        docs_file, noise_file = cat_corpus

        index = make_index(docs_file, noise_file)

        assert index.get_occurrences("cat") == (
            Occurrence("d2.txt", 1),
            Occurrence("d1.txt", 1),
        )
        assert index.get_occurrences("sat") == (Occurrence("d1.txt", 1),)
        assert index.get_occurrences("ran") == (Occurrence("d2.txt", 1),)
        assert "the" not in index
        assert index.frozen

    def test_ranked_corpus(self, ranked_corpus):
        index = make_index(*ranked_corpus)

        assert index.to_dict()["deep"] == [["a.txt", 3], ["c.txt", 2], ["b.txt", 1]]
        assert index.to_dict()["world"] == [["b.txt", 4], ["d.txt", 1], ["a.txt", 1]]
        assert "else" not in index
        assert index.top5search("deep", "world") == ["b.txt", "a.txt", "c.txt", "d.txt"]
        assert index.top5search("World", "DEEP") == ["b.txt", "a.txt", "c.txt", "d.txt"]
        assert index.top5search("zzz", "yyy") is None

    def test_index_cannot_be_extended(self, cat_corpus):
        index = make_index(*cat_corpus)

        with pytest.raises(IndexFrozenError):
            index.merge_document({"dog": Occurrence("d3.txt", 1)})

    def test_html_documents(self, make_corpus):
        docs_file, noise_file = make_corpus(
            {
                "page.html": "<html><body><script>cat cat cat</script><p>Dog dog cat</p></body></html>",
                "notes.txt": "cat cat",
            },
            ["the"],
        )

        index = make_index(docs_file, noise_file)

        assert index.to_dict()["cat"] == [["notes.txt", 2], ["page.html", 1]]
        assert index.to_dict()["dog"] == [["page.html", 2]]

    def test_missing_document_halts(self, make_corpus, tmp_path):
        docs_file, noise_file = make_corpus({"d1.txt": "cat"}, [])
        docs_file.write_text("d1.txt\nmissing.txt\n", encoding="utf-8")

        with pytest.raises(FileNotFoundError, match="missing.txt"):
            make_index(docs_file, noise_file)

    def test_missing_noise_file(self, cat_corpus, tmp_path):
        docs_file, _ = cat_corpus

        with pytest.raises(FileNotFoundError):
            make_index(docs_file, tmp_path / "nowhere.txt")

    def test_missing_docs_file(self, cat_corpus, tmp_path):
        _, noise_file = cat_corpus

        with pytest.raises(FileNotFoundError):
            make_index(tmp_path / "nowhere.txt", noise_file)


class TestBuildFromDocuments:
    def test_read_document_list(self, cat_corpus):
        docs_file, _ = cat_corpus

        assert read_document_list(docs_file) == ["d1.txt", "d2.txt"]

    def test_absolute_document_names(self, tmp_path):
        doc = tmp_path / "abs.txt"
        doc.write_text("alpha alpha", encoding="utf-8")

        index = build_index_from_documents([str(doc)], KeywordNormalizer(), base_dir=tmp_path / "elsewhere")

        assert index.get_occurrences("alpha") == (Occurrence(str(doc), 2),)

    def test_empty_document_list(self):
        index = build_index_from_documents([], KeywordNormalizer())

        assert len(index) == 0
        assert index.frozen
