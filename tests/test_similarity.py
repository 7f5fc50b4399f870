import pytest

from corpus_review.dedup.similarity import content_similarity, edit_distance, jaccard, string_similarity
from corpus_review.utils.text import content_tokens


def test_edit_distance_classic():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("", "abc") == 3
    assert edit_distance("flaw", "lawn") == 2


def test_string_similarity_empty_edges():
    assert string_similarity("", "") == 1.0
    assert string_similarity("abc", "") == 0.0
    assert string_similarity("", "abc") == 0.0


@pytest.mark.parametrize("a,b", [
    ("report.csv", "report.cvs"),
    ("vet_study.pdf", "vet_study_v2.pdf"),
    ("a", "abcdef"),
    ("Canine", "canine"),
])
def test_string_similarity_is_symmetric(a, b):
    assert string_similarity(a, b) == string_similarity(b, a)


def test_string_similarity_identity_and_value():
    assert string_similarity("surgery_notes.txt", "surgery_notes.txt") == 1.0
    # transposed letters cost two substitutions out of ten characters
    assert string_similarity("report.csv", "report.cvs") == pytest.approx(0.8)


def test_content_tokens_filters_punctuation_short_and_stop_words():
    assert content_tokens("The dog's anesthesia, and THE surgery!") == {"dog", "anesthesia", "surgery"}


def test_content_similarity_identity():
    text = "Canine anesthesia protocols were compared in a randomized trial."
    assert content_similarity(text, text) == 1.0


def test_content_similarity_empty_token_sets():
    assert content_similarity("a an !!", "is ... of") == 1.0
    assert content_similarity("is", "canine surgery") == 0.0


def test_content_similarity_jaccard_value():
    assert content_similarity("canine surgery recovery", "Canine surgery outcome") == pytest.approx(0.5)
    assert jaccard({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
