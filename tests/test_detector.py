import pytest

from corpus_review.dedup import (
    DuplicateCheckOptions,
    DuplicateDetector,
    MatchType,
    best_content_match,
    check_duplicate,
    find_name_match,
)
from corpus_review.pipeline.context import Document, DocumentStatus


def _vet_abstract() -> str:
    header = "Randomized clinical trial of canine anesthesia protocols. "
    findings = " ".join(f"finding{i:03d}" for i in range(94))
    # 6 header tokens + 94 findings = 100 distinct tokens
    return " ".join([header + findings + "."] * 3)


def test_exact_name_case_insensitive():
    corpus = [Document("report.csv", "...")]
    result = check_duplicate("Report.csv", "...", corpus, DuplicateCheckOptions(case_sensitive=False))
    assert result.is_duplicate
    assert "exact" in result.reason
    assert result.existing_file == "report.csv"
    assert result.match_type == MatchType.EXACT_NAME


def test_case_sensitive_falls_back_to_similar_name():
    corpus = [Document("report.csv", "...")]
    result = check_duplicate("Report.csv", "...", corpus, DuplicateCheckOptions(case_sensitive=True))
    assert result.is_duplicate
    assert result.match_type == MatchType.SIMILAR_NAME
    assert "90%" in result.reason


@pytest.mark.parametrize("name,content", [("a.txt", ""), ("", ""), ("vet_study.pdf", "x" * 500)])
def test_empty_corpus_is_never_duplicate(name, content):
    result = check_duplicate(name, content, [])
    assert not result.is_duplicate
    assert result.reason is None
    assert result.existing_file is None


def test_name_check_disabled():
    corpus = [Document("same.txt", "short")]
    opts = DuplicateCheckOptions(check_name=False)
    assert not check_duplicate("same.txt", "short", corpus, opts).is_duplicate


def test_short_content_is_not_compared():
    text = "Canine dental extraction notes."
    corpus = [Document("first.txt", text)]
    assert not check_duplicate("completely_different_name.md", text, corpus).is_duplicate


def test_min_content_length_boundary():
    corpus = [Document("first.txt", "a" * 100)]
    assert check_duplicate("zzzzzzzzzzzzzzzzzz.md", "a" * 100, corpus).is_duplicate
    corpus = [Document("first.txt", "a" * 99)]
    assert not check_duplicate("zzzzzzzzzzzzzzzzzz.md", "a" * 99, corpus).is_duplicate


def test_first_matching_document_wins():
    corpus = [Document("one.txt", "a"), Document("One.TXT", "b")]
    result = check_duplicate("ONE.txt", "c", corpus)
    assert result.existing_file == "one.txt"


def test_check_does_not_mutate_corpus():
    doc = Document("one.txt", "x" * 200, labels=["surgery"])
    corpus = [doc]
    check_duplicate("one.txt", "x" * 200, corpus)
    assert corpus == [doc]
    assert doc.labels == ["surgery"]


def test_end_to_end_exact_name_then_content_path():
    abstract = _vet_abstract()
    assert len(abstract) > 2000
    corpus = [Document(
        "vet_study.pdf", abstract,
        labels=["surgery", "anesthesia"], status=DocumentStatus.APPROVED,
    )]
    detector = DuplicateDetector(DuplicateCheckOptions(content_threshold=0.8))

    same_name = detector.check("vet_study.pdf", abstract, corpus)
    assert same_name.is_duplicate
    assert same_name.match_type == MatchType.EXACT_NAME

    # 100 shared tokens out of 105 -> 95%
    edited = abstract + " extra000 extra001 extra002 extra003 extra004"
    renamed = detector.check("canine_trial_v2.pdf", edited, corpus)
    assert renamed.is_duplicate
    assert renamed.match_type == MatchType.CONTENT
    assert "95%" in renamed.reason
    assert renamed.existing_file == "vet_study.pdf"


def test_name_similarity_at_threshold_is_not_duplicate():
    # 3 edits over 20 chars: similarity exactly 0.85
    corpus = [Document("abcdefghijklmnopqrst", "")]
    assert not check_duplicate("abcdefghijklmnopqxyz", "", corpus).is_duplicate
    # 2 edits: 0.9
    result = check_duplicate("abcdefghijklmnopqryz", "", corpus)
    assert result.is_duplicate
    assert result.match_type == MatchType.SIMILAR_NAME


def test_content_similarity_at_threshold_is_not_duplicate():
    opts = DuplicateCheckOptions(min_content_length=0)
    corpus = [Document("one.txt", "alpha bravo charlie delta")]
    # 4 shared tokens out of 5: exactly 0.8
    assert not check_duplicate("zzzzzzzz.md", "alpha bravo charlie delta echo", corpus, opts).is_duplicate
    # 4 of 4
    result = check_duplicate("zzzzzzzz.md", "delta charlie bravo alpha", corpus, opts)
    assert result.is_duplicate
    assert result.match_type == MatchType.CONTENT


def test_content_below_threshold_is_not_duplicate():
    corpus = [Document("a.txt", " ".join(f"alpha{i}" for i in range(40)))]
    other = " ".join(f"alpha{i}" for i in range(20)) + " " + " ".join(f"beta{i}" for i in range(20))
    assert not check_duplicate("zzzzzzzzzzzzzz.md", other, corpus).is_duplicate


def test_options_validation_and_policy():
    with pytest.raises(ValueError):
        DuplicateCheckOptions(content_threshold=1.5)
    opts = DuplicateCheckOptions.from_policy({"content_threshold": 0.6, "case_sensitive": True})
    assert opts.content_threshold == 0.6
    assert opts.case_sensitive
    assert opts.check_name and opts.check_content
    assert DuplicateCheckOptions.from_policy(None) == DuplicateCheckOptions()


def test_find_name_match_modes():
    corpus = [Document("Canine_Dental_2023.pdf", ""), Document("dental.pdf", "")]
    assert find_name_match("dental.pdf", corpus).name == "dental.pdf"
    assert find_name_match("canine_dental", corpus, exact_match=False).name == "Canine_Dental_2023.pdf"
    assert find_name_match("canine_dental", corpus, case_sensitive=True, exact_match=False) is None


def test_best_content_match_returns_highest():
    base = " ".join(f"word{i}" for i in range(30))
    corpus = [
        Document("far.txt", " ".join(f"other{i}" for i in range(30))),
        Document("near.txt", base + " tail1 tail2"),
    ]
    doc, sim = best_content_match(base, corpus)
    assert doc.name == "near.txt"
    assert sim == pytest.approx(30 / 32)
    assert best_content_match("short", corpus) == (None, 0.0)


def test_result_to_dict_shape():
    result = check_duplicate("Report.csv", "", [Document("report.csv", "")])
    d = result.to_dict()
    assert d["isDuplicate"] is True
    assert d["existingFile"] == "report.csv"
    assert d["matchType"] == "exact_name"
    assert check_duplicate("x", "", []).to_dict() == {"isDuplicate": False}
