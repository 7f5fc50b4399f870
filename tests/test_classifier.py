import pytest

from corpus_review.labeling.classifier import (
    PatternClassifier,
    analyze_document,
    format_label,
    veterinary_labels,
)
from corpus_review.labeling.patterns import DEFAULT_PATTERNS, build_patterns, load_patterns
from corpus_review.quality.scoring import classification_score


def test_surgical_keywords_assign_surgical_label():
    content = "The surgery used a surgical approach under anesthesia with a small incision."
    analysis = analyze_document("case.txt", content)
    assert analysis.confidence["surgical-procedure"] == 50
    assert "surgical-procedure" in analysis.detected_labels
    assert analysis.document_type == "surgical-procedure"


def test_reported_but_not_labeled_between_thresholds():
    # 1 of 8 keywords: 12.5% rounds half up to 13
    analysis = analyze_document("doc.txt", "suture")
    assert analysis.confidence == {"surgical-procedure": 13}
    assert analysis.detected_labels == []
    assert analysis.document_type == "surgical-procedure"


def test_no_match_is_general_document():
    analysis = analyze_document("x.bin", "zzzz")
    assert analysis.detected_labels == []
    assert analysis.confidence == {}
    assert analysis.document_type == "general-document"
    assert analysis.quality_score == 5


def test_filename_keywords_count():
    analysis = analyze_document("canine_surgery_anesthesia_incision.txt", "")
    assert analysis.confidence["surgical-procedure"] == 38
    assert "surgical-procedure" in analysis.detected_labels


def test_quality_indicator_labels_never_become_type():
    analysis = analyze_document("t.txt", "peer-reviewed evidence-based clinical trial randomized")
    assert analysis.confidence["high-quality"] == 57
    assert analysis.confidence["clinical-guideline"] == 14
    assert analysis.document_type == "clinical-guideline"


def test_detected_labels_truncated_in_table_order():
    # every keyword present: all 19 labels at 100%
    content = " ".join(kw for kws in DEFAULT_PATTERNS.values() for kw in kws)
    analysis = analyze_document("all.txt", content)
    assert len(analysis.confidence) == len(DEFAULT_PATTERNS)
    assert set(analysis.confidence.values()) == {100}
    assert analysis.detected_labels == list(DEFAULT_PATTERNS)[:8]
    # ties keep the first non-reserved label
    assert analysis.document_type == "peer-reviewed-journal"
    assert analysis.quality_score == classification_score(content, list(DEFAULT_PATTERNS), analysis.confidence)


def test_custom_patterns_and_max_labels():
    patterns = build_patterns({"dental": ["Tooth", "dental"], "surgery": ["incision"]})
    analysis = PatternClassifier(patterns, max_labels=1).classify("a.txt", "tooth incision")
    assert analysis.confidence == {"dental": 50, "surgery": 100}
    assert analysis.detected_labels == ["dental"]
    assert analysis.document_type == "surgery"


def test_load_patterns_from_yaml(tmp_path):
    p = tmp_path / "patterns.yaml"
    p.write_text("dental: [tooth, gum]\nsurgery: [incision]\n", encoding="utf-8")
    patterns = load_patterns(str(p))
    assert list(patterns) == ["dental", "surgery"]
    assert patterns["dental"] == ("tooth", "gum")


@pytest.mark.parametrize("raw", [{"dental": []}, {"dental": "tooth"}])
def test_build_patterns_rejects_bad_keywords(raw):
    with pytest.raises(ValueError):
        build_patterns(raw)


def test_format_label_and_veterinary_labels():
    assert format_label("peer-reviewed-journal") == "Peer Reviewed Journal"
    assert format_label("textbook") == "Textbook"
    labels = veterinary_labels()
    assert "surgery" in labels and len(labels) == 15
    labels.append("mutated")
    assert "mutated" not in veterinary_labels()


def test_analysis_to_dict():
    d = analyze_document("x.bin", "zzzz").to_dict()
    assert d == {"detectedLabels": [], "confidence": {}, "documentType": "general-document", "qualityScore": 5}


def test_classifier_validates_raw_tables():
    with pytest.raises(ValueError):
        PatternClassifier({"dental": []})
    analysis = PatternClassifier({"dental": ("TOOTH", "gum")}).classify("a.txt", "tooth")
    assert analysis.confidence == {"dental": 50}
