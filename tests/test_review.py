import json

import pytest

from corpus_review.dedup import DuplicateCheckOptions, check_duplicate
from corpus_review.pipeline.context import Document, DocumentStatus
from corpus_review.pipeline.review import review_documents, run_stages
from corpus_review.stages.registry import make_stages
from corpus_review.storage import JSONLDocumentStore, MemoryDocumentStore, read_documents

SURGICAL = "The surgery used a surgical approach under anesthesia with a small incision."


def _abstract() -> str:
    body = " ".join(f"observation{i:03d}" for i in range(120))
    return f"Canine anesthesia protocols. {body}. " * 2


def test_batch_is_reviewed_against_corpus_and_itself():
    store = MemoryDocumentStore([Document("vet_study.pdf", _abstract(), status=DocumentStatus.APPROVED)])
    incoming = [
        Document("Vet_Study.pdf", "x"),
        Document("new_paper.txt", SURGICAL),
        Document("new_paper.txt", "other"),
    ]
    decisions = review_documents(incoming, store)

    assert [d.accepted for d in decisions] == [False, True, False]
    assert decisions[0].reason_code == "DUP_NAME_EXACT"
    assert decisions[0].stage == "duplicate_gate"
    assert decisions[0].analysis is None
    assert decisions[2].duplicate.existing_file == "new_paper.txt"

    accepted = decisions[1]
    assert accepted.stage == "auto_label"
    assert accepted.document.type == "surgical-procedure"
    assert "surgical-procedure" in accepted.document.labels
    assert "Veterinary Surgery" in accepted.document.labels
    assert accepted.document.quality_score == accepted.analysis.quality_score
    assert accepted.document.extracted_data.title == SURGICAL

    assert len(store.decisions) == 3
    assert [d.name for d in store.documents] == ["vet_study.pdf", "new_paper.txt"]


def test_existing_labels_are_kept_and_merged():
    stages = make_stages(["auto_label"], {"labeling": {"specialty_labels": False}}, [])
    doc = Document("case.txt", SURGICAL, labels=["surgical-procedure", "reviewed"])
    decision = run_stages(doc, stages)
    assert decision.accepted
    assert doc.labels == ["surgical-procedure", "reviewed"]


def test_content_duplicate_with_prefilter():
    corpus = [Document("vet_study.pdf", _abstract())]
    cfg = {"prefilter": {"enabled": True, "threshold": 0.5}}
    store = MemoryDocumentStore(corpus)
    decisions = review_documents([Document("renamed_trial.txt", _abstract() + " addendum")], store, cfg)
    assert not decisions[0].accepted
    assert decisions[0].reason_code == "DUP_CONTENT"
    assert "vet_study.pdf" in decisions[0].reason_detail


def test_unknown_stage():
    with pytest.raises(ValueError):
        make_stages(["spellcheck"], {}, [])


def test_jsonl_store_round_trip(tmp_path):
    corpus_path = tmp_path / "corpus.jsonl"
    decisions_path = tmp_path / "out" / "decisions.jsonl"
    corpus_path.write_text(
        "\n".join([
            json.dumps({"name": "report.csv", "content": "rows", "status": "approved", "created_at": "2025-01-01T00:00:00Z"}),
            "{not json",
            json.dumps({"name": "bad.txt", "content": "x", "status": "bogus"}),
            "",
        ]),
        encoding="utf-8",
    )
    docs = read_documents(str(corpus_path))
    assert len(docs) == 1
    assert docs[0].doc_id == "corpus_1"
    assert docs[0].is_approved
    assert docs[0].created_at.tzinfo is not None

    store = JSONLDocumentStore(str(corpus_path), decisions_path=str(decisions_path))
    decisions = review_documents([Document("Report.csv", "rows"), Document("fresh.txt", SURGICAL)], store)
    assert [d.accepted for d in decisions] == [False, True]

    names = [d.name for d in read_documents(str(corpus_path))]
    assert names == ["report.csv", "fresh.txt"]
    lines = decisions_path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(x)["decision"] for x in lines] == ["reject", "accept"]


def test_missing_corpus_file_is_empty(tmp_path):
    assert read_documents(str(tmp_path / "nope.jsonl")) == []


def test_non_object_lines_are_skipped(tmp_path):
    path = tmp_path / "corpus.jsonl"
    path.write_text(
        json.dumps({"name": "a.txt", "content": "x"}) + "\n"
        + "[1, 2]\n"
        + '"just a string"\n'
        + json.dumps({"name": "b.txt", "content": "y", "labels": "surgery"}) + "\n"
        + json.dumps({"name": "c.txt", "content": "z", "extracted_data": [1]}) + "\n",
        encoding="utf-8",
    )
    assert [d.name for d in read_documents(str(path))] == ["a.txt"]


def test_non_string_fields_are_coerced(tmp_path):
    path = tmp_path / "corpus.jsonl"
    path.write_text(json.dumps({"name": 42, "content": 12345}) + "\n", encoding="utf-8")
    docs = read_documents(str(path))
    assert docs[0].name == "42"
    assert docs[0].original_content == "12345"

    result = check_duplicate("b.txt", "y" * 200, docs, DuplicateCheckOptions(min_content_length=0))
    assert not result.is_duplicate
