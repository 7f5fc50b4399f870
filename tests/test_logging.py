import logging

from corpus_review.logging_ import setup_logging
from corpus_review.run_id import generate_run_id, resolve_out_dir, resolve_run_id


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_corpus_review", False)]


def test_setup_logging_replaces_previous_handlers(tmp_path):
    first = setup_logging(str(tmp_path), "run_a")
    old = _own_handlers()
    second = setup_logging(str(tmp_path), "run_b")
    try:
        handlers = _own_handlers()
        assert len(handlers) == 2
        assert not any(h in handlers for h in old)
        file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in file_handlers] == [second]
        assert first != second
    finally:
        for h in _own_handlers():
            logging.getLogger().removeHandler(h)
            h.close()


def test_run_id_resolution():
    assert resolve_run_id({"run": {"run_id": " nightly "}}) == "nightly"
    assert generate_run_id("metrics").startswith("metrics_")
    assert resolve_run_id({}, prefix="a b").startswith("a_b_")
    assert resolve_out_dir({"run": {"out_dir": "out/{run_id}"}}, "r1") == "out/r1"
    assert resolve_out_dir({}, "r1") == "review_output"
