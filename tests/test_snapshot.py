"""Tests for snapshot encoding, validation, and stream save/load."""

from __future__ import annotations

import io
import json

import pytest

from text_bayes.classifier import NaiveBayesClassifier
from text_bayes.errors import InvalidArgumentError, InvalidDataError, SnapshotIssue
from text_bayes.models import CategoryState
from text_bayes.snapshot import SCHEMA_VERSION, build_snapshot, deserialize, serialize
from text_bayes.tokenizer import TokenizerSettings


def _payload(categories: dict, version: int = SCHEMA_VERSION, **extra) -> bytes:
    return json.dumps({"version": version, "categories": categories, **extra}).encode("utf-8")


class _NonWritableStream(io.BytesIO):
    def writable(self) -> bool:
        return False


class _NonReadableStream(io.BytesIO):
    def readable(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

class TestBuildSnapshot:
    """Tests for building the persisted document."""

    def test_structure(self):
        state = CategoryState(name="Spam", token_counts={"buy": 2, "now": 1}, token_tally=3)
        snapshot = build_snapshot({"spam": state})
        assert snapshot == {
            "version": SCHEMA_VERSION,
            "categories": {"Spam": {"tally": 3, "tokens": {"buy": 2, "now": 1}}},
        }

    def test_tokenizer_block_included_when_given(self):
        snapshot = build_snapshot({}, TokenizerSettings("spanish", True))
        assert snapshot["tokenizer"] == {"language": "spanish", "removeStopWords": True}

    def test_snapshot_is_independent_copy(self):
        state = CategoryState(name="a", token_counts={"x": 1}, token_tally=1)
        snapshot = build_snapshot({"a": state})
        state.token_counts["x"] = 5
        assert snapshot["categories"]["a"]["tokens"] == {"x": 1}

    def test_serialize_is_json(self):
        data = json.loads(serialize(build_snapshot({})).decode("utf-8"))
        assert data == {"version": SCHEMA_VERSION, "categories": {}}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestDeserialize:
    """Each validation rule fails with its own issue."""

    def test_valid_payload(self):
        decoded = deserialize(_payload({"Spam": {"tally": 3, "tokens": {"buy": 2, "now": 1}}}))
        state = decoded.categories["spam"]
        assert state.name == "Spam"
        assert state.token_tally == 3
        assert state.token_counts == {"buy": 2, "now": 1}
        assert decoded.tokenizer_settings is None

    def test_priors_not_computed(self):
        decoded = deserialize(_payload({"a": {"tally": 1, "tokens": {"x": 1}}}))
        assert decoded.categories["a"].prior_category == 0.0

    def test_empty_category_allowed(self):
        decoded = deserialize(_payload({"quiet": {"tally": 0, "tokens": {}}}))
        assert decoded.categories["quiet"].token_tally == 0

    def test_tokenizer_block_decoded(self):
        payload = _payload({}, tokenizer={"language": "german", "removeStopWords": True})
        assert deserialize(payload).tokenizer_settings == TokenizerSettings("german", True)

    @pytest.mark.parametrize(
        "payload",
        [b"", b"not json", b"null", b"[]", b"42", b'{"version": 1}', b'{"version": 1, "categories": []}',
         b"\xff\xfe\x00"],
    )
    def test_unreadable(self, payload):
        with pytest.raises(InvalidDataError, match="Unable to deserialize") as exc_info:
            deserialize(payload)
        assert exc_info.value.issue is SnapshotIssue.UNREADABLE

    @pytest.mark.parametrize("version", [0, 2, 99, "1", None, True])
    def test_unsupported_version(self, version):
        with pytest.raises(InvalidDataError, match="Unsupported model version") as exc_info:
            deserialize(_payload({}, version=version))
        assert exc_info.value.issue is SnapshotIssue.UNSUPPORTED_VERSION

    @pytest.mark.parametrize("name", ["!!!", "space name", "A" * 65, ""])
    def test_invalid_category_name(self, name):
        with pytest.raises(InvalidDataError, match="Invalid category name") as exc_info:
            deserialize(_payload({name: {"tally": 1, "tokens": {"token": 1}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_CATEGORY_NAME

    def test_case_duplicate_category_rejected(self):
        payload = _payload({
            "spam": {"tally": 1, "tokens": {"a": 1}},
            "SPAM": {"tally": 1, "tokens": {"b": 1}},
        })
        with pytest.raises(InvalidDataError) as exc_info:
            deserialize(payload)
        assert exc_info.value.issue is SnapshotIssue.INVALID_CATEGORY_NAME

    @pytest.mark.parametrize("tally", [-1, 1.5, "3", None])
    def test_invalid_tally(self, tally):
        with pytest.raises(InvalidDataError, match="Invalid tally") as exc_info:
            deserialize(_payload({"spam": {"tally": tally, "tokens": {}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_TALLY

    @pytest.mark.parametrize("token", ["", "   ", "\t"])
    def test_invalid_token_name(self, token):
        with pytest.raises(InvalidDataError, match="Invalid token name") as exc_info:
            deserialize(_payload({"spam": {"tally": 1, "tokens": {token: 1}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_TOKEN_NAME

    @pytest.mark.parametrize("count", [0, -2, 1.5, "1", True])
    def test_invalid_token_count(self, count):
        with pytest.raises(InvalidDataError, match="Invalid token count") as exc_info:
            deserialize(_payload({"spam": {"tally": 1, "tokens": {"token": count}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_TOKEN_COUNT

    def test_tally_mismatch(self):
        with pytest.raises(InvalidDataError, match="Tally mismatch") as exc_info:
            deserialize(_payload({"spam": {"tally": 2, "tokens": {"token": 1}}}))
        assert exc_info.value.issue is SnapshotIssue.TALLY_MISMATCH

    def test_version_checked_before_categories(self):
        with pytest.raises(InvalidDataError) as exc_info:
            deserialize(_payload({"!!!": {"tally": -1, "tokens": {}}}, version=7))
        assert exc_info.value.issue is SnapshotIssue.UNSUPPORTED_VERSION

    def test_tally_checked_before_tokens(self):
        with pytest.raises(InvalidDataError) as exc_info:
            deserialize(_payload({"spam": {"tally": -1, "tokens": {"": 0}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_TALLY

    def test_token_name_checked_before_count(self):
        with pytest.raises(InvalidDataError) as exc_info:
            deserialize(_payload({"spam": {"tally": 1, "tokens": {" ": 0}}}))
        assert exc_info.value.issue is SnapshotIssue.INVALID_TOKEN_NAME

    @pytest.mark.parametrize("block", ["english", [1], {"removeStopWords": "no"}])
    def test_malformed_tokenizer_block(self, block):
        with pytest.raises(InvalidDataError) as exc_info:
            deserialize(_payload({}, tokenizer=block))
        assert exc_info.value.issue is SnapshotIssue.UNREADABLE

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            deserialize(b"not json")


# ---------------------------------------------------------------------------
# Stream save/load on the classifier
# ---------------------------------------------------------------------------

class TestStreamPersistence:
    """Tests for NaiveBayesClassifier.save and .load."""

    def test_round_trip_preserves_classification(self, trained_classifier):
        stream = io.BytesIO()
        trained_classifier.save(stream)
        stream.seek(0)

        loaded = NaiveBayesClassifier()
        loaded.load(stream)

        prediction = loaded.classify("buy now")
        assert prediction.category == "spam"
        assert prediction.score > 0
        assert loaded.get_summaries() == trained_classifier.get_summaries()

    @pytest.mark.parametrize("text", ["buy now", "meeting calendar", "buy notes", "unseen", ""])
    def test_round_trip_preserves_scores(self, trained_classifier, text):
        stream = io.BytesIO()
        trained_classifier.save(stream)
        loaded = NaiveBayesClassifier()
        loaded.load(io.BytesIO(stream.getvalue()))
        assert loaded.get_scores(text) == pytest.approx(trained_classifier.get_scores(text))
        assert loaded.classify(text) == trained_classifier.classify(text)

    def test_saved_payload_contains_tokenizer(self):
        clf = NaiveBayesClassifier(language="french", remove_stop_words=True)
        stream = io.BytesIO()
        clf.save(stream)
        data = json.loads(stream.getvalue())
        assert data["tokenizer"] == {"language": "french", "removeStopWords": True}

    def test_custom_tokenizer_not_persisted(self, plain_classifier):
        plain_classifier.train("a", "x")
        stream = io.BytesIO()
        plain_classifier.save(stream)
        assert "tokenizer" not in json.loads(stream.getvalue())

    def test_load_restores_tokenizer_settings(self):
        clf = NaiveBayesClassifier()
        clf.load(io.BytesIO(_payload({}, tokenizer={"language": "spanish", "removeStopWords": True})))
        assert clf.tokenizer_settings == TokenizerSettings("spanish", True)

    def test_load_recomputes_priors(self):
        clf = NaiveBayesClassifier()
        clf.load(io.BytesIO(_payload({
            "a": {"tally": 3, "tokens": {"x": 3}},
            "b": {"tally": 1, "tokens": {"y": 1}},
        })))
        summaries = clf.get_summaries()
        assert summaries["a"].prior_category == pytest.approx(0.75)
        assert summaries["b"].prior_non_category == pytest.approx(0.75)

    def test_load_replaces_existing_model(self, trained_classifier):
        trained_classifier.load(io.BytesIO(_payload({"other": {"tally": 1, "tokens": {"x": 1}}})))
        assert trained_classifier.categories == ["other"]

    def test_failed_load_keeps_existing_model(self, trained_classifier):
        before = trained_classifier.get_summaries()
        with pytest.raises(InvalidDataError):
            trained_classifier.load(io.BytesIO(_payload({"spam": {"tally": 5, "tokens": {"x": 1}}})))
        assert trained_classifier.get_summaries() == before
        assert trained_classifier.classify("buy").category == "spam"

    def test_save_requires_writable_stream(self, trained_classifier):
        with pytest.raises(InvalidArgumentError, match="writable"):
            trained_classifier.save(_NonWritableStream())

    def test_load_requires_readable_stream(self, classifier):
        with pytest.raises(InvalidArgumentError, match="readable"):
            classifier.load(_NonReadableStream())

    def test_save_rejects_text_stream(self, trained_classifier):
        with pytest.raises(InvalidArgumentError):
            trained_classifier.save(io.StringIO())

    def test_load_rejects_text_stream(self, trained_classifier):
        before = trained_classifier.get_summaries()
        with pytest.raises(InvalidArgumentError):
            trained_classifier.load(io.StringIO('{"version": 1, "categories": {}}'))
        assert trained_classifier.get_summaries() == before

    def test_load_rejects_stream_returning_text(self, classifier):
        class _TextReader:
            def readable(self) -> bool:
                return True

            def read(self) -> str:
                return '{"version": 1, "categories": {}}'

        with pytest.raises(InvalidArgumentError, match="binary"):
            classifier.load(_TextReader())

    def test_save_to_closed_stream_rejected(self, trained_classifier):
        stream = io.BytesIO()
        stream.close()
        with pytest.raises(InvalidArgumentError):
            trained_classifier.save(stream)
