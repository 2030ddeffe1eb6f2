"""
Unit tests for edit translation and document updates.
"""

import pytest

from gdocs.sdk.docs.update import build_edit_requests, update_document
from gdocs.sdk.exceptions import InvalidRangeError, ValidationError

DOC_ID = "ABCDEFGHIJKLMNOPQRSTUVWXY0123"


class TestBuildEditRequests:
    """Tests for build_edit_requests."""

    def test_no_positions_appends_at_end(self):
        assert build_edit_requests("X") == [
            {"insertText": {"text": "X", "endOfSegmentLocation": {"segmentId": ""}}}
        ]

    def test_start_only_inserts_without_delete(self):
        assert build_edit_requests("X", start_position=5) == [
            {"insertText": {"text": "X", "location": {"index": 5}}}
        ]

    def test_range_is_delete_then_insert(self):
        requests = build_edit_requests("X", start_position=5, end_position=10)

        assert requests == [
            {"deleteContentRange": {"range": {"startIndex": 5, "endIndex": 10}}},
            {"insertText": {"text": "X", "location": {"index": 5}}},
        ]

    def test_start_zero_is_a_position(self):
        requests = build_edit_requests("X", start_position=0)
        assert requests == [{"insertText": {"text": "X", "location": {"index": 0}}}]

    def test_end_without_start_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            build_edit_requests("X", end_position=10)
        assert "startPosition" in str(exc.value)

    def test_end_before_start_is_rejected(self):
        with pytest.raises(InvalidRangeError):
            build_edit_requests("X", start_position=10, end_position=5)

    def test_non_integer_positions_are_rejected(self):
        for bad in ["5", 1.5, True]:
            with pytest.raises(InvalidRangeError):
                build_edit_requests("X", start_position=bad)

    def test_indices_are_not_clamped(self):
        requests = build_edit_requests("X", start_position=10_000, end_position=20_000)
        assert requests[0]["deleteContentRange"]["range"]["endIndex"] == 20_000


class TestUpdateDocument:
    """Tests for update_document against a fake store."""

    def test_submits_one_batch_with_normalized_id(self, fake_store):
        store = fake_store()
        result = update_document(
            store, f"https://docs.google.com/document/d/{DOC_ID}/edit", "new",
            start_position=1, end_position=4
        )

        assert result == {"id": DOC_ID, "requests": 2}
        assert len(store.batches) == 1
        doc_id, requests = store.batches[0]
        assert doc_id == DOC_ID
        assert list(requests[0]) == ["deleteContentRange"]
        assert list(requests[1]) == ["insertText"]

    def test_invalid_range_makes_no_store_call(self, fake_store):
        store = fake_store()
        with pytest.raises(ValidationError):
            update_document(store, DOC_ID, "new", end_position=3)
        assert store.calls == []
