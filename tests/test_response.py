"""Unit tests for the tolerant JSON response decoder."""

import json

import pytest

from ragchat.errors import MalformedResponseError
from ragchat.llm.response import decode_json_object


class TestDecodeJsonObject:
    """Tests for decode_json_object."""

    def test_plain_object(self):
        assert decode_json_object('{"response": "hi"}') == {"response": "hi"}

    @pytest.mark.parametrize("prefix,suffix", [
        ("time=2024 level=INFO msg=loaded\n", ""),
        ("", "\n[GIN] 200 | 1.2s | POST /api/chat"),
        ("garbage before ", " and after"),
    ])
    def test_object_surrounded_by_noise(self, prefix, suffix):
        payload = {"embeddings": [[0.1, 0.2]], "model": "mxbai-embed-large", "nested": {"a": [1, {"b": None}]}}
        raw = prefix + json.dumps(payload) + suffix
        assert decode_json_object(raw) == payload

    def test_no_braces(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object("Internal Server Error")

    def test_empty_string(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object("")

    def test_only_opening_brace(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object('{"truncated": ')

    def test_closing_before_opening(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object("} nothing here {")

    def test_invalid_json_span(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_json_object("{not json}")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_two_objects_not_supported(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object('{"a": 1}\n{"b": 2}')
