"""Tests for body encoding and response decoding."""

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nakama_sdk._internal.dispatch.codec import decode_body, encode_body
from nakama_sdk.exceptions import NakamaDecodeError
from nakama_sdk.models import LeaderboardRecordList, Session


class CamelPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    player_name: str = Field(alias="playerName")
    level: int | None = None


class TestEncodeBody:
    """Tests for encode_body()."""

    def test_none(self):
        assert encode_body(None) is None

    def test_model_uses_schema(self):
        """Should encode models with aliases and without unset fields."""
        assert encode_body(CamelPayload(player_name="ann")) == b'{"playerName":"ann"}'

    def test_plain_values(self):
        assert encode_body({"a": [1, 2]}) == b'{"a":[1,2]}'
        assert encode_body("text") == b'"text"'
        assert encode_body(0) == b"0"


class TestDecodeBody:
    """Tests for decode_body()."""

    def test_empty_body(self):
        assert decode_body(b"", Session) is None
        assert decode_body(b"  \n", Session) is None

    def test_ignores_unknown_fields(self):
        """SDK models should tolerate fields added by newer servers."""
        session = decode_body(b'{"token":"t","new_field":1}', Session)
        assert session == Session(token="t")

    def test_int64_strings_are_coerced(self):
        content = (
            b'{"records":[{"leaderboard_id":"weekly","owner_id":"u1",'
            b'"score":"9007199254740993","rank":"1"}]}'
        )
        result = decode_body(content, LeaderboardRecordList)
        assert result.records[0].score == 9007199254740993
        assert result.records[0].rank == 1

    def test_caller_model_strictness(self):
        """Caller-supplied models decide their own strictness."""
        with pytest.raises(NakamaDecodeError) as exc_info:
            decode_body(b'{"playerName":"ann","extra":1}', CamelPayload)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_builtin_types(self):
        assert decode_body(b'{"a":1}', dict) == {"a": 1}
        assert decode_body(b"[1,2]", list[int]) == [1, 2]

    def test_invalid_json(self):
        with pytest.raises(NakamaDecodeError):
            decode_body(b"{not json", dict)
