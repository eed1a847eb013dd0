"""Peer ID pydantic integration tests."""

import re

import pytest
from pydantic import BaseModel, ValidationError

from bt_peer_id import PeerId


class HandshakeSummary(BaseModel):
    peer_id: PeerId
    port: int


RAW = b"-TR0000-*\x00\x01d7xkqq04n"


def test_accepts_peer_id_bytes_and_hex() -> None:
    for value in (PeerId(RAW), RAW, RAW.hex(), "0x" + RAW.hex()):
        summary = HandshakeSummary(peer_id=value, port=6881)
        assert isinstance(summary.peer_id, PeerId)
        assert summary.peer_id == PeerId(RAW)


def test_keeps_existing_instance() -> None:
    peer_id = PeerId(RAW)
    assert HandshakeSummary(peer_id=peer_id, port=6881).peer_id is peer_id


def test_dump_is_lossless_hex() -> None:
    summary = HandshakeSummary(peer_id=PeerId(RAW), port=6881)
    assert summary.model_dump() == {"peer_id": "0x" + RAW.hex(), "port": 6881}


def test_json_round_trip() -> None:
    summary = HandshakeSummary(peer_id=PeerId(RAW), port=6881)
    restored = HandshakeSummary.model_validate_json(summary.model_dump_json())
    assert restored == summary
    assert restored.peer_id.as_bytes() == RAW


def test_json_schema_describes_hex_string() -> None:
    for mode in ("validation", "serialization"):
        schema = HandshakeSummary.model_json_schema(mode=mode)
        field = schema["properties"]["peer_id"]
        assert field["type"] == "string"
        assert re.fullmatch(field["pattern"], "0x" + RAW.hex())
        assert re.fullmatch(field["pattern"], RAW.hex())
        assert not re.fullmatch(field["pattern"], RAW.hex()[:-2])


def test_wrong_length_is_a_validation_error() -> None:
    with pytest.raises(ValidationError, match="got 21 bytes"):
        HandshakeSummary(peer_id=b"\x00" * 21, port=6881)


def test_uninterpretable_input_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        HandshakeSummary(peer_id=20, port=6881)
    with pytest.raises(ValidationError, match="must be hex encoded"):
        HandshakeSummary(peer_id="not hex", port=6881)
