"""Tests for request body serialization."""

import pydantic
import pytest

from doohly import types


def test_booking_fields_use_wire_names():
    """Provided fields are serialized under their camelCase names."""
    fields = types.BookingFields(
        name="Test Booking",
        status="draft",
        external_id="ext-123",
    )
    assert fields.to_body() == {
        "name": "Test Booking",
        "status": "draft",
        "externalId": "ext-123",
    }


def test_booking_fields_full_alias_table():
    """Every multi-word attribute maps to its camelCase wire name."""
    fields = types.BookingFields(
        plays_per_loop=2,
        loops_per_play=1,
        play_consecutively=True,
        purchase_type="Sold",
        assigned_creatives=[{"id": "c1"}],
        assigned_frames=[{"id": "f1"}],
    )
    assert set(fields.to_body()) == {
        "playsPerLoop",
        "loopsPerPlay",
        "playConsecutively",
        "purchaseType",
        "assignedCreatives",
        "assignedFrames",
    }


def test_booking_fields_keep_falsy_values():
    """False and 0 are real values and are not dropped."""
    fields = types.BookingFields(play_consecutively=False, plays_per_loop=0, tags=[])
    assert fields.to_body() == {
        "playConsecutively": False,
        "playsPerLoop": 0,
        "tags": [],
    }


def test_booking_fields_reject_unknown_field():
    """Misspelled attributes fail instead of being silently dropped."""
    with pytest.raises(pydantic.ValidationError):
        types.BookingFields(extrnal_id="x")


def test_creative_upload_optional_fields_omitted():
    """Only required upload fields are sent when optionals are not given."""
    upload = types.CreativeUpload(name="test.png", mime_type="image/png", file_size=123_456)
    assert upload.to_body() == {
        "name": "test.png",
        "mimeType": "image/png",
        "fileSize": 123_456,
    }


def test_provided_drops_none_only():
    """provided() keeps falsy values and drops None."""
    assert types.provided(a=None, b=0, c=False, d="") == {"b": 0, "c": False, "d": ""}
