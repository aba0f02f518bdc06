from datetime import date, datetime

import pytest
from bson import ObjectId
from pydantic import ValidationError

from guardshift.models import Event, ShiftAssignment, User


def _shift(**overrides):
    fields = dict(
        guardId=ObjectId(),
        date=date(2024, 7, 1),
        dayOfWeek="Monday",
        post="CCTV",
        timeSlot="08:00-16:00",
    )
    fields.update(overrides)
    return ShiftAssignment(**fields)


def test_free_day_is_valid():
    s = _shift(post="FREE", timeSlot="Free")
    assert s.is_free


@pytest.mark.parametrize(
    "post, slot",
    [("FREE", "08:00-16:00"), ("CCTV", "Free")],
)
def test_half_free_pairing_is_rejected(post, slot):
    with pytest.raises(ValidationError):
        _shift(post=post, timeSlot=slot)


@pytest.mark.parametrize(
    "overrides",
    [{"post": "ROOF"}, {"timeSlot": "12:00-20:00"}, {"dayOfWeek": "Lunes"}],
)
def test_values_outside_enumerations_are_rejected(overrides):
    with pytest.raises(ValidationError):
        _shift(**overrides)


def test_to_document_stores_midnight_datetime():
    gid = ObjectId()
    doc = _shift(guardId=gid).to_document()
    assert doc == {
        "guardId": gid,
        "date": datetime(2024, 7, 1, 0, 0),
        "dayOfWeek": "Monday",
        "post": "CCTV",
        "timeSlot": "08:00-16:00",
    }


def test_user_role_is_restricted():
    assert User(name="A", email="a@security.com", password="x").role == "guard"
    with pytest.raises(ValidationError):
        User(name="A", email="a@security.com", password="x", role="root")


def test_event_keeps_creator_reference():
    admin_id = ObjectId()
    e = Event(title="Drill", date=datetime(2024, 7, 8, 9), description="d", createdBy=admin_id)
    assert e.model_dump()["createdBy"] is admin_id
