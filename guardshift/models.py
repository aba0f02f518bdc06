from datetime import date, datetime, time
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, model_validator

POSTS = (
    "REGISTRO",
    "ENTRADA PRINCIPAL",
    "SOTANO",
    "HALL BANCARIO",
    "CUBICULO",
    "ESCLUSA",
    "CCTV",
)
TIME_SLOTS = ("00:00-08:00", "08:00-16:00", "16:00-24:00")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

FREE_POST = "FREE"
FREE_SLOT = "Free"


class User(BaseModel):
    name: str
    email: str
    password: str  # bcrypt hash
    role: Literal["admin", "guard"] = "guard"


class ShiftAssignment(BaseModel):
    # guardId is owned by the user store (an ObjectId in Mongo); never inspected here
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    guardId: Any
    date: date
    dayOfWeek: Literal[WEEKDAYS]
    post: Literal[POSTS + (FREE_POST,)]
    timeSlot: Literal[TIME_SLOTS + (FREE_SLOT,)]

    @model_validator(mode="after")
    def _free_pairs_with_free(self):
        if (self.post == FREE_POST) != (self.timeSlot == FREE_SLOT):
            raise ValueError(
                f"post={self.post!r} and timeSlot={self.timeSlot!r}: "
                f"{FREE_POST!r} must pair with {FREE_SLOT!r}"
            )
        return self

    @property
    def is_free(self) -> bool:
        return self.post == FREE_POST

    def to_document(self) -> Dict[str, Any]:
        """Mongo document; BSON has no date type, so the day is stored as midnight."""
        doc = self.model_dump()
        doc["date"] = datetime.combine(self.date, time.min)
        return doc


class Event(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str
    date: datetime
    description: str
    createdBy: Any
