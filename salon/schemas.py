# salon/schemas.py

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase, python code and snake_case input still work
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServicePublic(CamelModel):
    id: str
    name: str
    duration: int


class ConfigPublic(CamelModel):
    salon_name: str
    services: List[ServicePublic]
    opening_hour: int
    closing_hour: int
    slot_minutes: int


# Presence is checked by the booking engine so a missing field gets the
# salon's own message rather than a 422.
class BookingCreate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    services: Optional[Any] = None  # a non-list is reported as missing services
    staff_id: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class BookingPublic(CamelModel):
    id: str
    name: str
    email: str
    date: str
    time: str
    services: List[Any]
    phone: str = ""
    notes: str = ""
    staff_id: Optional[str] = None
    staff_name: Optional[str] = None
    total_duration: int
    created_at: str


class StaffCreate(CamelModel):
    name: Optional[str] = None
    role: Optional[str] = None


class StaffPublic(CamelModel):
    id: str
    name: str
    role: str = ""


class ShiftCreate(CamelModel):
    staff_id: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class ShiftPublic(CamelModel):
    id: str
    staff_id: str
    date: str
    start_time: str
    end_time: str


class AvailabilityResponse(CamelModel):
    date: str
    services: List[str]
    total_duration: int
    available_starts: List[str]
