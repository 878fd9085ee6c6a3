# salon/models.py

from typing import Optional, List

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


class Staff(SQLModel, table=True):
    id: str = Field(primary_key=True)
    name: str
    role: str = ""


class Shift(SQLModel, table=True):
    id: str = Field(primary_key=True)

    staff_id: str = Field(index=True)
    date: str = Field(index=True)  # YYYY-MM-DD
    start_time: str                # HH:MM
    end_time: str


class Booking(SQLModel, table=True):
    id: str = Field(primary_key=True)

    name: str
    email: str
    date: str = Field(index=True)
    time: str
    services: List[str] = Field(sa_column=Column(JSON))
    phone: str = ""
    notes: str = ""
    staff_id: Optional[str] = Field(default=None, index=True)
    staff_name: Optional[str] = None
    total_duration: int  # snapshot of the service durations when saved
    created_at: str
