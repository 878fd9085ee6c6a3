# salon/repository.py
"""
SalonStore: the only place that reads or writes bookings, staff and shifts.

Routers get one per request (wrapping the request's Session) and hand
snapshots from it to salon.core; the engine never sees the store.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlmodel import Session, select

from .data import SEED_SHIFTS, SEED_STAFF
from .models import Booking, Shift, Staff

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SalonStore:
    def __init__(self, session: Session):
        self.session = session

    def _save(self, obj):
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def _delete(self, obj) -> dict:
        # the instance expires on commit, so hand back what it held
        snapshot = obj.model_dump()
        self.session.delete(obj)
        self.session.commit()
        return snapshot

    # ----- bookings -----
    def list_bookings(self) -> List[Booking]:
        return list(self.session.exec(select(Booking).order_by(Booking.date, Booking.time)).all())

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self.session.get(Booking, booking_id)

    def add_booking(self, **fields) -> Booking:
        booking = Booking(id=new_id(), created_at=utc_now_iso(), **fields)
        return self._save(booking)

    def update_booking(self, booking: Booking, **fields) -> Booking:
        for key, value in fields.items():
            setattr(booking, key, value)
        return self._save(booking)

    def delete_booking(self, booking: Booking) -> dict:
        return self._delete(booking)

    # ----- staff -----
    def list_staff(self) -> List[Staff]:
        return list(self.session.exec(select(Staff)).all())

    def staff_directory(self) -> Dict[str, str]:
        return {member.id: member.name for member in self.list_staff()}

    def get_staff(self, staff_id: str) -> Optional[Staff]:
        return self.session.get(Staff, staff_id)

    def add_staff(self, name: str, role: str = "") -> Staff:
        return self._save(Staff(id=new_id(), name=name, role=role))

    def update_staff(self, member: Staff, name: str, role: str = "") -> Staff:
        member.name = name
        member.role = role
        return self._save(member)

    def delete_staff(self, member: Staff) -> dict:
        """Delete a staff member, their shifts, and their attribution on bookings."""
        snapshot = member.model_dump()
        shifts = self.session.exec(select(Shift).where(Shift.staff_id == member.id)).all()
        for shift in shifts:
            self.session.delete(shift)

        bookings = self.session.exec(select(Booking).where(Booking.staff_id == member.id)).all()
        for booking in bookings:
            booking.staff_id = None
            booking.staff_name = None
            self.session.add(booking)

        self.session.delete(member)
        self.session.commit()
        logger.info(
            "Deleted staff %s (%d shifts removed, %d bookings detached)",
            snapshot["id"], len(shifts), len(bookings),
        )
        return snapshot

    # ----- shifts -----
    def list_shifts(self) -> List[Shift]:
        return list(self.session.exec(select(Shift).order_by(Shift.date, Shift.start_time)).all())

    def get_shift(self, shift_id: str) -> Optional[Shift]:
        return self.session.get(Shift, shift_id)

    def add_shift(self, **fields) -> Shift:
        return self._save(Shift(id=new_id(), **fields))

    def update_shift(self, shift: Shift, **fields) -> Shift:
        for key, value in fields.items():
            setattr(shift, key, value)
        return self._save(shift)

    def delete_shift(self, shift: Shift) -> dict:
        return self._delete(shift)

    def seed(self):
        if self.session.exec(select(Staff)).first() is not None:
            return
        for member in SEED_STAFF:
            self.session.add(Staff(**member))
        for shift in SEED_SHIFTS:
            self.session.add(Shift(**shift))
        self.session.commit()
        logger.info("Seeded %d staff and %d shifts", len(SEED_STAFF), len(SEED_SHIFTS))
