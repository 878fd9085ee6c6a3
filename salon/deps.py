# salon/deps.py

import threading
from typing import Optional

from fastapi import Depends
from sqlmodel import Session

from .core import BookingContext
from .data import SERVICE_DURATIONS, shop_settings
from .db import get_session
from .repository import SalonStore


def get_store(session: Session = Depends(get_session)) -> SalonStore:
    return SalonStore(session)


def booking_context(store: SalonStore, exclude_id: Optional[str] = None) -> BookingContext:
    """Snapshot what the booking engine needs from the store."""
    return BookingContext(
        existing=store.list_bookings(),
        durations=SERVICE_DURATIONS,
        staff=store.staff_directory(),
        opening_hour=shop_settings["opening_hour"],
        closing_hour=shop_settings["closing_hour"],
        slot_minutes=shop_settings["slot_minutes"],
        exclude_id=exclude_id,
    )


# Booking snapshot, check and write happen under this lock so two requests
# cannot both see a free slot and both take it. Staff deletion takes it too
# because the cascade rewrites bookings.
booking_write_lock = threading.Lock()
