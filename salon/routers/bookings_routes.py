# salon/routers/bookings_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from salon.core import Accepted, BookingCandidate, Rejection, validate
from salon.deps import booking_context, booking_write_lock, get_store
from salon.notifications import BookingNotifier, get_notifier
from salon.repository import SalonStore
from salon.schemas import BookingCreate, BookingPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
)


def _candidate(payload: BookingCreate) -> BookingCandidate:
    return BookingCandidate(
        name=payload.name,
        email=payload.email,
        date=payload.date,
        time=payload.time,
        services=payload.services,
        staff_id=payload.staff_id or None,
    )


def _raise_rejection(decision):
    status = 409 if decision.reason == Rejection.conflict else 400
    logger.info("Booking rejected (%s): %s", decision.reason.value, decision.message)
    raise HTTPException(status_code=status, detail=decision.message)


@router.get("", response_model=List[BookingPublic])
def list_bookings(store: SalonStore = Depends(get_store)):
    return store.list_bookings()


@router.post("", response_model=BookingPublic, status_code=201)
def create_booking(
    payload: BookingCreate,
    store: SalonStore = Depends(get_store),
    notifier: BookingNotifier = Depends(get_notifier),
):
    candidate = _candidate(payload)

    with booking_write_lock:
        decision = validate(candidate, booking_context(store))
        if not isinstance(decision, Accepted):
            _raise_rejection(decision)

        booking = store.add_booking(
            name=candidate.name,
            email=candidate.email,
            date=candidate.date,
            time=candidate.time,
            services=list(candidate.services),
            phone=payload.phone or "",
            notes=payload.notes or "",
            staff_id=candidate.staff_id,
            staff_name=decision.staff_name,
            total_duration=decision.total_duration,
        )
        saved = booking.model_dump()

    logger.info("Booking %s created for %s %s (%d min)", saved["id"], saved["date"], saved["time"], saved["total_duration"])

    # Fire-and-forget: the response never waits on the email
    notifier.submit(saved)
    return saved


@router.put("/{booking_id}", response_model=BookingPublic)
def update_booking(
    booking_id: str,
    payload: BookingCreate,
    store: SalonStore = Depends(get_store),
):
    candidate = _candidate(payload)

    with booking_write_lock:
        target = store.get_booking(booking_id)
        if target is None:
            raise HTTPException(status_code=404, detail="Booking not found.")

        decision = validate(candidate, booking_context(store, exclude_id=booking_id))
        if not isinstance(decision, Accepted):
            _raise_rejection(decision)

        booking = store.update_booking(
            target,
            name=candidate.name,
            email=candidate.email,
            date=candidate.date,
            time=candidate.time,
            services=list(candidate.services),
            phone=payload.phone or "",
            notes=payload.notes or "",
            staff_id=candidate.staff_id,
            staff_name=decision.staff_name,
            total_duration=decision.total_duration,
        )
        saved = booking.model_dump()

    logger.info("Booking %s updated to %s %s", booking_id, saved["date"], saved["time"])
    return saved


@router.delete("/{booking_id}", response_model=BookingPublic)
def delete_booking(booking_id: str, store: SalonStore = Depends(get_store)):
    with booking_write_lock:
        target = store.get_booking(booking_id)
        if target is None:
            raise HTTPException(status_code=404, detail="Booking not found.")
        deleted = store.delete_booking(target)

    logger.info("Booking %s deleted", booking_id)
    return deleted
