# salon/routers/shifts_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from salon.core import time_to_minutes
from salon.deps import get_store
from salon.repository import SalonStore
from salon.schemas import ShiftCreate, ShiftPublic

router = APIRouter(
    prefix="/api/shifts",
    tags=["shifts"],
)


def _validate_shift(shift: ShiftCreate, store: SalonStore):
    if not (shift.staff_id and shift.date and shift.start_time and shift.end_time):
        raise HTTPException(status_code=400, detail="All fields are required.")
    if store.get_staff(shift.staff_id) is None:
        raise HTTPException(status_code=400, detail="Staff member not found.")

    try:
        start = time_to_minutes(shift.start_time)
        end = time_to_minutes(shift.end_time)
    except ValueError:
        raise HTTPException(status_code=400, detail="Shift times must be HH:MM.")
    if end <= start:
        raise HTTPException(status_code=400, detail="Shift end time must be after start time.")


@router.get("", response_model=List[ShiftPublic])
def list_shifts(store: SalonStore = Depends(get_store)):
    return store.list_shifts()


@router.post("", response_model=ShiftPublic, status_code=201)
def create_shift(shift: ShiftCreate, store: SalonStore = Depends(get_store)):
    _validate_shift(shift, store)
    return store.add_shift(
        staff_id=shift.staff_id,
        date=shift.date,
        start_time=shift.start_time,
        end_time=shift.end_time,
    )


@router.put("/{shift_id}", response_model=ShiftPublic)
def update_shift(shift_id: str, shift: ShiftCreate, store: SalonStore = Depends(get_store)):
    existing = store.get_shift(shift_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Shift not found.")
    _validate_shift(shift, store)

    return store.update_shift(
        existing,
        staff_id=shift.staff_id,
        date=shift.date,
        start_time=shift.start_time,
        end_time=shift.end_time,
    )


@router.delete("/{shift_id}", response_model=ShiftPublic)
def delete_shift(shift_id: str, store: SalonStore = Depends(get_store)):
    existing = store.get_shift(shift_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Shift not found.")
    return store.delete_shift(existing)
