# salon/routers/staff_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from salon.deps import booking_write_lock, get_store
from salon.repository import SalonStore
from salon.schemas import StaffCreate, StaffPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/staff",
    tags=["staff"],
)


@router.get("", response_model=List[StaffPublic])
def list_staff(store: SalonStore = Depends(get_store)):
    return store.list_staff()


@router.post("", response_model=StaffPublic, status_code=201)
def create_staff(member: StaffCreate, store: SalonStore = Depends(get_store)):
    if not member.name:
        raise HTTPException(status_code=400, detail="Name is required.")

    created = store.add_staff(name=member.name, role=member.role or "")
    logger.info("Staff %s (%s) created", created.id, created.name)
    return created


@router.put("/{staff_id}", response_model=StaffPublic)
def update_staff(staff_id: str, member: StaffCreate, store: SalonStore = Depends(get_store)):
    existing = store.get_staff(staff_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Staff not found.")
    if not member.name:
        raise HTTPException(status_code=400, detail="Name is required.")

    return store.update_staff(existing, name=member.name, role=member.role or "")


@router.delete("/{staff_id}", response_model=StaffPublic)
def delete_staff(staff_id: str, store: SalonStore = Depends(get_store)):
    with booking_write_lock:
        existing = store.get_staff(staff_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Staff not found.")
        return store.delete_staff(existing)
