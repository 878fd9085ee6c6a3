# salon/routers/salon_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from salon.core import available_starts, compute_total_duration
from salon.data import SERVICES, SERVICE_DURATIONS, shop_settings
from salon.deps import booking_context, get_store
from salon.repository import SalonStore
from salon.schemas import AvailabilityResponse, ConfigPublic, ServicePublic

router = APIRouter(
    prefix="/api",
    tags=["salon"],
)


@router.get("/config", response_model=ConfigPublic)
def salon_config():
    return {
        "salon_name": shop_settings["salon_name"],
        "services": SERVICES,
        "opening_hour": shop_settings["opening_hour"],
        "closing_hour": shop_settings["closing_hour"],
        "slot_minutes": shop_settings["slot_minutes"],
    }


@router.get("/services", response_model=List[ServicePublic])
def list_services():
    return SERVICES


@router.get("/availability", response_model=AvailabilityResponse)
def availability(
    date: str,
    services: List[str] = Query(...),
    exclude_id: Optional[str] = Query(None, alias="excludeId"),
    store: SalonStore = Depends(get_store),
):
    # 1) Selected services must add up to something bookable
    total = compute_total_duration(services, SERVICE_DURATIONS)
    if total <= 0:
        raise HTTPException(status_code=400, detail="Invalid services selected.")

    # 2) Walk the slot grid against that day's bookings
    context = booking_context(store, exclude_id=exclude_id)
    return {
        "date": date,
        "services": services,
        "total_duration": total,
        "available_starts": available_starts(date, services, context),
    }
