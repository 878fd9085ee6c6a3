# salon/core.py
"""
Booking validation and conflict detection.

Everything here is a pure function of its arguments: the routers read a
snapshot of the store, call validate() and persist only on Accepted.
Times are "HH:MM" strings handled as minutes from midnight, dates are
plain "YYYY-MM-DD" strings compared for equality.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union


class Rejection(str, Enum):
    missing_fields = "missing_fields"
    unknown_staff = "unknown_staff"
    out_of_hours = "out_of_hours"
    not_on_grid = "not_on_grid"
    invalid_services = "invalid_services"
    conflict = "conflict"


MESSAGES = {
    Rejection.missing_fields: "Missing fields or no services selected.",
    Rejection.unknown_staff: "Selected staff member does not exist.",
    Rejection.out_of_hours: "Selected time is outside salon hours.",
    Rejection.not_on_grid: "Time must be in {slot_minutes}-minute intervals.",
    Rejection.invalid_services: "Invalid services selected.",
    Rejection.conflict: "This time overlaps with an existing booking. Please choose another time.",
}


@dataclass(frozen=True)
class BookedSlot:
    """Minimal view of an existing booking; the Booking table model fits it too."""
    id: str
    date: str
    time: str
    total_duration: int


@dataclass
class BookingCandidate:
    name: Optional[str]
    email: Optional[str]
    date: Optional[str]
    time: Optional[str]
    services: Optional[list]  # as received; anything but a non-empty list is missing
    staff_id: Optional[str] = None


@dataclass
class BookingContext:
    existing: Iterable = ()
    durations: Dict[str, int] = field(default_factory=dict)
    staff: Dict[str, str] = field(default_factory=dict)  # id -> name
    opening_hour: int = 10
    closing_hour: int = 18
    slot_minutes: int = 30
    exclude_id: Optional[str] = None


@dataclass(frozen=True)
class Accepted:
    total_duration: int
    staff_name: Optional[str] = None


@dataclass(frozen=True)
class Rejected:
    reason: Rejection
    message: str


Decision = Union[Accepted, Rejected]


def time_to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    h, m = int(hours), int(minutes)
    if h < 0 or not (0 <= m < 60):
        raise ValueError(f"invalid time of day: {value!r}")
    return h * 60 + m


def minutes_to_time(total_minutes: int) -> str:
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def overlaps(start_a, end_a, start_b, end_b) -> bool:
    # half-open: touching endpoints are not an overlap
    return start_a < end_b and start_b < end_a


def compute_total_duration(service_ids: Iterable[str], durations: Dict[str, int]) -> int:
    # unknown ids, and anything that is not an id at all, contribute nothing
    return sum(
        durations.get(service_id, 0) if isinstance(service_id, str) else 0
        for service_id in service_ids
    )


def validate_time_window(
    time: str,
    opening_hour: int,
    closing_hour: int,
    slot_minutes: int,
) -> Optional[Rejection]:
    """Return None when `time` is a valid start, otherwise the reason it is not."""
    try:
        start = time_to_minutes(time)
    except ValueError:
        # nothing to align to the grid
        return Rejection.not_on_grid

    open_minutes = opening_hour * 60
    close_minutes = closing_hour * 60
    if start < open_minutes or start >= close_minutes:
        return Rejection.out_of_hours
    if (start - open_minutes) % slot_minutes != 0:
        return Rejection.not_on_grid
    return None


def check_staff_exists(staff_id: Optional[str], staff: Dict[str, str]) -> Optional[Rejection]:
    if not staff_id:
        return None
    if staff_id not in staff:
        return Rejection.unknown_staff
    return None


def detect_conflict(
    date: str,
    start: int,
    duration: int,
    existing: Iterable,
    exclude_id: Optional[str] = None,
) -> bool:
    end = start + duration
    for booking in existing:
        if booking.date != date:
            continue
        if exclude_id is not None and booking.id == exclude_id:
            continue
        existing_start = time_to_minutes(booking.time)
        existing_end = existing_start + booking.total_duration
        if overlaps(start, end, existing_start, existing_end):
            return True
    return False


def reject(reason: Rejection, context: BookingContext) -> Rejected:
    message = MESSAGES[reason].format(slot_minutes=context.slot_minutes)
    return Rejected(reason=reason, message=message)


def validate(candidate: BookingCandidate, context: BookingContext) -> Decision:
    # 1) Required fields, at least one service
    c = candidate
    if not (c.name and c.email and c.date and c.time):
        return reject(Rejection.missing_fields, context)
    if not isinstance(c.services, list) or not c.services:
        return reject(Rejection.missing_fields, context)

    # 2) Optional preferred staff must exist
    failure = check_staff_exists(c.staff_id, context.staff)
    if failure is not None:
        return reject(failure, context)
    staff_name = context.staff[c.staff_id] if c.staff_id else None

    # 3) + 4) Inside opening hours and on the slot grid
    failure = validate_time_window(
        c.time, context.opening_hour, context.closing_hour, context.slot_minutes
    )
    if failure is not None:
        return reject(failure, context)

    # 5) Duration from the service table
    total_duration = compute_total_duration(c.services, context.durations)
    if total_duration <= 0:
        return reject(Rejection.invalid_services, context)

    # 6) No overlap with other bookings that day
    start = time_to_minutes(c.time)
    if detect_conflict(c.date, start, total_duration, context.existing, context.exclude_id):
        return reject(Rejection.conflict, context)

    return Accepted(total_duration=total_duration, staff_name=staff_name)


def available_starts(date: str, service_ids: List[str], context: BookingContext) -> List[str]:
    """Grid starts on `date` where a booking of these services would be accepted."""
    duration = compute_total_duration(service_ids, context.durations)
    if duration <= 0:
        return []

    open_minutes = context.opening_hour * 60
    close_minutes = context.closing_hour * 60
    existing = [b for b in context.existing if b.date == date]

    available = []
    current = open_minutes
    while current < close_minutes:
        if not detect_conflict(date, current, duration, existing, context.exclude_id):
            available.append(minutes_to_time(current))
        current += context.slot_minutes
    return available
