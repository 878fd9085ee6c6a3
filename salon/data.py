# salon/data.py

import os

SERVICES = [
    {"id": "haircut", "name": "Haircut", "duration": 60},
    {"id": "hair-colour", "name": "Hair Colour", "duration": 120},
    {"id": "blow-dry", "name": "Blow Dry", "duration": 30},
]

# id -> minutes, what the booking engine looks durations up in
SERVICE_DURATIONS = {s["id"]: s["duration"] for s in SERVICES}

shop_settings = {
    "salon_name": "Li Hair Salon",
    "opening_hour": 10,   # 10:00
    "closing_hour": 18,   # 18:00, last start must be before this
    "slot_minutes": 30,
}

# Loaded into an empty database on start-up
SEED_STAFF = [
    {"id": "s1", "name": "Alice", "role": "Stylist"},
    {"id": "s2", "name": "Bella", "role": "Colorist"},
]

SEED_SHIFTS = [
    {"id": "sh1", "staff_id": "s1", "date": "2025-11-20", "start_time": "10:00", "end_time": "14:00"},
]

email_settings = {
    "api_key": os.getenv("RESEND_API_KEY", ""),
    "from_email": os.getenv("RESEND_FROM", ""),
    "admin_email": os.getenv("SALON_TO_EMAIL", ""),
    "timeout_seconds": float(os.getenv("SALON_EMAIL_TIMEOUT", "10")),
}
