# salon/notifications.py
"""
Booking confirmation emails.

Sends go through the Resend HTTP API on a small thread pool. submit()
returns as soon as the send is queued; whatever happens afterwards is
only logged and never reaches the booking response.
"""

import html
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, List, Optional

import requests

from .data import SERVICES, email_settings, shop_settings

logger = logging.getLogger(__name__)

RESEND_URL = "https://api.resend.com/emails"


def render_confirmation(booking: dict, salon_name: str = shop_settings["salon_name"]):
    """Return (subject, html) for a saved booking."""
    names = {s["id"]: s["name"] for s in SERVICES}
    services_list = ", ".join(
        names.get(service_id, service_id)
        for service_id in booking["services"]
        if isinstance(service_id, str)
    )

    def esc(value) -> str:
        return html.escape(str(value))

    subject = f"Your booking at {salon_name} on {booking['date']} at {booking['time']}"
    staff_line = ""
    if booking.get("staff_id"):
        staff_line = f"<p><strong>Preferred staff:</strong> {esc(booking.get('staff_name') or '')}</p>"

    body = (
        "<div>"
        "<h2>Booking confirmed</h2>"
        f"<p>Hi {esc(booking['name'])},</p>"
        f"<p>Thank you for booking with <strong>{esc(salon_name)}</strong>.</p>"
        "<p>"
        f"<strong>Date:</strong> {esc(booking['date'])}<br/>"
        f"<strong>Time:</strong> {esc(booking['time'])}<br/>"
        f"<strong>Services:</strong> {esc(services_list)}<br/>"
        f"<strong>Total duration:</strong> {booking['total_duration']} minutes"
        "</p>"
        f"{staff_line}"
        "<p>If you need to make any changes, please contact the salon.</p>"
        "<p>See you soon!</p>"
        "</div>"
    )
    return subject, body


class BookingNotifier:
    def __init__(
        self,
        api_key: str = "",
        from_email: str = "",
        admin_email: str = "",
        timeout: float = 10.0,
        executor: Optional[ThreadPoolExecutor] = None,
        http=None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.admin_email = admin_email
        self.timeout = timeout
        self.executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="salon-email")
        self.http = http or requests.Session()

    @classmethod
    def from_settings(cls, settings: Dict = email_settings) -> "BookingNotifier":
        return cls(
            api_key=settings["api_key"],
            from_email=settings["from_email"],
            admin_email=settings["admin_email"],
            timeout=settings["timeout_seconds"],
        )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key and self.from_email)

    def recipients(self, booking: dict) -> List[str]:
        to = [booking["email"]]
        if self.admin_email:
            to.append(self.admin_email)
        return to

    def submit(self, booking: dict) -> Optional[Future]:
        """Queue a confirmation for `booking` (a plain dict) and return immediately."""
        if not self.enabled:
            logger.info("Email not configured; skipping confirmation for booking %s", booking["id"])
            return None

        try:
            future = self.executor.submit(self.send_confirmation, dict(booking))
        except RuntimeError:
            # pool already shut down; the booking stands without its email
            logger.exception("Could not queue confirmation for booking %s", booking["id"])
            return None
        future.add_done_callback(lambda f: self._log_result(booking, f))
        return future

    def send_confirmation(self, booking: dict) -> Optional[str]:
        subject, body = render_confirmation(booking)
        response = self.http.post(
            RESEND_URL,
            json={
                "from": self.from_email,
                "to": self.recipients(booking),
                "subject": subject,
                "html": body,
            },
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json().get("id")

    def _log_result(self, booking: dict, future: Future):
        error = future.exception()
        if error is not None:
            logger.error("Error sending booking email for %s: %s", booking["id"], error)
            return
        logger.info("Resend queued email %s to %s", future.result(), booking["email"])

    def shutdown(self):
        self.executor.shutdown(wait=False)


_notifier: Optional[BookingNotifier] = None


# Dependency: one notifier (and thread pool) per process
def get_notifier() -> BookingNotifier:
    global _notifier
    if _notifier is None:
        _notifier = BookingNotifier.from_settings()
    return _notifier
