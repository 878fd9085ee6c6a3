import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from salon.notifications import RESEND_URL, BookingNotifier, render_confirmation


BOOKING = {
    "id": "b1",
    "name": "Jane <3",
    "email": "jane@example.com",
    "date": "2025-11-20",
    "time": "10:00",
    "services": ["haircut", "blow-dry", "perm"],
    "staff_id": "s1",
    "staff_name": "Alice",
    "total_duration": 90,
}


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise RuntimeError(f"HTTP {self.status}")

    def json(self):
        return self.payload


class FakeHttp:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({"id": "email-1"})
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def executor():
    executor = ThreadPoolExecutor(max_workers=1)
    yield executor
    executor.shutdown(wait=True)


def test_render_confirmation():
    subject, body = render_confirmation(BOOKING, salon_name="Li Hair Salon")

    assert subject == "Your booking at Li Hair Salon on 2025-11-20 at 10:00"
    assert "Hi Jane &lt;3," in body
    assert "Haircut, Blow Dry, perm" in body
    assert "90 minutes" in body
    assert "Preferred staff:</strong> Alice" in body


def test_render_confirmation_without_staff():
    _, body = render_confirmation(dict(BOOKING, staff_id=None, staff_name=None))

    assert "Preferred staff" not in body


def test_unconfigured_notifier_skips(executor):
    http = FakeHttp()
    notifier = BookingNotifier(api_key="", from_email="salon@example.com", executor=executor, http=http)

    assert not notifier.enabled
    assert notifier.submit(BOOKING) is None
    assert http.calls == []


def test_submit_sends_to_customer_and_admin(executor):
    http = FakeHttp()
    notifier = BookingNotifier(
        api_key="key",
        from_email="salon@example.com",
        admin_email="owner@example.com",
        timeout=5,
        executor=executor,
        http=http,
    )

    future = notifier.submit(BOOKING)

    assert future.result(timeout=5) == "email-1"
    url, kwargs = http.calls[0]
    assert url == RESEND_URL
    assert kwargs["json"]["to"] == ["jane@example.com", "owner@example.com"]
    assert kwargs["json"]["from"] == "salon@example.com"
    assert kwargs["headers"] == {"Authorization": "Bearer key"}
    assert kwargs["timeout"] == 5


def test_send_failure_is_logged_not_raised(executor, caplog):
    http = FakeHttp(error=ConnectionError("down"))
    notifier = BookingNotifier(api_key="key", from_email="salon@example.com", executor=executor, http=http)

    with caplog.at_level(logging.ERROR, logger="salon.notifications"):
        future = notifier.submit(BOOKING)
        executor.shutdown(wait=True)

    assert isinstance(future.exception(), ConnectionError)
    assert "Error sending booking email for b1" in caplog.text


def test_provider_error_status_is_a_failure(executor):
    http = FakeHttp(response=FakeResponse({"message": "bad"}, status=422))
    notifier = BookingNotifier(api_key="key", from_email="salon@example.com", executor=executor, http=http)

    future = notifier.submit(BOOKING)

    assert isinstance(future.exception(timeout=5), RuntimeError)


def test_submit_after_shutdown_is_logged_not_raised(executor, caplog):
    http = FakeHttp()
    notifier = BookingNotifier(api_key="key", from_email="salon@example.com", executor=executor, http=http)
    notifier.shutdown()

    with caplog.at_level(logging.ERROR, logger="salon.notifications"):
        assert notifier.submit(BOOKING) is None

    assert "Could not queue confirmation for booking b1" in caplog.text
    assert http.calls == []


def test_render_confirmation_skips_non_string_services():
    _, body = render_confirmation(dict(BOOKING, services=["haircut", None]))

    assert "<strong>Services:</strong> Haircut<br/>" in body
