def test_seed_staff_and_shifts(client):
    staff = client.get("/api/staff").json()
    shifts = client.get("/api/shifts").json()

    assert {"id": "s1", "name": "Alice", "role": "Stylist"} in staff
    assert {"id": "s2", "name": "Bella", "role": "Colorist"} in staff
    assert shifts == [
        {"id": "sh1", "staffId": "s1", "date": "2025-11-20", "startTime": "10:00", "endTime": "14:00"}
    ]


def test_create_update_staff(client):
    response = client.post("/api/staff", json={"name": "Cara"})

    assert response.status_code == 201
    member = response.json()
    assert member["name"] == "Cara"
    assert member["role"] == ""

    response = client.put(f"/api/staff/{member['id']}", json={"name": "Cara", "role": "Barber"})
    assert response.status_code == 200
    assert response.json()["role"] == "Barber"


def test_staff_name_required(client):
    assert client.post("/api/staff", json={"role": "Stylist"}).json() == {"error": "Name is required."}
    assert client.put("/api/staff/s1", json={"name": ""}).status_code == 400


def test_unknown_staff_is_404(client):
    assert client.put("/api/staff/nobody", json={"name": "X"}).status_code == 404
    response = client.delete("/api/staff/nobody")
    assert response.status_code == 404
    assert response.json() == {"error": "Staff not found."}


def test_delete_staff_cascades(client):
    booking = client.post(
        "/api/bookings",
        json={
            "name": "Jane",
            "email": "jane@example.com",
            "date": "2025-11-20",
            "time": "10:00",
            "services": ["haircut"],
            "staffId": "s1",
        },
    ).json()
    client.post("/api/shifts", json={"staffId": "s2", "date": "2025-11-20", "startTime": "12:00", "endTime": "18:00"})

    response = client.delete("/api/staff/s1")

    assert response.status_code == 200
    assert response.json()["id"] == "s1"
    assert [m["id"] for m in client.get("/api/staff").json()] == ["s2"]
    assert [s["staffId"] for s in client.get("/api/shifts").json()] == ["s2"]

    bookings = client.get("/api/bookings").json()
    assert len(bookings) == 1
    assert bookings[0]["id"] == booking["id"]
    assert bookings[0]["staffId"] is None
    assert bookings[0]["staffName"] is None
    assert bookings[0]["totalDuration"] == 60


def test_deleted_staff_can_no_longer_be_selected(client):
    client.delete("/api/staff/s2")

    response = client.post(
        "/api/bookings",
        json={
            "name": "Jane",
            "email": "jane@example.com",
            "date": "2025-11-20",
            "time": "10:00",
            "services": ["haircut"],
            "staffId": "s2",
        },
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Selected staff member does not exist."}


def test_create_shift(client):
    response = client.post(
        "/api/shifts", json={"staffId": "s2", "date": "2025-11-21", "startTime": "10:00", "endTime": "16:00"}
    )

    assert response.status_code == 201
    shift = response.json()
    assert shift["staffId"] == "s2"
    assert shift["endTime"] == "16:00"


def test_shift_validation(client):
    base = {"staffId": "s1", "date": "2025-11-21", "startTime": "10:00", "endTime": "16:00"}
    cases = [
        ({"date": ""}, "All fields are required."),
        ({"staffId": None}, "All fields are required."),
        ({"staffId": "nobody"}, "Staff member not found."),
        ({"endTime": "10:00"}, "Shift end time must be after start time."),
        ({"endTime": "09:00"}, "Shift end time must be after start time."),
        ({"startTime": "ten"}, "Shift times must be HH:MM."),
    ]
    for overrides, message in cases:
        response = client.post("/api/shifts", json=dict(base, **overrides))
        assert response.status_code == 400, overrides
        assert response.json() == {"error": message}


def test_update_and_delete_shift(client):
    response = client.put(
        "/api/shifts/sh1", json={"staffId": "s2", "date": "2025-11-20", "startTime": "11:00", "endTime": "15:00"}
    )
    assert response.status_code == 200
    assert response.json()["staffId"] == "s2"

    response = client.put(
        "/api/shifts/sh1", json={"staffId": "s2", "date": "2025-11-20", "startTime": "15:00", "endTime": "11:00"}
    )
    assert response.status_code == 400

    assert client.delete("/api/shifts/sh1").status_code == 200
    assert client.get("/api/shifts").json() == []
    assert client.delete("/api/shifts/sh1").status_code == 404
    assert client.put("/api/shifts/sh1", json={}).status_code == 404


def test_booking_outside_any_shift_is_accepted(client):
    # shifts are informational only
    response = client.post(
        "/api/bookings",
        json={
            "name": "Jane",
            "email": "jane@example.com",
            "date": "2025-11-20",
            "time": "16:00",
            "services": ["haircut"],
            "staffId": "s1",
        },
    )

    assert response.status_code == 201
