import uuid


def add(client, headers, **body):
    return client.post("/api/holidays", json=body, headers=headers)


def test_admin_creates_and_everyone_lists(client, admin, alice):
    res = add(client, admin, title="New Year", date="2025-01-01")
    assert res.status_code == 201, res.text
    holiday = res.json()["data"]
    assert holiday["isRecurring"] is True
    assert holiday["description"] is None

    add(client, admin, title="Founding Day", date="2025-03-01", description="Office closed", isRecurring=False)
    add(client, admin, title="Old Year", date="2024-12-31")

    res = client.get("/api/holidays", headers=alice)
    assert [h["date"] for h in res.json()["data"]] == ["2024-12-31", "2025-01-01", "2025-03-01"]

    res = client.get("/api/holidays", params={"year": 2025, "month": 3}, headers=alice)
    assert [h["title"] for h in res.json()["data"]] == ["Founding Day"]

    res = client.get("/api/holidays", params={"month": 13}, headers=alice)
    assert res.status_code == 400


def test_non_admin_is_forbidden(client, alice):
    res = add(client, alice, title="Nope", date="2025-01-01")
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"

    # the role check runs before the body is validated
    res = add(client, alice)
    assert res.status_code == 403

    res = client.put(f"/api/holidays/{uuid.uuid4()}", json={"title": "x"}, headers=alice)
    assert res.status_code == 403


def test_create_validation(client, admin):
    res = add(client, admin, title="No date")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = add(client, admin, title="Bad date", date="2025-02-30")
    assert res.status_code == 400


def test_update(client, admin):
    holiday = add(client, admin, title="Labour Day", date="2025-05-01", description="Parade").json()["data"]
    url = f"/api/holidays/{holiday['holidayId']}"

    res = client.put(url, json={"date": "2025-05-02", "isRecurring": False, "description": None}, headers=admin)
    assert res.status_code == 200, res.text
    data = res.json()["data"]
    assert data["title"] == "Labour Day"
    assert data["date"] == "2025-05-02"
    assert data["isRecurring"] is False
    assert data["description"] is None

    res = client.put(url, json={}, headers=admin)
    assert res.status_code == 400

    res = client.put(url, json={"title": None}, headers=admin)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = client.put(f"/api/holidays/{uuid.uuid4()}", json={"title": "x"}, headers=admin)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "HOLIDAY_NOT_FOUND"
