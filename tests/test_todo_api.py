import uuid


def create(client, headers, **body):
    body.setdefault("title", "Buy milk")
    res = client.post("/api/todos", json=body, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()["data"]


def test_create_and_get(client, alice):
    todo = create(client, alice, title="  Write report  ", content="Q3", startDate="2024-05-01", dueDate="2024-05-03")
    assert todo["title"] == "Write report"
    assert todo["status"] == "active"
    assert todo["isCompleted"] is False
    assert todo["startDate"] == "2024-05-01"
    assert todo["deletedAt"] is None

    res = client.get(f"/api/todos/{todo['todoId']}", headers=alice)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["todoId"] == todo["todoId"]


def test_create_validation(client, alice):
    res = client.post("/api/todos", json={"title": ""}, headers=alice)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "title"

    res = client.post("/api/todos", json={"title": "x" * 201}, headers=alice)
    assert res.status_code == 400

    res = client.post("/api/todos", json={"title": "Trip", "startDate": "2024-05-10", "dueDate": "2024-05-01"}, headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_DATE_RANGE"


def test_ownership(client, alice, bob):
    todo = create(client, alice)

    res = client.get(f"/api/todos/{todo['todoId']}", headers=bob)
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"

    res = client.get(f"/api/todos/{uuid.uuid4()}", headers=bob)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "TODO_NOT_FOUND"

    res = client.get("/api/todos", headers=bob)
    assert res.json()["data"] == []


def test_malformed_id_is_a_validation_error(client, alice):
    res = client.get("/api/todos/not-a-uuid", headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update(client, alice):
    todo = create(client, alice, content="old", dueDate="2024-06-01")
    url = f"/api/todos/{todo['todoId']}"

    res = client.put(url, json={"title": "New title", "content": None}, headers=alice)
    assert res.status_code == 200, res.text
    data = res.json()["data"]
    assert data["title"] == "New title"
    assert data["content"] is None
    assert data["dueDate"] == "2024-06-01"

    res = client.put(url, json={}, headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "No fields to update"

    res = client.put(url, json={"title": None}, headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = client.put(url, json={"startDate": "2024-07-01"}, headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_DATE_RANGE"


def test_complete_delete_restore(client, alice):
    todo = create(client, alice)
    url = f"/api/todos/{todo['todoId']}"

    res = client.patch(f"{url}/restore", headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "TODO_NOT_DELETED"

    res = client.delete(url, headers=alice)
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Todo moved to trash"
    assert body["data"]["status"] == "deleted"
    assert body["data"]["deletedAt"]

    res = client.patch(f"{url}/complete", headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "TODO_IS_DELETED"

    res = client.patch(f"{url}/restore", headers=alice)
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "active"
    assert res.json()["data"]["deletedAt"] is None

    res = client.patch(f"{url}/complete", headers=alice)
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "completed"
    assert res.json()["data"]["isCompleted"] is True


def test_list_filters_and_sorting(client, alice):
    late = create(client, alice, title="late", dueDate="2024-09-01")
    early = create(client, alice, title="early milk", dueDate="2024-01-01")
    undated = create(client, alice, title="undated")
    client.patch(f"/api/todos/{late['todoId']}/complete", headers=alice)
    client.delete(f"/api/todos/{undated['todoId']}", headers=alice)

    res = client.get("/api/todos", params={"sortBy": "dueDate", "order": "asc"}, headers=alice)
    assert [t["todoId"] for t in res.json()["data"]] == [early["todoId"], late["todoId"]]

    res = client.get("/api/todos", params={"status": "completed"}, headers=alice)
    assert [t["todoId"] for t in res.json()["data"]] == [late["todoId"]]

    res = client.get("/api/todos", params={"status": "deleted"}, headers=alice)
    assert [t["todoId"] for t in res.json()["data"]] == [undated["todoId"]]

    res = client.get("/api/todos", params={"search": "MILK"}, headers=alice)
    assert [t["todoId"] for t in res.json()["data"]] == [early["todoId"]]

    res = client.get("/api/todos", params={"status": "archived"}, headers=alice)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
