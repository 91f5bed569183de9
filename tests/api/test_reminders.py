import pytest
from fastapi.testclient import TestClient

from apps.api.main import app
from apps.api.routes import reminders as reminders_module
from packages.core.reminders.collection import ReminderCollection


@pytest.fixture
def client(monkeypatch):
    collection = ReminderCollection()
    monkeypatch.setattr(reminders_module, "_collection", lambda: collection)
    return TestClient(app)


def _seed(client):
    for description, tag in [
        ("buy milk", "shopping"),
        ("buy shoes", "errand"),
        ("write report", "Work"),
        ("plan sprint", "work"),
    ]:
        resp = client.post("/reminders", json={"description": description, "tag": tag})
        assert resp.status_code == 200


def test_reminders_crud(client):
    create_resp = client.post("/reminders", json={"description": "Pay rent", "tag": "bills"})
    assert create_resp.status_code == 200
    reminder = create_resp.json()
    assert reminder == {
        "position": 1,
        "description": "Pay rent",
        "tag": "bills",
        "is_completed": False,
    }

    list_resp = client.get("/reminders")
    assert list_resp.status_code == 200
    assert len(list_resp.json()) == 1

    get_resp = client.get("/reminders/1")
    assert get_resp.status_code == 200
    assert get_resp.json()["description"] == "Pay rent"

    update_resp = client.patch("/reminders/1", json={"description": "Pay rent early"})
    assert update_resp.status_code == 200
    assert update_resp.json()["description"] == "Pay rent early"

    toggle_resp = client.post("/reminders/1/toggle")
    assert toggle_resp.status_code == 200
    assert toggle_resp.json()["is_completed"] is True


def test_invalid_positions_return_404(client):
    assert client.get("/reminders/1").status_code == 404
    client.post("/reminders", json={"description": "Pay rent", "tag": "bills"})
    assert client.get("/reminders/0").status_code == 404
    assert client.get("/reminders/2").status_code == 404
    assert client.patch("/reminders/2", json={"description": "x"}).status_code == 404
    assert client.post("/reminders/5/toggle").status_code == 404


def test_empty_fields_rejected(client):
    resp = client.post("/reminders", json={"description": "", "tag": "bills"})
    assert resp.status_code == 422
    client.post("/reminders", json={"description": "Pay rent", "tag": "bills"})
    resp = client.patch("/reminders/1", json={"description": ""})
    assert resp.status_code == 422


def test_search_prefers_tags(client):
    _seed(client)

    resp = client.get("/reminders/search", params={"keyword": "Shopping"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["stage"] == "tag"
    assert [r["description"] for r in body["results"]] == ["buy milk"]

    resp = client.get("/reminders/search", params={"keyword": "buy"})
    body = resp.json()
    assert body["stage"] == "description"
    assert [r["position"] for r in body["results"]] == [1, 2]

    resp = client.get("/reminders/search", params={"keyword": "zzz"})
    assert resp.json() == {"keyword": "zzz", "stage": "none", "results": []}


def test_groups_keep_tag_case(client):
    _seed(client)
    resp = client.get("/reminders/groups")
    assert resp.status_code == 200
    groups = resp.json()["groups"]
    assert list(groups) == ["shopping", "errand", "Work", "work"]
    assert groups["work"][0]["position"] == 4
