from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from lifelog.tests.conftest import bearer, register

CASES = [
    ("/journal", {"content": "first entry"}, {"content": "edited entry"}),
    (
        "/ideas",
        {"title": "Garden", "content": "Grow tomatoes"},
        {"title": "Garden", "content": "Grow basil", "category": "home"},
    ),
    (
        "/notes",
        {"title": "Book", "content": "Meditations", "tags": "stoic,reading"},
        {"title": "Book", "content": "Letters from a Stoic"},
    ),
    (
        "/reminders",
        {"title": "Call mom", "reminder_date": "2026-10-20T09:00:00+00:00"},
        {"title": "Call mom", "reminder_date": "2026-10-20T09:00:00+00:00", "completed": True},
    ),
    (
        "/events",
        {
            "title": "Standup",
            "start_time": "2026-10-20T09:00:00+00:00",
            "end_time": "2026-10-20T09:15:00+00:00",
        },
        {"title": "Standup", "start_time": "2026-10-20T10:00:00+00:00", "event_type": "call"},
    ),
    (
        "/mood-entries",
        {"mood": "calm", "energy_level": 7},
        {"mood": "happy", "energy_level": 9, "notes": "good run"},
    ),
    (
        "/poetry",
        {"title": "Dawn", "content": "Grey light on the river"},
        {"title": "Aube", "content": "Lumière grise", "language": "fr"},
    ),
    (
        "/poetry-ideas",
        {"idea": "A poem about tides"},
        {"idea": "A poem about tides", "inspiration": "Walk on the pier"},
    ),
    (
        "/workouts",
        {"name": "Leg day", "target_date": "2026-10-20", "target_time": "07:30:00"},
        {
            "name": "Leg day",
            "target_date": "2026-10-20",
            "recurring_type": "custom",
            "recurring_days": "monday,friday",
            "completed": True,
            "completion_date": "2026-10-20T08:15:00+00:00",
            "duration": 45,
            "calories_burned": 400,
        },
    ),
    (
        "/meals",
        {"meal_name": "Oatmeal", "calories": 350},
        {"meal_name": "Oatmeal", "calories": 380, "meal_time": "2026-10-20T07:00:00+00:00"},
    ),
    (
        "/goals",
        {"goal_date": "2026-10-20", "calorie_goal": 2000},
        {"goal_date": "2026-10-21", "water_goal": 10, "exercise_goal": "5k run"},
    ),
]


@pytest.fixture()
def token(client: FlaskClient) -> str:
    return register(client, "alice", "alice@example.com", "pw1").get_json()["token"]


@pytest.mark.parametrize(("route", "created", "updated"), CASES)
def test_crud_cycle(
    client: FlaskClient, token: str, route: str, created: dict, updated: dict
) -> None:
    headers = bearer(token)

    response = client.post(route, json=created, headers=headers)
    assert response.status_code == 201
    record = response.get_json()
    assert isinstance(record["id"], int)
    assert "user_id" not in record
    assert record["created_at"]
    for key, value in created.items():
        assert record[key] == value

    listed = client.get(route, headers=headers).get_json()
    assert [item["id"] for item in listed] == [record["id"]]

    fetched = client.get(f"{route}/{record['id']}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.get_json()["id"] == record["id"]

    response = client.put(f"{route}/{record['id']}", json=updated, headers=headers)
    assert response.status_code == 200
    for key, value in updated.items():
        assert response.get_json()[key] == value

    response = client.delete(f"{route}/{record['id']}", headers=headers)
    assert response.status_code == 200
    assert response.get_json() == {"message": "Deleted"}

    assert client.get(f"{route}/{record['id']}", headers=headers).status_code == 404
    assert client.get(route, headers=headers).get_json() == []


@pytest.mark.parametrize("route", [case[0] for case in CASES])
def test_every_route_is_guarded(client: FlaskClient, route: str) -> None:
    assert client.get(route).status_code == 401
    assert client.post(route, json={}).status_code == 401
    assert client.put(f"{route}/1", json={}).status_code == 401
    assert client.delete(f"{route}/1").status_code == 401


def test_list_is_newest_first(client: FlaskClient, token: str) -> None:
    headers = bearer(token)
    for content in ("one", "two", "three"):
        client.post("/journal", json={"content": content}, headers=headers)

    listed = client.get("/journal", headers=headers).get_json()

    assert [entry["content"] for entry in listed] == ["three", "two", "one"]


def test_owner_in_body_is_ignored(client: FlaskClient, token: str) -> None:
    other = register(client, "bob", "bob@example.com", "pw2").get_json()
    headers = bearer(token)

    created = client.post(
        "/ideas",
        json={"title": "Mine", "content": "x", "user_id": other["user"]["id"]},
        headers=headers,
    )
    assert created.status_code == 201

    assert client.get("/ideas", headers=bearer(other["token"])).get_json() == []
    assert len(client.get("/ideas", headers=headers).get_json()) == 1


@pytest.mark.parametrize(
    ("route", "payload"),
    [
        ("/journal", {}),
        ("/journal", {"content": ""}),
        ("/ideas", {"title": "no content"}),
        ("/reminders", {"title": "when?", "reminder_date": "not a date"}),
        (
            "/events",
            {
                "title": "backwards",
                "start_time": "2026-10-20T10:00:00",
                "end_time": "2026-10-20T09:00:00",
            },
        ),
        ("/mood-entries", {"mood": "calm", "energy_level": 11}),
        ("/poetry-ideas", {"inspiration": "no idea"}),
        ("/workouts", {"name": "Run", "target_date": "2026-10-20", "recurring_type": "yearly"}),
        ("/meals", {"meal_name": "Toast", "calories": -5}),
        ("/goals", {"calorie_goal": 1800}),
    ],
)
def test_invalid_payloads_rejected(
    client: FlaskClient, token: str, route: str, payload: dict
) -> None:
    response = client.post(route, json=payload, headers=bearer(token))

    assert response.status_code == 400
    body = response.get_json()
    assert "error" in body


def test_unknown_record_is_404(client: FlaskClient, token: str) -> None:
    response = client.get("/notes/9999", headers=bearer(token))

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_offset_timestamps_are_stored_as_utc(client: FlaskClient, token: str) -> None:
    headers = bearer(token)

    created = client.post(
        "/reminders",
        json={"title": "Flight", "reminder_date": "2026-01-01T10:00:00+02:00"},
        headers=headers,
    ).get_json()
    fetched = client.get(f"/reminders/{created['id']}", headers=headers).get_json()

    assert created["reminder_date"] == "2026-01-01T08:00:00+00:00"
    assert fetched["reminder_date"] == "2026-01-01T08:00:00+00:00"
    assert fetched["created_at"].endswith("+00:00")
    assert fetched["created_at"] == created["created_at"]


def test_naive_timestamps_are_read_as_utc(client: FlaskClient, token: str) -> None:
    headers = bearer(token)

    created = client.post(
        "/events",
        json={"title": "Call", "start_time": "2026-01-01T10:00:00"},
        headers=headers,
    ).get_json()
    listed = client.get("/events", headers=headers).get_json()

    assert created["start_time"] == "2026-01-01T10:00:00+00:00"
    assert listed[0]["start_time"] == "2026-01-01T10:00:00+00:00"


def test_meal_time_defaults_to_now(client: FlaskClient, token: str) -> None:
    created = client.post(
        "/meals", json={"meal_name": "Soup"}, headers=bearer(token)
    ).get_json()

    assert created["meal_time"].endswith("+00:00")


def test_one_goal_per_day(client: FlaskClient, token: str) -> None:
    headers = bearer(token)
    first = client.post("/goals", json={"goal_date": "2026-10-20"}, headers=headers)
    other_day = client.post("/goals", json={"goal_date": "2026-10-21"}, headers=headers)

    duplicate = client.post("/goals", json={"goal_date": "2026-10-20"}, headers=headers)
    moved = client.put(
        f"/goals/{other_day.get_json()['id']}", json={"goal_date": "2026-10-20"}, headers=headers
    )

    assert first.status_code == other_day.status_code == 201
    assert duplicate.status_code == 409
    assert duplicate.get_json() == {"error": "Record already exists"}
    assert moved.status_code == 409
    assert [goal["goal_date"] for goal in client.get("/goals", headers=headers).get_json()] == [
        "2026-10-21",
        "2026-10-20",
    ]


def test_goal_dates_are_per_account(client: FlaskClient, token: str) -> None:
    other = register(client, "bob", "bob@example.com", "pw2").get_json()["token"]

    mine = client.post("/goals", json={"goal_date": "2026-10-20"}, headers=bearer(token))
    theirs = client.post("/goals", json={"goal_date": "2026-10-20"}, headers=bearer(other))

    assert mine.status_code == theirs.status_code == 201
