"""
End-to-end endpoint tests through the FastAPI TestClient.

Routes run against a per-test in-memory SQLite database (see ``db_client``).

User meal-tracking flow
=======================

1. CREATE USER
   POST /users/create {"name": "John Doe", "email": "johndoe@example.com"}
   Response: 201 Created

2. CREATE MEAL
   POST /users/{user_id}/meals/create
   {"name": "Bolo de cenoura", "description": "...", "in_diet": true,
    "day": "2021-10-10", "hour": "12:00"}
   Response: 201 Created, "when": "2021-10-10T12:00:00"

3. UPDATE MEAL
   PUT /users/{user_id}/meals/{meal_id}/update
   {"day": "2021-10-11", "hour": "13:00", "in_diet": false}
   Response: 200 OK, "when": "2021-10-11T13:00:00"

4. DELETE MEAL
   DELETE /users/{user_id}/meals/{meal_id}/delete
   Response: 200 OK

5. METRICS
   GET /users/{user_id}/metrics
   Response: 200 OK
   {"totalMeals": 3, "inDietMeals": 2, "notInDietMeals": 1, "daysInSequence": 1}
"""

import uuid
import pytest
from datetime import datetime

from app.config import settings, StreakOrdering
from repositories import UserRepository

JOHN = {"name": "John Doe", "email": "johndoe@example.com"}

CARROT_CAKE = {
    "name": "Bolo de cenoura",
    "description": "Bolo de cenoura com cobertura de chocolate",
    "in_diet": True,
    "day": "2021-10-10",
    "hour": "12:00",
}

PINEAPPLE_CAKE = {
    "name": "Bolo de Abacaxi",
    "description": "Bolo de Abacaxi com cobertura de leite condensado",
    "in_diet": False,
    "day": "2021-10-11",
    "hour": "13:00",
}


def create_user(client, payload=JOHN) -> dict:
    r = client.post("/users/create", json=payload)
    assert r.status_code == 201
    return r.json()


def create_meal(client, user_id, payload=CARROT_CAKE) -> dict:
    r = client.post(f"/users/{user_id}/meals/create", json=payload)
    assert r.status_code == 201
    return r.json()


# =============================================================================
# USERS
# =============================================================================


def test_create_user(db_client):
    body = create_user(db_client)

    assert body["email"] == JOHN["email"]
    assert body["name"] == JOHN["name"]
    uuid.UUID(body["id"])


def test_create_user_existing_email(db_client):
    create_user(db_client)

    r = db_client.post("/users/create", json=JOHN)

    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"
    assert r.json()["error"]["message"] == "User already exists"


def test_duplicate_create_leaves_one_user(db_client, db_session):
    create_user(db_client)
    db_client.post("/users/create", json=JOHN)

    assert UserRepository(db_session).count(email=JOHN["email"]) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "John Doe", "email": "not-an-email"},
        {"name": "John Doe"},
        {"email": "johndoe@example.com"},
    ],
)
def test_create_user_invalid_body(db_client, payload):
    r = db_client.post("/users/create", json=payload)

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_user_by_email(db_client):
    created = create_user(db_client)

    r = db_client.get("/users", params={"email": JOHN["email"]})

    assert r.status_code == 200
    assert r.json()["id"] == created["id"]


def test_get_user_by_email_not_found(db_client):
    r = db_client.get("/users", params={"email": "ghost@example.com"})

    assert r.status_code == 404
    assert r.json()["error"]["message"] == "User not found"


def test_delete_user_cascades_meals(db_client):
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])

    r = db_client.delete(f"/users/{user['id']}/delete")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "deleted": user["id"]}

    assert db_client.get(f"/users/{user['id']}/meals").status_code == 404
    assert db_client.get(f"/users/{user['id']}/meals/{meal['id']}").status_code == 404
    assert db_client.get("/users", params={"email": JOHN["email"]}).status_code == 404


def test_delete_missing_user(db_client):
    assert db_client.delete(f"/users/{uuid.uuid4()}/delete").status_code == 404


# =============================================================================
# MEALS
# =============================================================================


def test_create_meal(db_client):
    user = create_user(db_client)

    meal = create_meal(db_client, user["id"])

    assert meal["user_id"] == user["id"]
    assert meal["in_diet"] is True
    assert meal["when"] == "2021-10-10T12:00:00"


def test_create_meal_defaults(db_client):
    user = create_user(db_client)
    before = datetime.utcnow()

    meal = create_meal(
        db_client,
        user["id"],
        {"name": "Sanduíche Natural", "description": "Sanduíche Natural de frango"},
    )

    after = datetime.utcnow()
    assert meal["in_diet"] is True
    assert before <= datetime.fromisoformat(meal["when"]) <= after


def test_create_meal_unknown_user(db_client):
    r = db_client.post(f"/users/{uuid.uuid4()}/meals/create", json=CARROT_CAKE)

    assert r.status_code == 404


def test_create_meal_bad_day(db_client):
    user = create_user(db_client)

    r = db_client.post(
        f"/users/{user['id']}/meals/create",
        json={**CARROT_CAKE, "day": "2021-10-32"},
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"
    assert r.json()["error"]["details"]["field"] == "day"


@pytest.mark.parametrize(
    "method,path_suffix",
    [("post", "create"), ("put", "1/update")],
)
def test_bad_day_rejected_before_user_lookup(db_client, method, path_suffix):
    r = getattr(db_client, method)(
        f"/users/{uuid.uuid4()}/meals/{path_suffix}",
        json={**CARROT_CAKE, "day": "2021-99-99", "hour": "12:00"},
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"
    assert r.json()["error"]["details"] == {"field": "day", "value": "2021-99-99"}


def test_create_meal_missing_fields(db_client):
    user = create_user(db_client)

    r = db_client.post(f"/users/{user['id']}/meals/create", json={"name": "Bolo"})

    assert r.status_code == 422


def test_update_meal(db_client):
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])

    r = db_client.put(
        f"/users/{user['id']}/meals/{meal['id']}/update", json=PINEAPPLE_CAKE
    )

    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Bolo de Abacaxi"
    assert body["in_diet"] is False
    assert body["when"] == "2021-10-11T13:00:00"


@pytest.mark.parametrize(
    "payload,expected_when",
    [
        ({"day": "2021-10-11"}, "2021-10-11T12:00:00"),
        ({"hour": "13:00"}, "2021-10-10T13:00:00"),
        ({"name": "Bolo de Abacaxi"}, "2021-10-10T12:00:00"),
    ],
)
def test_update_meal_partial_when(db_client, payload, expected_when):
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])

    r = db_client.put(f"/users/{user['id']}/meals/{meal['id']}/update", json=payload)

    assert r.status_code == 200
    assert r.json()["when"] == expected_when


def test_update_meal_unknown_user(db_client):
    r = db_client.put(f"/users/{uuid.uuid4()}/meals/1/update", json=PINEAPPLE_CAKE)

    assert r.status_code == 404
    assert r.json()["error"]["message"] == "User not found"


def test_update_unknown_meal(db_client):
    user = create_user(db_client)

    r = db_client.put(f"/users/{user['id']}/meals/1/update", json=PINEAPPLE_CAKE)

    assert r.status_code == 404
    assert r.json()["error"]["message"] == "Meal not found"


def test_delete_meal(db_client):
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])

    r = db_client.delete(f"/users/{user['id']}/meals/{meal['id']}/delete")

    assert r.status_code == 200
    assert r.json()["deleted"] == meal["id"]


def test_delete_meal_unknown_user(db_client):
    assert db_client.delete(f"/users/{uuid.uuid4()}/meals/1/delete").status_code == 404


def test_delete_unknown_meal(db_client):
    user = create_user(db_client)

    assert db_client.delete(f"/users/{user['id']}/meals/1/delete").status_code == 404


def test_list_meals(db_client):
    user = create_user(db_client)
    create_meal(db_client, user["id"], CARROT_CAKE)
    create_meal(db_client, user["id"], PINEAPPLE_CAKE)

    r = db_client.get(f"/users/{user['id']}/meals")

    assert r.status_code == 200
    assert [m["name"] for m in r.json()["meals"]] == ["Bolo de cenoura", "Bolo de Abacaxi"]


def test_list_meals_empty(db_client):
    user = create_user(db_client)

    r = db_client.get(f"/users/{user['id']}/meals")

    assert r.status_code == 200
    assert r.json() == {"meals": []}


def test_list_meals_unknown_user(db_client):
    assert db_client.get(f"/users/{uuid.uuid4()}/meals").status_code == 404


def test_get_meal(db_client):
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])

    r = db_client.get(f"/users/{user['id']}/meals/{meal['id']}")

    assert r.status_code == 200
    assert r.json() == meal


def test_get_meal_unknown_user(db_client):
    assert db_client.get(f"/users/{uuid.uuid4()}/meals/1").status_code == 404


def test_get_unknown_meal(db_client):
    user = create_user(db_client)

    assert db_client.get(f"/users/{user['id']}/meals/1").status_code == 404


def test_meal_flow_scenario(db_client):
    """Create, edit and delete a meal; the deleted meal is then gone."""
    user = create_user(db_client)
    meal = create_meal(db_client, user["id"])
    assert meal["when"] == "2021-10-10T12:00:00"

    r = db_client.put(
        f"/users/{user['id']}/meals/{meal['id']}/update",
        json={"day": "2021-10-11", "hour": "13:00", "in_diet": False},
    )
    assert r.status_code == 200
    assert r.json()["when"] == "2021-10-11T13:00:00"

    r = db_client.delete(f"/users/{user['id']}/meals/{meal['id']}/delete")
    assert r.status_code == 200

    r = db_client.get(f"/users/{user['id']}/meals/{meal['id']}")
    assert r.status_code == 404


# =============================================================================
# METRICS
# =============================================================================


def test_metrics(db_client):
    user = create_user(db_client)
    create_meal(db_client, user["id"], CARROT_CAKE)
    create_meal(db_client, user["id"], {**PINEAPPLE_CAKE, "hour": "12:00"})
    create_meal(
        db_client,
        user["id"],
        {
            "name": "Sanduíche Natural",
            "description": "Sanduíche Natural de frango",
            "in_diet": True,
            "day": "2021-10-11",
            "hour": "12:00",
        },
    )

    r = db_client.get(f"/users/{user['id']}/metrics")

    assert r.status_code == 200
    assert r.json() == {
        "totalMeals": 3,
        "inDietMeals": 2,
        "notInDietMeals": 1,
        "daysInSequence": 1,
    }


def test_metrics_no_meals(db_client):
    user = create_user(db_client)

    r = db_client.get(f"/users/{user['id']}/metrics")

    assert r.json() == {
        "totalMeals": 0,
        "inDietMeals": 0,
        "notInDietMeals": 0,
        "daysInSequence": 0,
    }


def test_metrics_unknown_user(db_client):
    assert db_client.get(f"/users/{uuid.uuid4()}/metrics").status_code == 404


@pytest.mark.parametrize(
    "ordering,expected_streak",
    [(StreakOrdering.INSERTION, 0), (StreakOrdering.CHRONOLOGICAL, 2)],
)
def test_metrics_streak_ordering(db_client, monkeypatch, ordering, expected_streak):
    monkeypatch.setattr(settings, "streak_ordering", ordering)
    user = create_user(db_client)
    create_meal(db_client, user["id"], {**CARROT_CAKE, "day": "2021-10-11"})
    create_meal(db_client, user["id"], {**CARROT_CAKE, "day": "2021-10-12"})
    create_meal(db_client, user["id"], {**PINEAPPLE_CAKE, "day": "2021-10-10"})

    r = db_client.get(f"/users/{user['id']}/metrics")

    assert r.json()["daysInSequence"] == expected_streak
    assert r.json()["totalMeals"] == 3


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(db_client):
    r = db_client.get("/health-check")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Request-ID"]
