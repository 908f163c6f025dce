"""
Integration tests for the /api/exercise endpoints.

Tests the HTTP surface end to end with fake repository dependencies
(see tests/conftest.py for the client fixture).
"""
from datetime import datetime, timezone, timedelta

import pytest

from application.exceptions import StoreError
from application.use_cases.add_exercise import SAVE_EXERCISE_FAILED, USER_LOOKUP_FAILED
from application.use_cases.create_user import CREATE_USER_FAILED

pytestmark = pytest.mark.integration


def _new_user(client, username="alice") -> str:
    response = client.post("/api/exercise/new-user", data={"username": username})
    assert response.status_code == 200
    return response.json()["_id"]


def _add(client, user_id, description, duration, date=None, **kwargs):
    data = {"userId": user_id, "description": description, "duration": duration}
    if date is not None:
        data["date"] = date
    return client.post("/api/exercise/add", data=data, **kwargs)


# =============================================================================
# POST /api/exercise/new-user
# =============================================================================


class TestNewUser:

    def test_form_body(self, client):
        response = client.post("/api/exercise/new-user", data={"username": "alice"})

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "alice"
        assert isinstance(data["_id"], str) and data["_id"]

    def test_json_body(self, client):
        response = client.post("/api/exercise/new-user", json={"username": "bob"})

        assert response.status_code == 200
        assert response.json()["username"] == "bob"

    def test_duplicate_username_returns_failure_payload(self, client, user_repo):
        _new_user(client, "alice")

        response = client.post("/api/exercise/new-user", data={"username": "alice"})

        assert response.status_code == 200
        assert response.json() == {"message": CREATE_USER_FAILED, "error_code": "23505"}
        assert len(user_repo.list_all()) == 1

    def test_missing_username_returns_failure_payload(self, client):
        response = client.post("/api/exercise/new-user", data={})

        assert response.status_code == 200
        assert response.json() == {"message": CREATE_USER_FAILED, "error_code": None}

    def test_non_string_username_returns_failure_payload(self, client):
        response = client.post("/api/exercise/new-user", json={"username": ["a", "b"]})

        assert response.status_code == 200
        assert response.json()["message"] == CREATE_USER_FAILED

    def test_malformed_json_is_a_bad_request(self, client):
        response = client.post(
            "/api/exercise/new-user",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.text == "Malformed JSON body"


# =============================================================================
# GET /api/exercise/users
# =============================================================================


class TestUsers:

    def test_lists_created_users(self, client):
        a = _new_user(client, "alice")
        b = _new_user(client, "bob")

        response = client.get("/api/exercise/users")

        assert response.status_code == 200
        assert response.json() == [
            {"username": "alice", "_id": a},
            {"username": "bob", "_id": b},
        ]
        assert a != b

    def test_store_failure_is_a_server_error(self, client, user_repo):
        user_repo.fail_with(StoreError("connection refused"))

        response = client.get("/api/exercise/users")

        assert response.status_code == 500
        assert response.text == "connection refused"


# =============================================================================
# POST /api/exercise/add
# =============================================================================


class TestAddExercise:

    def test_add_with_date(self, client):
        user_id = _new_user(client)

        response = _add(client, user_id, "run", "30", "2023-01-15")

        assert response.status_code == 200
        assert response.json() == {
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": "Sun Jan 15 2023",
            "_id": user_id,
        }

    def test_add_json_body_with_numeric_duration(self, client):
        user_id = _new_user(client)

        response = client.post(
            "/api/exercise/add",
            json={"userId": user_id, "description": "swim", "duration": 45, "date": "2023-02-01"},
        )

        assert response.json()["duration"] == 45
        assert response.json()["date"] == "Wed Feb 01 2023"

    def test_date_defaults_to_today(self, client):
        user_id = _new_user(client)
        before = datetime.now(timezone.utc)

        response = _add(client, user_id, "run", "30")

        after = datetime.now(timezone.utc)
        assert response.json()["date"] in {
            before.strftime("%a %b %d %Y"),
            after.strftime("%a %b %d %Y"),
        }

    def test_out_of_range_date_defaults_to_today(self, client):
        user_id = _new_user(client)
        before = datetime.now(timezone.utc)

        response = _add(client, user_id, "run", "30", "9999-12-31T23:00:00-05:00")

        after = datetime.now(timezone.utc)
        assert response.status_code == 200
        assert response.json()["date"] in {
            before.strftime("%a %b %d %Y"),
            after.strftime("%a %b %d %Y"),
        }

    def test_unknown_user(self, client, exercise_repo):
        response = _add(client, "missing", "run", "30")

        assert response.status_code == 200
        assert response.json() == {"message": USER_LOOKUP_FAILED, "error_code": None}
        assert exercise_repo.get_all() == []

    def test_non_numeric_duration(self, client, exercise_repo):
        user_id = _new_user(client)

        response = _add(client, user_id, "run", "a while")

        assert response.status_code == 200
        assert response.json() == {"message": SAVE_EXERCISE_FAILED, "error_code": None}
        assert exercise_repo.get_all() == []

    def test_store_failure_on_save(self, client, exercise_repo):
        user_id = _new_user(client)
        exercise_repo.fail_with(StoreError("value too long", code="22001"))

        response = _add(client, user_id, "run", "30")

        assert response.status_code == 200
        assert response.json() == {"message": SAVE_EXERCISE_FAILED, "error_code": "22001"}


# =============================================================================
# GET /api/exercise/log
# =============================================================================


@pytest.fixture
def alice(client):
    user_id = _new_user(client, "alice")
    _add(client, user_id, "run", "30", "2023-01-15")
    _add(client, user_id, "swim", "45", "2023-01-20")
    _add(client, user_id, "bike", "60", "2023-01-03")
    _add(client, user_id, "yoga", "20", "2022-12-31")
    return user_id


class TestLog:

    def test_full_log(self, client, alice):
        response = client.get("/api/exercise/log", params={"userId": alice})

        assert response.status_code == 200
        data = response.json()
        assert data["_id"] == alice
        assert data["username"] == "alice"
        assert "from" not in data
        assert "to" not in data
        assert data["count"] == 4
        assert [e["description"] for e in data["log"]] == ["swim", "run", "bike", "yoga"]
        assert data["log"][0] == {"description": "swim", "duration": 45, "date": "Fri Jan 20 2023"}

    def test_window_and_limit(self, client, alice):
        response = client.get(
            "/api/exercise/log",
            params={"userId": alice, "from": "2023-01-01", "to": "2023-01-31", "limit": "1"},
        )

        data = response.json()
        assert data["from"] == "Sun Jan 01 2023"
        assert data["to"] == "Tue Jan 31 2023"
        assert data["count"] == 1
        assert data["log"] == [{"description": "swim", "duration": 45, "date": "Fri Jan 20 2023"}]

    def test_garbage_from_is_ignored(self, client, alice):
        response = client.get("/api/exercise/log", params={"userId": alice, "from": "garbage"})

        assert response.status_code == 200
        data = response.json()
        assert "from" not in data
        assert data["count"] == 4

    @pytest.mark.parametrize("bound", ["from", "to"])
    def test_out_of_range_bound_is_ignored(self, client, alice, bound):
        response = client.get(
            "/api/exercise/log",
            params={"userId": alice, bound: "0001-01-01T00:00:00+01:00"},
        )

        assert response.status_code == 200
        data = response.json()
        assert bound not in data
        assert data["count"] == 4

    def test_invalid_limit_is_ignored(self, client, alice):
        response = client.get("/api/exercise/log", params={"userId": alice, "limit": "lots"})
        assert response.json()["count"] == 4

    def test_exercise_logged_today_is_included(self, client):
        user_id = _new_user(client, "carol")
        added = _add(client, user_id, "walk", "15").json()

        data = client.get("/api/exercise/log", params={"userId": user_id}).json()

        assert data["log"] == [{"description": "walk", "duration": 15, "date": added["date"]}]

    def test_future_exercise_needs_explicit_to(self, client):
        user_id = _new_user(client, "dave")
        future = (datetime.now(timezone.utc) + timedelta(days=3)).strftime("%Y-%m-%d")
        _add(client, user_id, "race", "90", future)

        assert client.get("/api/exercise/log", params={"userId": user_id}).json()["count"] == 0

        far = (datetime.now(timezone.utc) + timedelta(days=30)).strftime("%Y-%m-%d")
        data = client.get("/api/exercise/log", params={"userId": user_id, "to": far}).json()
        assert data["count"] == 1

    def test_unknown_user_is_an_error(self, client):
        response = client.get("/api/exercise/log", params={"userId": "missing"})

        assert response.status_code == 404
        assert response.text == "unknown userId"

    def test_missing_user_id_is_a_bad_request(self, client):
        response = client.get("/api/exercise/log")

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("userId:")

    def test_store_failure_is_a_server_error(self, client, alice, exercise_repo):
        exercise_repo.fail_with(StoreError("statement timeout", code="57014"))

        response = client.get("/api/exercise/log", params={"userId": alice})

        assert response.status_code == 500
        assert response.text == "statement timeout"


# =============================================================================
# Landing page, health and fallbacks
# =============================================================================


class TestMisc:

    def test_landing_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/exercise/new-user" in response.text

    def test_static_assets(self, client):
        response = client.get("/public/style.css")
        assert response.status_code == 200

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.text == "not found"
