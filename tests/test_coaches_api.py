import uuid

from app.schemas.coach import CoachCreate
from tests.mocks import coach_row, utc


def test_partial_update_preserves_absent_fields(client, mock_conn):
    before = coach_row(first_name="John", last_name="Doe", phone="1112223333", is_active=True)
    after = dict(before, first_name="Jane", updated_at=utc(2025, 8, 2, 9, 0))
    mock_conn.expect(after)

    response = client.put(f"/api/coaches/{before['id']}", json={"first_name": "Jane"})

    assert response.status_code == 200
    body = response.json()
    assert body["first_name"] == "Jane"
    assert body["last_name"] == "Doe"
    assert body["phone"] == "1112223333"
    assert body["is_active"] is True
    assert body["updated_at"] > before["updated_at"].isoformat().replace("+00:00", "Z")

    bound = mock_conn.bound()
    assert bound["first_name"] == "Jane"
    assert not {"last_name", "phone", "is_active", "email", "specialties"} & set(bound)


def test_update_coach_not_found(client, mock_conn):
    mock_conn.expect(None)

    response = client.put(f"/api/coaches/{uuid.uuid4()}", json={"first_name": "Jane"})

    assert response.status_code == 404


def test_update_coach_wrong_type(client, mock_conn):
    response = client.put(f"/api/coaches/{uuid.uuid4()}", json={"is_active": "sometimes"})

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_request"
    assert mock_conn.calls == []


def test_create_coach(client, mock_conn):
    row = coach_row(specialties=["pitching"])
    mock_conn.expect(row)

    response = client.post(
        "/api/coaches",
        json={
            "first_name": "John",
            "last_name": "Doe",
            "phone": "1112223333",
            "specialties": ["pitching", "pitching"],
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == str(row["id"])
    assert body["specialties"] == ["pitching"]
    assert body["email"] is None
    assert response.headers["location"] == f"/api/coaches/{row['id']}"
    assert mock_conn.bound()["specialties"] == ["pitching"]


def test_create_coach_bad_json(client, mock_conn):
    response = client.post(
        "/api/coaches",
        content='{"first_name": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"]


def test_create_coach_database_error(client, mock_conn):
    mock_conn.expect(RuntimeError("violates enum coach_specialty"))

    response = client.post(
        "/api/coaches",
        json={"first_name": "A", "last_name": "B", "phone": "1", "specialties": ["bunting"]},
    )

    assert response.status_code == 500


def test_list_coaches(client, mock_conn):
    mock_conn.expect([coach_row(), coach_row(first_name="Jane")])

    response = client.get("/api/coaches")

    assert response.status_code == 200
    assert [c["first_name"] for c in response.json()] == ["John", "Jane"]


def test_get_coach(client, mock_conn):
    row = coach_row()
    mock_conn.expect(row)

    response = client.get(f"/api/coaches/{row['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == str(row["id"])


def test_delete_coach(client, mock_conn):
    mock_conn.expect(1).expect(0)
    coach_id = uuid.uuid4()

    assert client.delete(f"/api/coaches/{coach_id}").status_code == 204
    assert client.delete(f"/api/coaches/{coach_id}").status_code == 404


def test_coach_create_drops_duplicate_specialties():
    coach = CoachCreate(
        first_name="A", last_name="B", phone="1",
        specialties=["pitching", "hitting", "pitching"],
    )

    assert coach.specialties == ["pitching", "hitting"]
