import pytest


def test_list_starts_empty(lite_client):
    response = lite_client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == []


def test_create_and_list(lite_client):
    response = lite_client.post(
        "/api/users", json={"firstName": " Olga ", "lastName": "Kuznetsova", "email": "olga@example.com "}
    )

    assert response.status_code == 201
    body = response.json()
    assert body == {"id": body["id"], "firstName": "Olga", "lastName": "Kuznetsova", "email": "olga@example.com"}
    assert response.headers["location"] == f"/api/users/{body['id']}"

    assert lite_client.get("/api/users").json() == [body]


@pytest.mark.parametrize("field", ["firstName", "lastName", "email"])
def test_create_rejects_blank_or_missing(lite_client, field):
    payload = {"firstName": "A", "lastName": "B", "email": "c@example.com"}

    payload[field] = "  "
    assert lite_client.post("/api/users", json=payload).status_code == 400

    del payload[field]
    assert lite_client.post("/api/users", json=payload).status_code == 400
