# tests/test_api/test_users_api.py

import pytest

def user_payload(**overrides):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "username": "ada",
        "email": "ada@example.com",
        "password": "Engine#1843",
        "phone_number": "5550000",
        "address": "London",
        "bio": "Analyst",
        "reading_goal": 10
    }
    payload.update(overrides)
    return payload

def test_register_user(client):
    response = client.post("/api/users", json=user_payload())

    assert response.status_code == 201
    user = response.json()
    assert user["username"] == "ada"
    assert user["bio"] == "Analyst"
    assert "password" not in user
    assert "password_hash" not in user

def test_register_taken_username(client):
    client.post("/api/users", json=user_payload())
    response = client.post("/api/users", json=user_payload(email="other@example.com"))
    assert response.status_code == 409

@pytest.mark.parametrize("field,value,fragment", [
    ("password", "short1!", "at least 8 characters"),
    ("password", "lowercase1!", "uppercase"),
    ("password", "NoDigits!!", "number"),
    ("password", "NoSpecial1", "special character"),
    ("phone_number", "555-0000", "only numbers"),
    ("email", "not-an-email", "email"),
])
def test_register_validation(client, field, value, fragment):
    response = client.post("/api/users", json=user_payload(**{field: value}))

    assert response.status_code == 400
    assert fragment in response.json()["message"]

def test_login_success(client):
    client.post("/api/users", json=user_payload())
    response = client.post("/api/users/login", json={"username": "ada", "password": "Engine#1843"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "ada"

def test_login_wrong_password(client):
    client.post("/api/users", json=user_payload())
    response = client.post("/api/users/login", json={"username": "ada", "password": "Wrong#1843"})

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["user"] is None

def test_user_lookup_update_delete(client):
    user = client.post("/api/users", json=user_payload()).json()

    assert client.get(f"/api/users/id/{user['id']}").json()["username"] == "ada"
    assert client.get("/api/users/username/ada").status_code == 200
    assert client.get("/api/users/username/nobody").status_code == 404
    assert len(client.get("/api/users/profiles").json()) == 1

    updated = client.put(f"/api/users/{user['id']}", json=user_payload(last_name="Byron", bio="Poet"))
    assert updated.json()["last_name"] == "Byron"
    assert updated.json()["bio"] == "Poet"

    assert client.delete(f"/api/users/{user['id']}").status_code == 200
    assert client.get(f"/api/users/id/{user['id']}").status_code == 404
    assert client.get("/api/profiles").json() == []

def test_profiles(client, sample_user):
    profile_id = sample_user.profile_id
    response = client.get("/api/profiles/username/reader")
    assert response.json()["bio"] == "Reads a lot"

    png = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
    updated = client.put(f"/api/profiles/{profile_id}", json={"picture": png})
    assert updated.json()["picture"] == png
    assert updated.json()["bio"] == "Reads a lot"

    bad = client.put(f"/api/profiles/{profile_id}", json={"picture": "data:image/png;base64,***"})
    assert bad.status_code == 400
    assert bad.json() == {"message": "Invalid Base64 image format"}
