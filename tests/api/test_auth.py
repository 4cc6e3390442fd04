"""
Tests for registration, login and logout endpoints.

These test the HTTP layer — status codes, session handling and
error mapping. Business rules are tested in tests/services.
"""


def register(client, username="alice", password="password123"):
    return client.post("/register", json={
        "username": username,
        "password": password,
    })


def login(client, username="alice", password="password123"):
    return client.post("/login", json={
        "username": username,
        "password": password,
    })


class TestRegister:

    def test_register_returns_201(self, client):
        response = register(client)
        assert response.status_code == 201

    def test_register_returns_account(self, client):
        data = register(client).json()
        assert data["username"] == "alice"
        assert float(data["balance"]) == 0.0
        assert "password" not in data
        assert "password_hash" not in data

    def test_duplicate_username_returns_409(self, client):
        register(client)
        response = register(client, password="something-else")
        assert response.status_code == 409

    def test_short_password_returns_422(self, client):
        response = register(client, password="short")
        assert response.status_code == 422

    def test_invalid_username_returns_422(self, client):
        response = register(client, username="has spaces")
        assert response.status_code == 422


class TestLogin:

    def test_login_returns_session_identity(self, client):
        account_id = register(client).json()["id"]

        response = login(client)

        assert response.status_code == 200
        data = response.json()
        assert data["account_id"] == account_id
        assert data["username"] == "alice"
        assert data["roles"] == ["USER"]

    def test_login_sets_session_cookie(self, client):
        register(client)
        response = login(client)
        assert "bank_session" in response.cookies

    def test_wrong_password_returns_401(self, client):
        register(client)
        response = login(client, password="wrong-password")
        assert response.status_code == 401

    def test_unknown_user_gets_same_answer_as_wrong_password(self, client):
        register(client)
        unknown = login(client, username="nobody")
        wrong = login(client, password="wrong-password")
        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()


class TestLogout:

    def test_logout_ends_session(self, client):
        register(client)
        login(client)
        assert client.get("/dashboard").status_code == 200

        response = client.post("/logout")

        assert response.status_code == 200
        assert client.get("/dashboard").status_code == 401

    def test_logout_without_session(self, client):
        response = client.post("/logout")
        assert response.status_code == 200


class TestAccessControl:

    def test_protected_routes_require_session(self, client):
        assert client.get("/dashboard").status_code == 401
        assert client.get("/transactions").status_code == 401
        assert client.post("/deposit", json={"amount": "10"}).status_code == 401
        assert client.post("/withdraw", json={"amount": "10"}).status_code == 401
        assert client.post(
            "/transfer", json={"to_username": "bob", "amount": "10"}
        ).status_code == 401

    def test_tampered_cookie_is_ignored(self, client):
        register(client)
        client.cookies.set("bank_session", "forged-value")
        assert client.get("/dashboard").status_code == 401
