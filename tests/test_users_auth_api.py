"""
API tests for registration, login and the auth gate
"""
from datetime import datetime, timedelta, timezone

from app.models import User
from app.utils import create_access_token, verify_token


class TestRegistration:
    """Test POST /api/users"""

    def test_register_returns_valid_token(self, client, db):
        response = client.post(
            "/api/users",
            json={"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"}
        )

        assert response.status_code == 200, response.text
        token = response.json()["token"]
        user = db.query(User).filter(User.email == "jane@example.com").one()
        assert verify_token(token).id == user.id

    def test_password_is_stored_hashed_and_avatar_derived(self, client, db, register):
        register()
        user = db.query(User).filter(User.email == "jane@example.com").one()

        assert user.password_hash != "secret123"
        assert user.password_hash.startswith("$2")
        assert user.avatar.startswith("https://www.gravatar.com/avatar/")
        assert "s=200" in user.avatar and "r=pg" in user.avatar and "d=mm" in user.avatar

    def test_duplicate_email_rejected_without_new_record(self, client, db, register):
        register()

        response = client.post(
            "/api/users",
            json={"name": "Someone Else", "email": "jane@example.com", "password": "another1"}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "User already exists"}]}
        assert db.query(User).count() == 1

    def test_all_failing_fields_reported_in_order(self, client, db):
        response = client.post(
            "/api/users",
            json={"name": "", "email": "not-an-email", "password": "123"}
        )

        assert response.status_code == 400
        messages = [error["msg"] for error in response.json()["errors"]]
        assert messages == [
            "Name is required",
            "Not a valid email",
            "Please enter a password with at least 6 characters"
        ]
        assert db.query(User).count() == 0

    def test_missing_fields_use_rule_messages(self, client):
        response = client.post("/api/users", json={})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [error["param"] for error in errors] == ["name", "email", "password"]
        assert errors[0]["msg"] == "Name is required"

    def test_missing_body_reports_each_rule(self, client):
        response = client.post("/api/users")

        assert response.status_code == 400
        messages = [error["msg"] for error in response.json()["errors"]]
        assert messages == [
            "Name is required",
            "Not a valid email",
            "Please enter a password with at least 6 characters"
        ]
        assert response.json()["errors"][0]["param"] == "name"


class TestLogin:
    """Test POST /api/auth"""

    def test_login_success_returns_token(self, client, register):
        register()

        response = client.post(
            "/api/auth",
            json={"email": "jane@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        assert verify_token(response.json()["token"]).id

    def test_wrong_password_and_unknown_email_look_identical(self, client, register):
        register()

        wrong_password = client.post(
            "/api/auth",
            json={"email": "jane@example.com", "password": "not-the-password"}
        )
        unknown_email = client.post(
            "/api/auth",
            json={"email": "nobody@example.com", "password": "secret123"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json() == {
            "errors": [{"msg": "Invalid credentials"}]
        }

    def test_login_validation(self, client):
        response = client.post("/api/auth", json={"email": "bad"})

        assert response.status_code == 400
        messages = [error["msg"] for error in response.json()["errors"]]
        assert messages == ["Not a valid email", "Password is required"]

    def test_login_without_body(self, client):
        response = client.post("/api/auth")

        assert response.status_code == 400
        messages = [error["msg"] for error in response.json()["errors"]]
        assert messages == ["Not a valid email", "Password is required"]


class TestAuthGate:
    """Test GET /api/auth and the x-auth-token header"""

    def test_get_me_without_password(self, client, auth_headers):
        response = client.get("/api/auth", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "jane@example.com"
        assert data["name"] == "Jane Doe"
        assert "id" in data and "avatar" in data
        assert "password" not in data and "password_hash" not in data

    def test_missing_token(self, client):
        response = client.get("/api/auth")

        assert response.status_code == 401
        assert response.json() == {"msg": "No token. Authorization denied"}

    def test_invalid_token(self, client):
        response = client.get("/api/auth", headers={"x-auth-token": "garbage"})

        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid"}

    def test_token_accepted_until_expiry_and_rejected_after(self, client, db, register):
        register()
        user = db.query(User).one()
        now = datetime.now(timezone.utc)

        fresh_enough = create_access_token(user.id, issued_at=now - timedelta(seconds=359940))
        expired = create_access_token(user.id, issued_at=now - timedelta(seconds=360060))

        assert client.get("/api/auth", headers={"x-auth-token": fresh_enough}).status_code == 200
        response = client.get("/api/auth", headers={"x-auth-token": expired})
        assert response.status_code == 401
        assert response.json() == {"msg": "Token is not valid"}

    def test_token_for_deleted_user(self, client, auth_headers):
        client.delete("/api/profile", headers=auth_headers)

        response = client.get("/api/auth", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"msg": "User not found"}


class TestServiceEndpoints:
    """Test root and health endpoints"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route_uses_msg_shape(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "msg" in response.json()
