"""User routes: registration, login and listing over HTTP.

Invariants:
    - Second registration of a username fails with 400 USER_ALREADY_EXISTS
    - Wrong password and unknown username produce identical 400 bodies
    - No response ever carries the password hash
    - Listing omits tokens; login/register include one
"""

import jwt

from ideaboard.core import security


def _assert_sanitized(user_json: dict):
    assert "password" not in user_json
    assert "password_hash" not in user_json
    assert set(user_json) <= {"id", "username", "created_at", "token"}


async def test_register_returns_user_with_token(client):
    res = await client.post("/register", json={"username": "grace", "password": "cobol"})
    assert res.status_code == 201
    body = res.json()
    _assert_sanitized(body)
    assert body["username"] == "grace"
    claims = security.decode_access_token(body["token"])
    assert claims["sub"] == body["id"]
    assert claims["username"] == "grace"


async def test_register_twice_conflicts(client):
    payload = {"username": "grace", "password": "cobol"}
    first = await client.post("/register", json=payload)
    second = await client.post("/register", json=payload)
    assert first.status_code == 201
    assert second.status_code == 400
    error = second.json()["error"]
    assert error["code"] == "USER_ALREADY_EXISTS"
    assert error["message"] == "User already exists"


async def test_register_stores_hash_not_plaintext(client, test_db):
    from sqlalchemy import select
    from ideaboard.models.user import User

    await client.post("/register", json={"username": "grace", "password": "cobol"})
    result = await test_db.execute(select(User).where(User.username == "grace"))
    user = result.scalar_one()
    assert user.password_hash != "cobol"
    assert user.verify_password("cobol")


async def test_login_with_correct_credentials(client, seed_user):
    res = await client.post("/login", json={"username": "ada", "password": "lovelace"})
    assert res.status_code == 200
    body = res.json()
    _assert_sanitized(body)
    assert body["id"] == str(seed_user.id)
    assert body["username"] == "ada"
    assert jwt.decode(body["token"], options={"verify_signature": False})["username"] == "ada"


async def test_login_failures_are_indistinguishable(client, seed_user):
    wrong_password = await client.post(
        "/login", json={"username": "ada", "password": "babbage"},
    )
    unknown_user = await client.post(
        "/login", json={"username": "charles", "password": "lovelace"},
    )
    assert wrong_password.status_code == unknown_user.status_code == 400
    a = wrong_password.json()["error"]
    b = unknown_user.json()["error"]
    assert a["code"] == b["code"] == "INVALID_CREDENTIALS"
    assert a["message"] == b["message"] == "Invalid username/password"


async def test_list_users_is_sanitized_without_token(client, seed_user):
    await client.post("/register", json={"username": "grace", "password": "cobol"})
    res = await client.get("/api/users")
    assert res.status_code == 200
    users = res.json()
    assert [u["username"] for u in users] == ["ada", "grace"]
    for user in users:
        _assert_sanitized(user)
        assert "token" not in user


async def test_login_missing_body_is_validation_error(client):
    res = await client.post("/login")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Validation failed: No body submitted"


async def test_register_missing_password_reports_field(client):
    res = await client.post("/register", json={"username": "grace"})
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.password" in fields
