"""Tests for sign-up, sign-in and sign-out."""

from werkzeug.security import check_password_hash

from filehub.core.security import read_user_id
from filehub.models.user import User


def test_signup_creates_user_and_signs_in(client, db_session, settings):
    response = client.post(
        "/signup",
        data={"username": "bob", "password": "hunter2"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/files"

    bob = db_session.query(User).filter(User.username == "bob").one()
    assert check_password_hash(bob.password, "hunter2")
    assert read_user_id(response.cookies["user_id"], settings.secret_key) == bob.id


def test_signup_duplicate_username(client, user):
    response = client.post("/signup", data={"username": "alice", "password": "x"})

    assert response.status_code == 200
    assert "Username already exists" in response.text


def test_signup_rejects_path_like_username(client, db_session):
    response = client.post("/signup", data={"username": "../etc", "password": "x"})

    assert response.status_code == 400
    assert db_session.query(User).count() == 0


def test_login_success_sets_cookie(client, user, settings):
    response = client.post(
        "/login",
        data={"username": "alice", "password": "secret"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert read_user_id(response.cookies["user_id"], settings.secret_key) == user.id
    assert response.cookies["user_id"] != str(user.id)


def test_login_wrong_password(client, user):
    response = client.post("/login", data={"username": "alice", "password": "wrong"})

    assert response.status_code == 200
    assert "Invalid credentials" in response.text
    assert "user_id" not in response.cookies


def test_login_unknown_user(client, db_session):
    response = client.post("/login", data={"username": "nobody", "password": "x"})

    assert "Invalid credentials" in response.text


def test_signed_in_user_reaches_own_namespace(client, user, storage_root):
    client.post("/login", data={"username": "alice", "password": "secret"})

    response = client.get("/files")

    assert response.status_code == 200
    assert (storage_root / "alice").is_dir()


def test_logout_clears_cookie(auth_client):
    response = auth_client.post("/logout", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert 'user_id=""' in response.headers["set-cookie"]


def test_login_page_renders(client):
    response = client.get("/login")

    assert response.status_code == 200
    assert "Sign in" in response.text
