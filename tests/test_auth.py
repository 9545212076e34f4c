from jose import jwt

from projecthub.auth.auth_utils import create_access_token


def test_signup_and_login(client):
    res = client.post("/api/auth/signup", json={
        "name": "Ann", "email": "ann@example.com", "password": "pw123456", "phone": "123"
    })
    assert res.status_code == 200
    assert res.json()["message"] == "Signup successful"

    res = client.post("/api/auth/login", json={"email": "ann@example.com", "password": "pw123456"})
    assert res.status_code == 200
    payload = jwt.decode(res.json()["token"], "test-secret", algorithms=["HS256"])
    assert payload["user_id"] == 1


def test_duplicate_signup_is_rejected(client, make_user):
    make_user("Ann")
    res = client.post("/api/auth/signup", json={
        "name": "Ann again", "email": "ann@example.com", "password": "other"
    })
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "User already exists"
    assert body["success"] is False


def test_login_with_wrong_password(client, make_user):
    make_user("Ann")
    res = client.post("/api/auth/login", json={"email": "ann@example.com", "password": "nope"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid credentials"
    assert res.json()["error_code"] == "INVALID_CREDENTIALS"


def test_protected_route_requires_token(client):
    res = client.get("/api/notifications")
    assert res.status_code == 401
    assert res.json()["message"] == "No token provided"


def test_invalid_token_is_rejected(client):
    res = client.get("/api/notifications", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid token"


def test_expired_token_is_rejected(client, make_user):
    user = make_user("Ann")
    token = create_access_token(user.id, expires_minutes=-1)
    res = client.get("/api/notifications", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_missing_fields_return_bad_request(client):
    res = client.post("/api/auth/signup", json={"name": "NoEmail"})
    assert res.status_code == 400
    assert res.json()["error_code"] == "BAD_REQUEST"


def test_user_search_matches_substring_and_limits_results(client, make_user):
    searcher = make_user("Searcher", email="searcher@other.org")
    for i in range(12):
        make_user(f"Dev{i}", email=f"dev{i}@acme.io")

    res = client.get("/api/users/search", params={"query": "ACME"}, headers=searcher.headers)
    assert res.status_code == 200
    results = res.json()
    assert len(results) == 10
    assert all("acme.io" in r["email"] for r in results)
    assert set(results[0].keys()) == {"id", "email"}


def test_health_check_needs_no_token(client):
    res = client.get("/")
    assert res.status_code == 200


def test_search_matches_wildcards_literally(client, make_user):
    searcher = make_user("Searcher")
    make_user("Under", email="first_last@example.com")
    make_user("Plain", email="firstlast@example.com")

    res = client.get("/api/users/search", params={"query": "_"}, headers=searcher.headers)
    assert [r["email"] for r in res.json()] == ["first_last@example.com"]

    res = client.get("/api/users/search", params={"query": "%"}, headers=searcher.headers)
    assert res.json() == []
