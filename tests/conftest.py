import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="projecthub-uploads-")
os.environ["SECRET_KEY"] = "test-secret"
os.environ["MAIL_ENABLED"] = "false"
os.environ["PUBLIC_BASE_URL"] = "http://testserver"

import pytest
from fastapi.testclient import TestClient

from projecthub.main import app
from projecthub.database.base import Base
from projecthub.database.session import engine, SessionLocal


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class UserHandle:
    def __init__(self, id, name, email, token):
        self.id = id
        self.name = name
        self.email = email
        self.token = token

    @property
    def headers(self):
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def make_user(client):
    def _make(name, email=None, password="secret123", phone="555-0100"):
        email = email or f"{name.lower()}@example.com"
        res = client.post("/api/auth/signup", json={
            "name": name, "email": email, "password": password, "phone": phone
        })
        assert res.status_code == 200, res.text
        token = client.post("/api/auth/login", json={"email": email, "password": password}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}
        found = client.get("/api/users/search", params={"query": email}, headers=headers).json()
        user_id = next(u["id"] for u in found if u["email"] == email)
        return UserHandle(user_id, name, email, token)
    return _make


@pytest.fixture
def make_project(client):
    def _make(owner, manager, title="Alpha", description="First project", files=None):
        res = client.post(
            "/api/projects",
            data={"title": title, "description": description, "managerEmail": manager.email},
            files=files,
            headers=owner.headers,
        )
        assert res.status_code == 200, res.text
        return res.json()["projectId"]
    return _make


@pytest.fixture
def run_setup(client):
    def _run(manager, project_id, team=(), tasks=(), deadline=None):
        payload = {
            "teamMembers": [{"email": u.email, "role": role} for u, role in team],
            "tasks": list(tasks),
            "projectDeadline": deadline,
        }
        return client.post(f"/api/projects/{project_id}/manager-setup", json=payload, headers=manager.headers)
    return _run


@pytest.fixture
def count_rows():
    def _count(model, **filters):
        session = SessionLocal()
        try:
            return session.query(model).filter_by(**filters).count()
        finally:
            session.close()
    return _count
