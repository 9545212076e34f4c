import io
import os

from projecthub.config.settings import settings
from projecthub.models import Task, Notification, MemberUpload, ProjectChat, Project


def test_create_project_invites_manager(client, make_user, make_project, count_rows):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["title"] == "Alpha"
    assert project["status"] == "pending"
    assert project["owner"] == {"userId": owner.id, "email": owner.email}
    assert project["manager"] == {"userId": manager.id, "email": manager.email, "status": "pending"}
    assert project["team"] == []
    assert project["requirementFileUrl"] is None

    notifications = client.get("/api/notifications", headers=manager.headers).json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "project-invite"
    assert notifications[0]["message"] == 'You have been invited to manage project "Alpha"'
    assert count_rows(Notification, project_id=project_id) == 1


def test_create_project_with_unknown_manager(client, make_user, count_rows):
    owner = make_user("Owner")
    res = client.post(
        "/api/projects",
        data={"title": "Alpha", "managerEmail": "ghost@example.com"},
        headers=owner.headers,
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Manager email not found"
    assert count_rows(Project) == 0


def test_unknown_manager_leaves_no_file_behind(client, make_user, count_rows):
    owner = make_user("Owner")
    before = set(os.listdir(settings.UPLOAD_DIR))
    res = client.post(
        "/api/projects",
        data={"title": "Alpha", "managerEmail": "ghost@example.com"},
        files={"requirementPdf": ("req.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf")},
        headers=owner.headers,
    )
    assert res.status_code == 404
    assert set(os.listdir(settings.UPLOAD_DIR)) == before
    assert count_rows(Project) == 0


def test_create_project_with_requirement_file(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    files = {"requirementPdf": ("requirements.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf")}
    project_id = make_project(owner, manager, files=files)

    url = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()["requirementFileUrl"]
    assert url.startswith("http://testserver/uploads/")
    assert url.endswith("-requirements.pdf")

    served = client.get(url.replace("http://testserver", ""))
    assert served.status_code == 200
    assert served.content == b"%PDF-1.4"


def test_create_project_rejects_disallowed_file(client, make_user):
    owner, manager = make_user("Owner"), make_user("Manager")
    res = client.post(
        "/api/projects",
        data={"title": "Alpha", "managerEmail": manager.email},
        files={"requirementPdf": ("run.exe", io.BytesIO(b"MZ"), "application/octet-stream")},
        headers=owner.headers,
    )
    assert res.status_code == 400
    assert res.json()["error_code"] == "FILE_TYPE_NOT_ALLOWED"


def test_get_missing_project(client, make_user):
    user = make_user("Owner")
    res = client.get("/api/projects/999", headers=user.headers)
    assert res.status_code == 404
    assert res.json()["error_code"] == "PROJECT_NOT_FOUND"


def test_emails_are_read_from_current_user_rows(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    from projecthub.database.session import SessionLocal
    from projecthub.models import User
    session = SessionLocal()
    try:
        session.query(User).filter(User.id == manager.id).update({"email": "renamed@example.com"})
        session.commit()
    finally:
        session.close()

    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["manager"]["email"] == "renamed@example.com"


def test_manager_accept_activates_project(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    res = client.put(f"/api/projects/{project_id}/accept", headers=manager.headers)
    assert res.status_code == 200
    assert res.json()["redirect"] == f"manager-setup.html?projectId={project_id}"

    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["status"] == "active"
    assert project["manager"]["status"] == "accepted"


def test_manager_re_accept_is_idempotent(client, make_user, make_project, count_rows):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    assert client.put(f"/api/projects/{project_id}/accept", headers=manager.headers).status_code == 200
    assert client.put(f"/api/projects/{project_id}/accept", headers=manager.headers).status_code == 200

    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["status"] == "active"
    assert project["manager"]["status"] == "accepted"
    assert count_rows(Notification, project_id=project_id) == 1


def test_only_invited_manager_can_accept(client, make_user, make_project):
    owner, manager, stranger = make_user("Owner"), make_user("Manager"), make_user("Stranger")
    project_id = make_project(owner, manager)

    assert client.put(f"/api/projects/{project_id}/accept", headers=owner.headers).status_code == 403
    assert client.put(f"/api/projects/{project_id}/accept", headers=stranger.headers).status_code == 403

    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["status"] == "pending"
    assert project["manager"]["status"] == "pending"


def test_manager_reject_is_terminal(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    assert client.put(f"/api/projects/{project_id}/reject", headers=manager.headers).status_code == 200
    project = client.get(f"/api/projects/{project_id}", headers=owner.headers).json()
    assert project["status"] == "rejected"
    assert project["manager"]["status"] == "declined"

    res = client.put(f"/api/projects/{project_id}/accept", headers=manager.headers)
    assert res.status_code == 400
    assert res.json()["error_code"] == "INVALID_TRANSITION"


def test_manager_cannot_reject_after_accepting(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)
    client.put(f"/api/projects/{project_id}/accept", headers=manager.headers)

    res = client.put(f"/api/projects/{project_id}/reject", headers=manager.headers)
    assert res.status_code == 400


def test_only_owner_can_delete(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    project_id = make_project(owner, manager)

    res = client.delete(f"/api/projects/{project_id}", headers=manager.headers)
    assert res.status_code == 403
    assert res.json()["message"] == "Only owner can delete project"


def test_delete_cascades_tasks_and_notifications_but_keeps_uploads_and_chat(
    client, make_user, make_project, run_setup, count_rows
):
    owner, manager, dev = make_user("Owner"), make_user("Manager"), make_user("Dev")
    project_id = make_project(owner, manager)
    client.put(f"/api/projects/{project_id}/accept", headers=manager.headers)
    run_setup(manager, project_id, team=[(dev, "TEAM_MEMBER")], tasks=[
        {"title": "Build", "assigneeEmail": dev.email},
    ])
    client.post(f"/api/projects/{project_id}/chat", json={"message": "hello"}, headers=owner.headers)
    client.post(
        f"/api/projects/{project_id}/member/uploads",
        files={"file": ("notes.txt", io.BytesIO(b"notes"), "text/plain")},
        headers=dev.headers,
    )
    assert count_rows(Task, project_id=project_id) == 1
    assert count_rows(Notification, project_id=project_id) == 3

    res = client.delete(f"/api/projects/{project_id}", headers=owner.headers)
    assert res.status_code == 200

    assert client.get(f"/api/projects/{project_id}", headers=owner.headers).status_code == 404
    assert count_rows(Task, project_id=project_id) == 0
    assert count_rows(Notification, project_id=project_id) == 0
    assert count_rows(MemberUpload, project_id=project_id) == 1
    assert count_rows(ProjectChat, project_id=project_id) == 1
