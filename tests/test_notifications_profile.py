from datetime import datetime, timedelta


def test_notifications_are_newest_first_and_capped(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    for i in range(22):
        make_project(owner, manager, title=f"P{i}")

    notes = client.get("/api/notifications", headers=manager.headers).json()
    assert len(notes) == 20
    assert notes[0]["message"] == 'You have been invited to manage project "P21"'
    assert all(n["isRead"] is False for n in notes)
    assert client.get("/api/notifications", headers=owner.headers).json() == []


def test_mark_notification_read(client, make_user, make_project):
    owner, manager = make_user("Owner"), make_user("Manager")
    make_project(owner, manager)

    assert client.get("/api/notifications/unread-count", headers=manager.headers).json() == {"unread_count": 1}
    note_id = client.get("/api/notifications", headers=manager.headers).json()[0]["id"]

    # someone else's notification is invisible
    assert client.put(f"/api/notifications/{note_id}/read", headers=owner.headers).status_code == 404

    assert client.put(f"/api/notifications/{note_id}/read", headers=manager.headers).status_code == 200
    assert client.get("/api/notifications/unread-count", headers=manager.headers).json() == {"unread_count": 0}
    assert client.get("/api/notifications", headers=manager.headers).json()[0]["isRead"] is True


def test_profile_summary(client, make_user, make_project, run_setup):
    owner, manager, dev = make_user("Owner"), make_user("Manager"), make_user("Dev")
    project_id = make_project(owner, manager)
    run_setup(manager, project_id, team=[(dev, "TEAM_MEMBER")], tasks=[
        {"title": "One", "assigneeEmail": dev.email},
        {"title": "Two", "assigneeEmail": dev.email},
    ])
    dashboard = client.get(f"/api/projects/{project_id}/dashboard", headers=manager.headers).json()
    client.put(f"/api/tasks/{dashboard['tasks'][0]['id']}", json={"status": "done"}, headers=manager.headers)

    profile = client.get("/api/profile", headers=dev.headers).json()
    assert profile["name"] == "Dev"
    assert profile["phone"] == "555-0100"
    assert profile["role"] == "Team Member"
    assert profile["totalTasks"] == 2
    assert profile["tasksCompleted"] == 1
    assert profile["hoursLogged"] == 2
    assert len(profile["recentActivity"]) == 2
    assert profile["recentActivity"][0]["label"] == 'Task "One" marked as done'

    assert client.get("/api/profile", headers=owner.headers).json()["role"] == "Owner"
    assert client.get("/api/profile", headers=manager.headers).json()["role"] == "Manager"


def test_home_dashboard(client, make_user, make_project, run_setup):
    owner, manager, dev = make_user("Owner"), make_user("Manager"), make_user("Dev")
    active_id = make_project(owner, manager, title="Active")
    make_project(owner, manager, title="Waiting")
    client.put(f"/api/projects/{active_id}/accept", headers=manager.headers)

    soon = (datetime.utcnow() + timedelta(days=3)).isoformat()
    past = (datetime.utcnow() - timedelta(days=3)).isoformat()
    run_setup(manager, active_id, team=[(dev, "TEAM_MEMBER")], tasks=[
        {"title": "Soon", "assigneeEmail": dev.email, "deadline": soon},
        {"title": "Late", "assigneeEmail": dev.email, "deadline": past},
    ])

    home = client.get("/api/dashboard", headers=dev.headers).json()
    assert home["user"] == {"name": "Dev", "email": dev.email}
    assert home["summary"] == {"activeProjects": 1, "myTasks": 2, "upcomingDeadlines": 1}
    assert [(p["title"], p["role"]) for p in home["projects"]] == [("Active", "MEMBER")]
    assert len(home["notifications"]) == 3

    owner_home = client.get("/api/dashboard", headers=owner.headers).json()
    assert {p["title"] for p in owner_home["projects"]} == {"Active", "Waiting"}
    assert all(p["role"] == "OWNER" for p in owner_home["projects"])


def test_declined_member_loses_project_card(client, make_user, make_project, run_setup):
    owner, manager, dev = make_user("Owner"), make_user("Manager"), make_user("Dev")
    project_id = make_project(owner, manager)
    run_setup(manager, project_id, team=[(dev, "TEAM_MEMBER")])
    assert len(client.get("/api/dashboard", headers=dev.headers).json()["projects"]) == 1

    client.put(f"/api/projects/{project_id}/team/reject", headers=dev.headers)
    assert client.get("/api/dashboard", headers=dev.headers).json()["projects"] == []
