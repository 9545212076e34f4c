from fastapi import BackgroundTasks

from projecthub.config.settings import settings
from projecthub.utils.mail_service import build_invite_message, queue_invite_email, send_invite_email


def test_invite_message_is_plain_text():
    message = build_invite_message("dev@example.com", "Invite", "Join us")
    assert message.subject == "Invite"
    assert message.body == "Join us"
    assert [getattr(r, "email", r) for r in message.recipients] == ["dev@example.com"]


def test_nothing_is_queued_when_mail_is_disabled():
    tasks = BackgroundTasks()
    assert settings.MAIL_ENABLED is False
    assert queue_invite_email(tasks, "dev@example.com", "Invite", "Join us") is False
    assert tasks.tasks == []


def test_invite_is_queued_when_mail_is_enabled(monkeypatch):
    monkeypatch.setattr(settings, "MAIL_ENABLED", True)
    tasks = BackgroundTasks()
    assert queue_invite_email(tasks, "dev@example.com", "Invite", "Join us") is True
    assert len(tasks.tasks) == 1
    assert tasks.tasks[0].func is send_invite_email
    assert tasks.tasks[0].args == ("dev@example.com", "Invite", "Join us")
