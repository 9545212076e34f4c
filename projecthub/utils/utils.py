from projecthub.models import Project, ProjectMember, Task, Notification, MemberUpload, ProjectChat
from projecthub.utils.common import build_file_url


def member_to_dict(member: ProjectMember) -> dict:
    return {
        "userId": member.user_id,
        "email": member.user.email if member.user else None,
        "role": member.role,
        "status": member.status,
    }


def project_to_dict(project: Project) -> dict:
    """
    Client projection of a project.
    Owner and manager emails are read from the current user rows.
    """
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "status": project.status,
        "owner": {
            "userId": project.owner_id,
            "email": project.owner.email if project.owner else None,
        },
        "manager": {
            "userId": project.manager_id,
            "email": project.manager.email if project.manager else None,
            "status": project.manager_status,
        },
        "team": [member_to_dict(m) for m in project.visible_team],
        "deadline": project.deadline,
        "requirementFileUrl": build_file_url(project.requirement_file_path),
        "createdAt": project.created_at,
        "updatedAt": project.updated_at,
    }


def task_to_dict(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "projectId": task.project_id,
        "assigneeId": task.assigned_to,
        "status": task.status,
        "deadline": task.deadline,
        "createdAt": task.created_at,
        "lastUpdate": task.updated_at,
    }


def notification_to_dict(notification: Notification) -> dict:
    return {
        "id": notification.id,
        "userId": notification.user_id,
        "projectId": notification.project_id,
        "taskId": notification.task_id,
        "type": notification.type,
        "message": notification.message,
        "isRead": notification.is_read,
        "createdAt": notification.created_at,
    }


def upload_to_dict(upload: MemberUpload) -> dict:
    return {
        "id": upload.id,
        "projectId": upload.project_id,
        "memberId": upload.member_id,
        "fileName": upload.file_name,
        "sprintLabel": upload.sprint_label,
        "note": upload.note,
        "uploadedAt": upload.created_at,
        "url": build_file_url(upload.file_path),
    }


def chat_to_dict(chat: ProjectChat) -> dict:
    return {
        "id": chat.id,
        "projectId": chat.project_id,
        "senderId": chat.sender_id,
        "senderName": chat.sender_name,
        "message": chat.message,
        "createdAt": chat.created_at,
    }
