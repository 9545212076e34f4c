from fastapi import BackgroundTasks
from fastapi_mail import FastMail, MessageSchema, MessageType

from projecthub.config.settings import settings
from projecthub.utils.config_mail import get_mail_config
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


def build_invite_message(email: str, subject: str, body: str) -> MessageSchema:
    return MessageSchema(
        subject=subject,
        recipients=[email],
        body=body,
        subtype=MessageType.plain,
    )


async def send_invite_email(email: str, subject: str, body: str):
    message = build_invite_message(email, subject, body)
    try:
        await FastMail(get_mail_config()).send_message(message)
        logger.info(f"Invite email sent to {email}")
    except Exception as e:
        logger.error(f"Failed to send invite email to {email}: {e}")


def queue_invite_email(background_tasks: BackgroundTasks, email: str, subject: str, body: str) -> bool:
    """
    Schedules an invite email when mail delivery is enabled.
    Returns True if an email was queued.
    """
    if not settings.MAIL_ENABLED or not email:
        return False
    background_tasks.add_task(send_invite_email, email, subject, body)
    return True
