from fastapi_mail import ConnectionConfig

from projecthub.config.settings import settings


def get_mail_config() -> ConnectionConfig:
    """
    Builds the SMTP connection settings.
    Only called when mail delivery is enabled.
    """
    return ConnectionConfig(
        MAIL_USERNAME=settings.MAIL_USERNAME,
        MAIL_PASSWORD=settings.MAIL_PASSWORD,
        MAIL_FROM=settings.MAIL_FROM,
        MAIL_PORT=settings.MAIL_PORT,
        MAIL_SERVER=settings.MAIL_SERVER,

        # New field names (FastAPI-Mail >= 2.x)
        MAIL_STARTTLS=True,
        MAIL_SSL_TLS=False,

        USE_CREDENTIALS=bool(settings.MAIL_USERNAME),
        VALIDATE_CERTS=True,
    )
