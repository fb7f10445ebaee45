from pydantic import BaseModel, ConfigDict


class AuthSettings(BaseModel):
    """Immutable auth flow configuration, fixed at construction time."""

    model_config = ConfigDict(frozen=True)

    server_url: str = "http://localhost:8000"
    mail_sender: str = "no-reply@localhost"
    mail_subject: str = "Reset password instructions"
    reset_token_ttl_hours: int = 24
    notifications: bool = True

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        return cls(
            server_url=config.SERVER_URL,
            mail_sender=config.MAIL_SENDER,
            mail_subject=config.MAIL_SUBJECT,
            reset_token_ttl_hours=config.RESET_TOKEN_TTL_HOURS,
            notifications=config.NOTIFICATIONS,
        )
