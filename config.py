import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./credflow.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # "production" switches mail delivery from the log transport to SMTP
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    NOTIFICATIONS = bool(data.get("NOTIFICATIONS", True))
    FLASH = bool(data.get("FLASH", False))

    SERVER_URL = data.get("SERVER_URL", "http://localhost:8000")
    MAIL_SENDER = data.get("MAIL_SENDER", "no-reply@localhost")
    MAIL_SUBJECT = data.get("MAIL_SUBJECT", "Reset password instructions")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT = data.get("SMTP_TIMEOUT", 10)

    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)
    RESET_TOKEN_TTL_HOURS = data.get("RESET_TOKEN_TTL_HOURS", 24)

    SESSION_SECRET = data.get("SESSION_SECRET", "dev-secret-key-change-in-production")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "credflow_session")
    SESSION_TTL_HOURS = data.get("SESSION_TTL_HOURS", 24 * 7)

    # {"signin": {"success_redirect": "/", "failure_redirect": "/signin"}, ...}
    REDIRECTS = data.get("REDIRECTS", {})
