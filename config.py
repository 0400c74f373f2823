import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    """Value from the process environment, then env.yaml, then default"""
    raw = os.environ.get(key)
    if not raw:
        return data.get(key, default)
    if isinstance(default, bool):
        return raw.lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    CREATE_TABLES = bool(_get("CREATE_TABLES", True))
    API_PREFIX = _get("API_PREFIX", "/api/v1")
    API_PORT = _get("API_PORT", 3000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", True))
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_DAYS = _get("JWT_EXPIRES_DAYS", 7)
    BCRYPT_ROUNDS = _get("BCRYPT_ROUNDS", 10)
    RESET_TOKEN_TTL_MINUTES = _get("RESET_TOKEN_TTL_MINUTES", 60)
    RESET_PASSWORD_URL = _get("RESET_PASSWORD_URL", "http://localhost:3000/reset-password")
    SMTP_HOST = _get("SMTP_HOST", "")
    SMTP_PORT = _get("SMTP_PORT", 587)
    SMTP_USER = _get("SMTP_USER", "")
    SMTP_PASSWORD = _get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = _get("SMTP_USE_TLS", True)
    MAIL_FROM = _get("MAIL_FROM", "")
