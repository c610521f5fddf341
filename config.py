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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./sessions.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Scheduling
    TIMEZONE = data.get("TIMEZONE", "UTC")
    GENERATION_HORIZON_DAYS = int(data.get("GENERATION_HORIZON_DAYS", 30))
    OCCURRENCE_NAME_LOCALE = data.get("OCCURRENCE_NAME_LOCALE", "id")
    MONTHLY_OVERFLOW_POLICY = data.get("MONTHLY_OVERFLOW_POLICY", "clamp")
    SIBLING_SYNC_SCOPE = data.get("SIBLING_SYNC_SCOPE", "future_only")
    TEMPLATE_SYNC_SCOPE = data.get("TEMPLATE_SYNC_SCOPE", "all")
    DERIVE_WINDOW_FROM_SESSION_TIMES = bool(
        data.get("DERIVE_WINDOW_FROM_SESSION_TIMES", False)
    )
