import os
from dotenv import load_dotenv


def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


class Settings:
    """Service settings read from the environment"""

    def __init__(self):
        # Load environment variables only for local development
        self.env_file_loaded = os.path.exists(".env") and load_dotenv()

        self.app_title = os.getenv("APP_TITLE", "String Analyzer Service")
        self.app_version = os.getenv("APP_VERSION", "1.0.0")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))
        self.reload = _get_bool("RELOAD")
        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


def get_settings() -> Settings:
    """Build settings from the current environment"""
    return Settings()
