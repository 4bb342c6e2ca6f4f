import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(env_path)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    app_name = "foyer"
    api_prefix = os.getenv("API_PREFIX", "/api")
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))

    db_host = os.getenv("DB_HOST", "127.0.0.1")
    db_port = int(os.getenv("DB_PORT", "3306"))
    db_user = os.getenv("DB_USER", "root")
    db_password = os.getenv("DB_PASSWORD", "")
    db_name = os.getenv("DB_NAME", "foyer")
    db_url_override = os.getenv("DATABASE_URL", "").strip()
    db_echo = _env_bool("DB_ECHO")
    db_auto_create = _env_bool("DB_AUTO_CREATE")

    _raw_log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    log_level = _raw_log_level if _raw_log_level in {"DEBUG", "INFO", "WARNING", "ERROR"} else "INFO"
    log_dir = os.getenv("LOG_DIR", "local_logs")
    log_file_max_bytes = int(os.getenv("LOG_FILE_MAX_BYTES", str(10 * 1024 * 1024)))
    log_file_backup_count = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    @property
    def database_url(self) -> str:
        if self.db_url_override:
            return self.db_url_override
        return (
            f"mysql+pymysql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?charset=utf8mb4"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
