import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    EMPLOYEE_SERVER_BASE_URL: str = "http://localhost:8112/api/v1"
    EMPLOYEE_SERVER_CONNECT_TIMEOUT_MS: int = 3000
    EMPLOYEE_SERVER_READ_TIMEOUT_MS: int = 5000

    RATE_LIMIT_RETRY_AFTER_SECONDS: int = 30

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
