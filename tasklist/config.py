from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Task List"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Gateway
    TODO_SERVICE_URL: str = "http://localhost:8000"
    BACKEND_TIMEOUT_SECONDS: float = 10.0
    GATEWAY_HOST: str = "0.0.0.0"
    GATEWAY_PORT: int = 3000

    # Task service
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT_SECONDS: float = 5.0
    TASKS_KEY: str = "tasks"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
