from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "todo-api"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    CREATE_SCHEMA_ON_STARTUP: bool = False

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_api_settings() -> ApiSettings:
    return ApiSettings()  # type: ignore[call-arg]
