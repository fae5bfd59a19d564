# File: users_api/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

# Settings field -> environment variable that overrides it
ENV_VARS = {
    "host": "USERS_API_HOST",
    "port": "PORT",
    "cors_origins": "USERS_API_CORS_ORIGINS",
    "database_url": "USERS_API_DATABASE_URL",
    "log_level": "USERS_API_LOG_LEVEL",
}


class Settings(BaseModel):
    # Defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Users CRUD API"
    VERSION: str = "0.1.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    cors_origins: List[str] = "*"

    # Database (a SQLite file in the working directory by default)
    database_url: str = "sqlite:///./NodeSql.db"

    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper()

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings, letting any variable set in ``environ`` override a default."""
        environ = os.environ if environ is None else environ
        overrides = {field: environ[var] for field, var in ENV_VARS.items() if var in environ}
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
