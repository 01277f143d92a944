import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    @field_validator("USERS_API_URL_PREFIX", mode="before")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        cleaned = str(value).strip().strip("/")
        if not cleaned:
            raise ValueError("URL prefix must not be empty")
        return f"/{cleaned}"

    @field_validator("USERS_API_DB_TYPE", mode="before")
    @classmethod
    def normalize_db_type(cls, value: str) -> str:
        return str(value).strip().lower()

    @field_validator("USERS_API_LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    USERS_API_HOST: str = Field(default="localhost", description="Hostname")
    USERS_API_PORT: int = Field(default=8080, description="Port")
    USERS_API_TIMEOUT: float = Field(default=10.0, description="Server timeout in seconds")
    USERS_API_URL_PREFIX: str = Field(default="/users", description="Users resource URL prefix")
    USERS_API_DB_TYPE: str = Field(default="mock", description="Database type (supported values: mock)")
    USERS_API_LOG_LEVEL: str = Field(default="INFO", description="Log level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
