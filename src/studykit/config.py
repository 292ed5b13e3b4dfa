"""
Application Configuration
This module centralizes all configuration for the studykit snippets.
It uses Pydantic's BaseSettings to load settings from environment variables
and a .env file, providing validation and type hints.
"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_DIRECTORY = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Settings loaded from the environment and the .env file.

    Attributes:
        app_env (str): Runtime environment (e.g. 'dev', 'prod').
        log_level (str): Logging level.
        log_json (bool): Whether logs are serialized as JSON.
        mongodb_* : Connection and collection names of the mflix sample database.
        worker_result_timeout (float): Seconds the column split waits for its children.
    """

    app_env: str = "prod"
    log_level: str = "INFO"
    log_json: bool = False

    # MongoDB Configuration
    mongodb_uri: str = "localhost"
    mongodb_port: int = 27017
    mongodb_username: str = "root"
    mongodb_password: str = "example"
    mongodb_db_name: str = "sample_mflix"
    mongodb_users_collection: str = "users"
    mongodb_movies_collection: str = "movies"
    mongodb_comments_collection: str = "comments"
    mongodb_timeout_ms: int = 3000

    # Child process workers
    worker_result_timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="STUDYKIT__",
        env_nested_delimiter="__",
        env_file=PROJECT_DIRECTORY / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single settings instance shared by the whole package
settings = Settings()
