from __future__ import annotations

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import exceptions as ex

load_dotenv()


class AppConfig(BaseSettings):
    """
    (H) All settings are loaded from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    TARGET_SOURCE_PATH: str = "."
    MODEL_FILE: str | None = None
    JAVA_FILE_GLOB: str = "**/*.java"
    EXCLUDED_DIRS: list[str] = [".git", "build", "target", "out", "node_modules"]

    INCLUDE_FRAMEWORK_CATALOG: bool = True
    CHECK_WORKERS: int = 1

    LOG_LEVEL: str = "WARNING"

    def resolve_workers(self, workers: int | None) -> int:
        resolved = self.CHECK_WORKERS if workers is None else workers
        if resolved < 1:
            raise ValueError(ex.WORKERS_POSITIVE)
        return resolved


settings = AppConfig()
