"""Runtime settings and logging setup."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent
CONTENT_DIR = PACKAGE_DIR / "content"

DEFAULT_DATA_DIR = Path.home() / ".fluttercourse"
DEFAULT_MANIFEST_PATH = CONTENT_DIR / "course.yaml"
DEFAULT_LESSONS_DIR = CONTENT_DIR / "lessons"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings, overridable with FLUTTERCOURSE_* variables."""

    model_config = SettingsConfigDict(env_prefix="FLUTTERCOURSE_")

    # Learner data
    data_dir: Path = DEFAULT_DATA_DIR
    progress_filename: str = "progress.json"

    # Course content
    manifest_path: Path = DEFAULT_MANIFEST_PATH
    lessons_dir: Optional[Path] = None  # default: "lessons" next to the manifest

    # Logging
    log_level: str = "INFO"

    @property
    def progress_path(self) -> Path:
        return self.data_dir.expanduser() / self.progress_filename


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = "INFO"):
    """Configure root logging with the project format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
