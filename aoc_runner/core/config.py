"""
Application Configuration
"""

from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Authentication (the "session" cookie of a logged-in browser)
    SESSION: Optional[str] = None

    # Remote
    AOC_BASE_URL: str = "https://adventofcode.com"
    REQUEST_TIMEOUT: float = 30.0

    # Paths
    BASE_PATH: str = "."
    INPUT_DIR: str = "input"
    RESULTS_DIR: str = "results"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def input_path(self) -> Path:
        return Path(self.BASE_PATH) / self.INPUT_DIR

    @property
    def results_path(self) -> Path:
        return Path(self.BASE_PATH) / self.RESULTS_DIR

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
