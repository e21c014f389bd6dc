"""
Project-wide configuration using Pydantic Settings.
API settings, retry policy, output paths and log sinks live here.
"""
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings


ROOT_DIR = Path(__file__).resolve().parent.parent


class APIConfig(BaseSettings):
    base_url: str = "https://api.openf1.org/v1"
    timeout: int = 30
    max_retries: int = Field(default=4, ge=0)  # retries on HTTP 429 only
    retry_base_delay: float = 2.0  # seconds, scaled linearly per attempt
    race_pause: float = 0.8  # seconds between races
    default_years: list[int] = [2023, 2024]

    model_config = {"env_prefix": "OPENF1_"}


class PathConfig(BaseSettings):
    root: Path = ROOT_DIR
    data: Path = ROOT_DIR / "data"
    logs: Path = ROOT_DIR / "logs"
    output: Path = ROOT_DIR / "data" / "races-api.json"

    def setup(self) -> None:
        """Create all directories if they don't exist."""
        for field_name in ("data", "logs"):
            getattr(self, field_name).mkdir(parents=True, exist_ok=True)

    model_config = {"env_prefix": "F1_PATH_"}


class LogConfig(BaseSettings):
    console_level: str = "INFO"
    file_level: str = "DEBUG"
    rotation: str = "1 day"
    retention: str = "7 days"

    model_config = {"env_prefix": "F1_LOG_"}


class Config:
    """Unified project configuration."""

    api: APIConfig = APIConfig()
    paths: PathConfig = PathConfig()
    log: LogConfig = LogConfig()


# Singleton instance
cfg = Config()
