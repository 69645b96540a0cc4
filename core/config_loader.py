import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str


class MatchingConfig(BaseModel):
    """
    Configuration for the MatchingService.

    Score weights and the qualifying threshold are fixed in code and are
    deliberately not configurable here.
    """
    max_workers: int = Field(default=8, ge=1)  # Upper bound on concurrent scoring threads
    log_top_n: int = Field(default=5, ge=0)  # Matches echoed to the log after a run


class QueueConfig(BaseModel):
    """
    Configuration for background matching runs.

    When use_async_queue is set and Redis is reachable, runs are enqueued on an
    rq queue; otherwise they run on a background thread in-process.
    """
    use_async_queue: bool = True
    redis_url: Optional[str] = None  # Override default Redis URL
    name: str = "matching"
    job_timeout_seconds: int = 600
    retry_max: int = 2  # rq retries for a failed run


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    database: DatabaseConfig
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    queue: QueueConfig = Field(default_factory=QueueConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


ENV_OVERRIDES = (
    ("DATABASE_URL", "database", "url"),
    ("REDIS_URL", "queue", "redis_url"),
    ("LOG_LEVEL", "logging", "level"),
)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # Running from a subdirectory: fall back to the config.yaml at the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    for env_var, section, key in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if value:
            if not data.get(section):
                data[section] = {}
            data[section][key] = value

    return AppConfig(**data)
