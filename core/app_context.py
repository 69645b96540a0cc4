from dataclasses import dataclass

from core.config_loader import AppConfig
from core.matcher.service import MatchingService
from database.database import init_engine


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    DB access inside the matching service goes through job_uow(), which uses
    the engine bound here.
    """
    config: AppConfig
    matching_service: MatchingService

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance (engine bound, no session open)
        """
        init_engine(config.database.url)

        return cls(
            config=config,
            matching_service=MatchingService(config.matching),
        )
