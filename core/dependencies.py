from functools import lru_cache

from core.config import Settings
from core.gemini import GeminiBackend
from services.agent_service import AgentService


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_agent_service() -> AgentService:
    settings = get_settings()
    return AgentService(
        GeminiBackend.from_settings(settings),
        max_concurrency=settings.max_concurrency,
    )
