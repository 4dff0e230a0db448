from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from strategies import DEFAULT_STRATEGIES, Strategy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TOPK_WORDS_")

    top_k: int = Field(10, ge=0)
    test_count: int = Field(5, ge=1)
    max_workers: int | None = Field(None, ge=1)
    strategies: list[Strategy] = list(DEFAULT_STRATEGIES)
    log_level: str = "INFO"
    log_format: str = "%(levelname)s [%(threadName)s] %(message)s"
