"""Application configuration management."""

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # API Configuration
    api_title: str = "Clarity Sentiment Analyzer API"
    api_version: str = "1.0.0"
    api_description: str = (
        "Lexicon-based sentiment analysis, keyword extraction and word cloud layout for free-text comments"
    )
    api_prefix: str = "/api/v1"

    # Analysis Configuration
    default_model_id: str = "pattern-local"
    analysis_workers: int = 4
    parallel_threshold: int = 64  # batches smaller than this are classified sequentially
    cache_ttl_seconds: int = 3600  # 1 hour, time to live for per-comment sentiment results
    analysis_ttl_seconds: int = 86400  # how long finished analyses stay retrievable by job id
    cache_max_entries: int = 50000
    analysis_max_entries: int = 1000

    # Word Cloud Configuration
    wordcloud_width: int = 800
    wordcloud_height: int = 400
    wordcloud_max_words: int = 100
    wordcloud_rotate_ratio: float = 0.25
    wordcloud_seed: int = 42

    # Development Configuration
    debug: bool = False
    log_level: str = "INFO"

    model_config = ConfigDict(env_file=".env", env_file_encoding="utf-8")


# Global settings instance
settings = Settings()
