"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False

    # Notion content store
    notion_api_key: str = ""
    notion_base_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    notion_products_db_id: str = ""
    notion_events_db_id: str = ""
    notion_blog_db_id: str = ""
    notion_timeout_seconds: float = 10.0

    # Content cache
    cache_ttl_development_seconds: int = 60
    cache_ttl_production_seconds: int = 3600

    # Product suggestions
    suggest_rate_limit_max: int = 5
    suggest_rate_limit_window_seconds: int = 3600
    suggest_min_elapsed_ms: int = 2000

    # Catalog
    default_page_size: int = 12

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        """Whether the service runs with production settings."""
        return self.environment.lower() == "production"

    @property
    def content_cache_ttl(self) -> int:
        """Seconds a content read stays cached."""
        if self.is_production:
            return self.cache_ttl_production_seconds
        return self.cache_ttl_development_seconds


settings = Settings()
