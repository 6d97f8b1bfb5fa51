"""
Configuration management for ShowGraph
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream TVmaze API
    upstream_base_url: str = "https://api.tvmaze.com"
    upstream_timeout: float = 30.0  # seconds, applies to each upstream call
    schedule_date: str = "2023-01-01"  # date passed to /schedule/web

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Logging: DEBUG also turns on FastAPI debug mode
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "SHOWGRAPH_"
        case_sensitive = False

    @property
    def debug(self) -> bool:
        return self.log_level.upper() == "DEBUG"


# Global settings instance
settings = Settings()
