"""
Configuration management for the profile GraphQL service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    store_backend: str = "memory"  # 'memory', 'redis'
    redis_url: str = "redis://localhost:6379/0"
    redis_max_connections: int = 50
    collection_name: str = "profiles"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    class Config:
        env_file = ".env"
        env_prefix = "PROFILEGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
