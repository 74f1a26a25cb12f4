"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "cs35lproject"
    
    # Logging
    log_level: str = "INFO"
    
    # Catalog
    supported_games: list[str] = ["Minecraft", "Terraria"]
    
    # Fixture data inserted on startup
    seed_dummy_data: bool = False
    dummy_mod_count: int = 5
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
