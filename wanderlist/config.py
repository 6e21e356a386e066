"""
Configuration management for the travel planner.
Defaults match a local MongoDB and the fixed destination catalog.
"""
from pydantic_settings import BaseSettings


DEFAULT_DESTINATIONS: dict[str, str] = {
    "Inca Trail to Machu Picchu": "/inca",
    "Annapurna Circuit": "/annapurna",
    "Bali Island": "/bali",
    "Santorini Island": "/santorini",
    "Paris": "/paris",
    "Rome": "/rome",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database Configuration
    mongo_url: str = "mongodb://127.0.0.1:27017"
    mongo_db: str = "myDB"
    users_collection: str = "users"
    mongo_timeout_ms: int = 5000
    
    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    
    # Session Configuration
    session_secret: str = "change-me-wanderlist-secret"
    session_cookie: str = "wanderlist.sid"
    session_max_age: int = 24 * 60 * 60
    
    # Destination catalog (display name -> page route), declared order is kept
    destinations: dict[str, str] = dict(DEFAULT_DESTINATIONS)
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
