"""
Configuration settings for the Weather Station service
"""

from pydantic_settings import BaseSettings
import os

DEFAULT_TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

class Settings(BaseSettings):
    """Application settings"""

    # Database
    db_path: str = "./data/weather-station.db"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8367
    debug: bool = False

    # Rendering
    templates_dir: str = DEFAULT_TEMPLATES_DIR

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

# Global settings instance
settings = Settings()
