"""
Configuration settings for Microblog Graph
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings"""

    # Application
    APP_NAME: str = "Microblog Graph"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        env_prefix = "MICROBLOG_GRAPH_"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
