from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = False
    
    # Application
    app_name: str = "URL Shortener Microservice"
    app_version: str = "1.0.0"
    
    # Server (PORT env var overrides the listen port)
    host: str = "0.0.0.0"
    port: int = 3000
    
    # Hostname resolution
    resolver_backend: str = "system"  # Options: "system", "static"
    resolver_timeout: float = 5.0  # Seconds before a DNS lookup counts as failed
    resolver_static_hosts: List[str] = ["localhost"]  # Only used by "static"
    
    # Static assets and HTML views (relative to the working directory)
    public_dir: str = "public"
    views_dir: str = "views"
    
    # CORS
    cors_origins: List[str] = ["*"]
    
    # Logging
    log_level: str = "INFO"
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
