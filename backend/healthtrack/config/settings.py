"""
Configuration Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # App info
    app_name: str = "HealthTrack API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Bearer token verification (tokens are issued by the identity provider)
    secret_key: str = "your-secret-key-change-this-in-production"
    algorithm: str = "HS256"
    roles_claim: str = "roles"

    # Storage
    storage_type: str = "memory"  # memory, local
    local_storage_path: str = "./data"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
    ]

    # Logging configuration
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file_path: str = "./logs/healthtrack.log"
    log_file_enabled: bool = True
    log_console_enabled: bool = True
    log_json_format: bool = True  # JSON format for files, human-readable for console
    log_api_requests: bool = True  # Log all API requests/responses

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
