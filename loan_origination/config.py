"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Persistence
    database_url: str = "sqlite:///./loan_origination.db"
    storage_key: str = "loanApplications"

    # Service
    service_name: str = "loan-origination"
    log_level: str = "INFO"


settings = Settings()
