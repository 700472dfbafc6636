"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./bonus_gateway.db"

    # Service
    service_name: str = "bonus-gateway"
    log_level: str = "INFO"

    # Calculation policy
    nnm_target_tripled: bool = False  # Triple the grade NNM figure when deriving targets

    # History
    history_page_size: int = 20


settings = Settings()
