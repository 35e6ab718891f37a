from pydantic_settings import BaseSettings, SettingsConfigDict

from polymarket_proxy.api.gamma import GAMMA_BASE


class Settings(BaseSettings):
    # Upstream Gamma API
    GAMMA_BASE_URL: str = GAMMA_BASE
    REQUEST_TIMEOUT: float = 15.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
