from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Scenario Automation API'
    VERSION: str = '1.0.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('scenario_automation_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    JWT_EXPIRATION_HOURS: int = 24

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Server-Sent Events
    SSE_HEARTBEAT_INTERVAL_SECONDS: float = 30.0
    SSE_SUBSCRIBER_BUFFER_SIZE: int = 100  # Events buffered per client before it counts as dead
    SSE_SUBSCRIBER_TIMEOUT_SECONDS: Optional[float] = None  # None = keep the stream open forever

    @property
    def JWT_EXPIRATION_MS(self) -> int:
        return self.JWT_EXPIRATION_HOURS * 60 * 60 * 1000


settings = Settings()  # type: ignore
