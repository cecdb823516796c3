from typing import Literal, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr, field_validator

IsolationLevel = Literal["READ COMMITTED", "REPEATABLE READ", "SERIALIZABLE"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "RetailPOS API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["local", "dev", "staging", "prod"] = "local"
    DEBUG: bool = False
    CORS_ORIGINS: str = "*"      # CSV or '*'
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = ""

    # DB
    DATABASE_URL: SecretStr
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_ISOLATION_LEVEL: IsolationLevel = "READ COMMITTED"
    DB_CREATE_SCHEMA: bool = True

    # Catalog
    SEARCH_LIMIT: int = 50

    # -------- validators --------
    @field_validator("DATABASE_URL")
    @classmethod
    def _required_secret(cls, v, info):
        if v is None or (hasattr(v, "get_secret_value") and v.get_secret_value() == ""):
            raise ValueError(f"{info.field_name} is required (set it in .env)")
        return v

    @field_validator("DB_POOL_SIZE", "DB_POOL_TIMEOUT", "SEARCH_LIMIT")
    @classmethod
    def _positive(cls, v: int, info):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def _non_negative(cls, v: int, info):
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def _normalize_prefix(cls, v: str) -> str:
        v = (v or "").strip().strip("/")
        return f"/{v}" if v else ""

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return ["*"] if self.CORS_ORIGINS.strip() == "*" else [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
