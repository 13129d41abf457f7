# icecube_api/config/settings.py
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Banco principal (PostgreSQL)
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "icecube"
    db_user: str = "postgres"
    db_password: str = "postgres"

    # URL completa; quando definida ignora os campos acima (ex.: "sqlite://")
    db_url: str | None = None

    environment: str = "development"
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    app_prefix: str = ""
    cors_origins_raw: str = "http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("db_host", "db_name", "db_user", "db_password", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("app_prefix", mode="after")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)

        return f"postgresql+psycopg2://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_raw.split(",") if o.strip()]


settings = Settings()
