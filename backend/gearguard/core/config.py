"""
Application settings, read from the environment and an optional ``.env``.

``DATABASE_URL`` wins over the individual ``POSTGRES_*`` values; plain
``postgres://`` URLs are rewritten to the psycopg 3 driver.
"""

import secrets
import warnings
from typing import Annotated, Any, Literal

from pydantic import (
    AnyUrl,
    BeforeValidator,
    EmailStr,
    HttpUrl,
    computed_field,
    model_validator,
)
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

PSYCOPG_SCHEME = "postgresql+psycopg"
INSECURE_DEFAULT = "changethis"


def split_origins(value: Any) -> list[str] | str:
    """Accept ``a,b`` as well as a JSON list for the CORS origin setting."""
    if isinstance(value, str) and not value.startswith("["):
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    if isinstance(value, (list, str)):
        return value
    raise ValueError(value)


def normalize_database_url(url: str) -> str:
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return f"{PSYCOPG_SCHEME}://{url[len(prefix):]}"
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # API
    PROJECT_NAME: str = "GearGuard"
    API_STR: str = "/api"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    FRONTEND_HOST: str = "http://localhost:3000"
    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(split_origins)
    ] = []

    # Auth: tokens live seven days, no refresh
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 7 * 24 * 60
    FIRST_SUPERUSER: EmailStr | None = None
    FIRST_SUPERUSER_PASSWORD: str | None = None

    # Database
    DATABASE_URL: str | None = None
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "gearguard"
    CREATE_TABLES_ON_STARTUP: bool = True

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    LOG_SQL: bool = False
    SENTRY_DSN: HttpUrl | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        origins = [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]
        return [*origins, self.FRONTEND_HOST]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return normalize_database_url(self.DATABASE_URL)
        return str(
            MultiHostUrl.build(
                scheme=PSYCOPG_SCHEME,
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    @model_validator(mode="after")
    def _refuse_placeholder_secrets(self) -> Self:
        for name in ("SECRET_KEY", "POSTGRES_PASSWORD", "FIRST_SUPERUSER_PASSWORD"):
            if getattr(self, name) != INSECURE_DEFAULT:
                continue
            message = f'{name} is still "{INSECURE_DEFAULT}"; set a real value.'
            if self.ENVIRONMENT != "local":
                raise ValueError(message)
            warnings.warn(message, stacklevel=1)
        return self


settings = Settings()  # type: ignore
