from typing import List, Optional

from pydantic import field_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = "development"
    host: str = "localhost"
    db_username: str = "postgres"
    db_password: SecretStr = SecretStr("postgres")
    database: str = "finances"
    port: int = 5432
    # Overrides the PostgreSQL settings above when set (e.g. sqlite+aiosqlite for local runs)
    database_url: Optional[str] = None
    create_schema_on_startup: bool = False

    secret_key: SecretStr = SecretStr("change-me")
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    password_schemes: List[str] = ["pbkdf2_sha256"]

    mail_service_url: Optional[str] = None
    mail_sender: str = "no-reply@finances.local"
    frontend_url: str = "http://localhost:3000"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("mail_service_url", "frontend_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"postgresql+psycopg://{self.db_username}:{self.db_password.get_secret_value()}@{self.host}:{self.port}/{self.database}"

settings = Settings()
