from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    MASTER_DB_NAME: str = "jewellery_master"

    # overrides the URL built from the POSTGRES_* values
    MASTER_DATABASE_URL: Optional[str] = None

    # {project_id} is the tenant database name
    TENANT_DB_URL_TEMPLATE: Optional[str] = None
    TENANT_CREATE_TABLES: bool = True

    SESSION_FILE: str = ".jewellery_admin_session.json"
    SESSION_KEY: str = "jewellery_admin_session"
    SESSION_WINDOW_HOURS: float = 12

    SECRET_KEY: str = "CHANGE_ME"
    ALGORITHM: str = "HS256"

    # plaintext | bcrypt
    SHOP_PASSWORD_SCHEME: str = "plaintext"

    IMAGE_MAX_SIZE: int = 900
    IMAGE_QUALITY: float = 0.75

    LOG_LEVEL: str = "INFO"
    ENV: str = "local"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def MASTER_DB_URL(self) -> str:
        if self.MASTER_DATABASE_URL:
            return self.MASTER_DATABASE_URL
        return (
            f"postgresql+psycopg2://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}"
            f"/{self.MASTER_DB_NAME}"
        )

    @property
    def TENANT_DB_URL(self) -> str:
        if self.TENANT_DB_URL_TEMPLATE:
            return self.TENANT_DB_URL_TEMPLATE
        return (
            f"postgresql+psycopg2://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}"
            "/{project_id}"
        )

    @property
    def SESSION_WINDOW_SECONDS(self) -> float:
        return self.SESSION_WINDOW_HOURS * 60 * 60


settings = Settings()
