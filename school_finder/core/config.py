from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from school_finder.core.errors import ConfigurationError


"""Configuration settings using pydantic BaseSettings. - config"""


class Settings(BaseSettings):
    """Application settings.

    - Reads configuration from environment variables and a local .env file
    - Fields: database_url, the Railway-style MYSQL* connection parameters,
      host, port, log_level, db_echo
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Full SQLAlchemy async URL, e.g. mysql+aiomysql://user:pw@host:3306/db.
    # Takes precedence over the MYSQL* parameters below.
    database_url: Optional[str] = None

    # Connection parameters injected by Railway for a MySQL service
    mysqlhost: Optional[str] = None
    mysqluser: Optional[str] = None
    mysqlpassword: Optional[str] = None
    mysqldatabase: Optional[str] = None
    mysqlport: int = 3306

    # Bind address and port used by run.py
    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    # Echo SQL statements emitted by SQLAlchemy
    db_echo: bool = False

    def resolve_database_url(self) -> str:
        """Return the store connection URL or raise ConfigurationError. - resolve_database_url"""
        if self.database_url:
            return self.database_url

        missing = [
            name.upper()
            for name in ("mysqlhost", "mysqluser", "mysqldatabase")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                "Database is not configured: set DATABASE_URL or " + ", ".join(missing)
            )

        url = URL.create(
            "mysql+aiomysql",
            username=self.mysqluser,
            password=self.mysqlpassword,
            host=self.mysqlhost,
            port=self.mysqlport,
            database=self.mysqldatabase,
        )
        return url.render_as_string(hide_password=False)


def get_settings() -> Settings:
    """Return a Settings instance for dependency injection. - get_settings"""
    return Settings()
