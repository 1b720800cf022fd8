"""
Configuration settings for the DriverCosts Backend.

This module handles application configuration using Pydantic settings.
"""

import json
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode
from sqlalchemy.engine import URL
from typing import Annotated, List, Optional


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "DriverCosts Backend"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"
    # Comma-separated (a,b) or a JSON list
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    # Database Configuration
    # Either a single URI or the discrete DB_* variables
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_database: str = "drivercosts"
    db_port: int = 3306
    db_ssl: bool = True
    db_ssl_verify: bool = False
    db_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 5
    db_create_tables: bool = True

    # Firebase (token verification)
    firebase_service_account: Optional[str] = None
    firebase_credentials_file: Optional[str] = None
    firebase_check_revoked: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_mysql_driver(cls, v):
        """Hosting providers hand out mysql:// URIs; the engine needs the aiomysql driver."""
        if isinstance(v, str) and v.startswith("mysql://"):
            return v.replace("mysql://", "mysql+aiomysql://", 1)
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def sqlalchemy_url(self):
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )


settings = Settings()
