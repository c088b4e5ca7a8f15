import os
from typing import TYPE_CHECKING, Optional
from dataclasses import dataclass, field

import yaml

if TYPE_CHECKING:
    from moderation_api.web.app import Application

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000
    request_timeout: float = 30.0
    log_level: str = "INFO"


@dataclass
class DatabaseConfig:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    database: str = "moderation"
    url: Optional[str] = None
    # disable | insecure | verify
    ssl: str = "insecure"
    statement_timeout: float = 15.0
    echo: bool = False


@dataclass
class QueryConfig:
    enabled: bool = False


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    query: QueryConfig = field(default_factory=QueryConfig)


def apply_env(config: Config, environ=None) -> Config:
    environ = os.environ if environ is None else environ

    if database_url := environ.get("DATABASE_URL"):
        config.database.url = database_url
    if port := environ.get("PORT"):
        config.server.port = int(port)
    if enabled := environ.get("ENABLE_QUERY_ENDPOINT"):
        config.query.enabled = enabled.strip().lower() in TRUTHY

    return config


def config_from_yaml(config_path: Optional[str]) -> Config:
    raw_config = {}
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

    return Config(server=ServerConfig(**raw_config.get("server", {})),
                  database=DatabaseConfig(**raw_config.get("database", {})),
                  query=QueryConfig(**raw_config.get("query", {})))


def setup_config(app: "Application", config_path: Optional[str] = None,
                 config: Optional[Config] = None) -> None:
    if config is None:
        config = apply_env(config_from_yaml(config_path))

    app.config = config
