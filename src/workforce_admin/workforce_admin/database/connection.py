from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlparse

import mysql.connector

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_settings(cls, url: Optional[str], key: Optional[str]) -> "DBConfig":
        """Build the connection config from the endpoint URL and access key.

        ``url`` looks like ``mysql://user@host:3306/workforce``; ``key`` is the
        database password. Both are required.
        """

        if not url or not key:
            raise ConfigurationError("Missing data store settings: WORKFORCE_DB_URL and WORKFORCE_DB_KEY are required")

        parsed = urlparse(url)
        if parsed.scheme not in {"mysql", "mysql+mysqlconnector"}:
            raise ConfigurationError(f"Unsupported data store URL scheme: {parsed.scheme!r}")

        database = parsed.path.lstrip("/")
        if not parsed.hostname or not database:
            raise ConfigurationError("WORKFORCE_DB_URL must name a host and a database")

        return cls(
            host=parsed.hostname,
            port=int(parsed.port or 3306),
            user=unquote(parsed.username or "root"),
            password=key,
            database=database,
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: one short-lived connection per operation.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        kwargs = dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
        )
        if with_database:
            kwargs["database"] = self._config.database
        return mysql.connector.connect(**kwargs)
