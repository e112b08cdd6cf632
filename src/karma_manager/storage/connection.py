from __future__ import annotations

from dataclasses import dataclass

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "karma_manager"
    charset: str = "utf8mb4"
    connection_timeout: int = 10

    @classmethod
    def from_dict(cls, raw: dict) -> "DBConfig":
        defaults = cls()
        return cls(
            host=str(raw.get("host") or defaults.host),
            port=int(raw.get("port") or defaults.port),
            user=str(raw.get("user") or defaults.user),
            password=str(raw.get("password") or ""),
            database=str(raw.get("database") or defaults.database),
            charset=str(raw.get("charset") or defaults.charset),
            connection_timeout=int(raw.get("connection_timeout") or defaults.connection_timeout),
        )


class DatabaseConnection:
    """Opens one short-lived connection per store call."""

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        c = self._config
        return mysql.connector.connect(
            host=c.host,
            port=c.port,
            user=c.user,
            password=c.password,
            database=c.database,
            charset=c.charset,
            connection_timeout=c.connection_timeout,
        )
