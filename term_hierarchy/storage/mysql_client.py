# ==============================================
# MySQLClient
# ==============================================
#
# PURPOSE:
#   Manages the MySQL connection and the read queries issued
#   against the term tables.
#
# WHY THIS CLASS EXISTS:
#   The search needs a store handle it can be given explicitly
#   rather than reaching for a process-wide database global.
#   This class is that handle: the host owns its lifecycle, the
#   search components only call fetch_all / fetch_one on it.
#
# CLASS: MySQLClient
# ------------------
#   Stateful — holds connection to MySQL. Never writes.
#
#   Constructor:
#   ------------
#   - __init__(host, port, user, password, database, charset, connect_timeout)
#       Store connection params. Don't connect yet.
#   - from_config(MySQLConfig) (classmethod)
#
#   Methods:
#   --------
#   - connect() -> None
#   - disconnect() -> None
#   - is_connected -> bool
#   - fetch_all(query: str, params: tuple = None) -> list[dict]
#       Execute SELECT and return rows as dicts.
#   - fetch_one(query: str, params: tuple = None) -> dict | None
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MySQLClient(...) as db:` usage.
#
# ==============================================

import logging
from typing import Any, Optional, cast

import pymysql
import pymysql.cursors

from term_hierarchy.config import MySQLConfig
from term_hierarchy.errors import StoreNotConnectedError

logger = logging.getLogger(__name__)


class MySQLClient:
    def __init__(self, host, port, user, password, database, charset="utf8mb4", connect_timeout=10):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.charset = charset
        self.connect_timeout = connect_timeout
        self.connection = None

    @classmethod
    def from_config(cls, config: MySQLConfig) -> "MySQLClient":
        return cls(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            charset=config.charset,
            connect_timeout=config.connect_timeout,
        )

    @property
    def is_connected(self) -> bool:
        return self.connection is not None

    def connect(self) -> None:
        # Establish connection to MySQL against an existing database
        self.connection = pymysql.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
            charset=self.charset,
            connect_timeout=self.connect_timeout,
            autocommit=True,
        )
        logger.debug("Connected to MySQL %s:%s/%s", self.host, self.port, self.database)

    def disconnect(self) -> None:
        # Close connection cleanly
        if self.connection:
            self.connection.close()
            self.connection = None
            logger.debug("Disconnected from MySQL")

    def fetch_all(self, query: str, params: tuple | None = None) -> list[dict]:
        # Execute SELECT and return rows as dicts
        if self.connection is None:
            raise StoreNotConnectedError("Not connected to MySQL")
        with self.connection.cursor(pymysql.cursors.DictCursor) as cursor:
            if params is not None:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cast(list[dict[str, Any]], list(cursor.fetchall()))

    def fetch_one(self, query: str, params: tuple | None = None) -> Optional[dict]:
        rows = self.fetch_all(query, params)
        return rows[0] if rows else None

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
