# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - MySQLConfig (dataclass)
#     host: str             (default "localhost")
#     port: int             (default 3306)
#     user: str             (default "root")
#     password: str         (default "root")
#     database: str         (default "wordpress")
#     charset: str          (default "utf8mb4")
#     connect_timeout: int  (default 10)
#
# - TableConfig (dataclass)
#     prefix: str           (default "wp_")
#     terms / term_taxonomy / termmeta  (derived table names)
#
# - SearchConfig (dataclass)
#     override_meta_key: str          (default "enable_content_archive_settings")
#     hierarchical_taxonomies: tuple  (default ("category",))
#     chain_strategy: str             (default "recursive_cte")
#
# - AppConfig (dataclass)
#     mysql: MySQLConfig
#     tables: TableConfig
#     search: SearchConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton so the next get_config() re-reads
#     the environment.
#
# USAGE:
# ------
#   from term_hierarchy.config import get_config
#   config = get_config()
#   print(config.mysql.host)
#   print(config.tables.termmeta)
#
# ==============================================

import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from pathlib import Path

from dotenv import load_dotenv

from term_hierarchy.errors import ConfigError

SESSION_VARIABLE = "session_variable"
RECURSIVE_CTE = "recursive_cte"
CHAIN_STRATEGIES = (SESSION_VARIABLE, RECURSIVE_CTE)

DEFAULT_OVERRIDE_META_KEY = "enable_content_archive_settings"

# Table prefixes are interpolated into SQL, so only identifier characters pass.
_PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_]*$")


@dataclass
class MySQLConfig:
    """MySQL database configuration."""
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = "root"
    database: str = "wordpress"
    charset: str = "utf8mb4"
    connect_timeout: int = 10


@dataclass
class TableConfig:
    """Names of the term tables, derived from the install's table prefix."""
    prefix: str = "wp_"

    def __post_init__(self):
        if not _PREFIX_PATTERN.match(self.prefix):
            raise ConfigError(f"Invalid table prefix: {self.prefix!r}")

    @property
    def terms(self) -> str:
        return f"{self.prefix}terms"

    @property
    def term_taxonomy(self) -> str:
        return f"{self.prefix}term_taxonomy"

    @property
    def termmeta(self) -> str:
        return f"{self.prefix}termmeta"


@dataclass
class SearchConfig:
    """Settings for the hierarchical meta search."""
    override_meta_key: str = DEFAULT_OVERRIDE_META_KEY
    hierarchical_taxonomies: Tuple[str, ...] = ("category",)
    chain_strategy: str = RECURSIVE_CTE

    def __post_init__(self):
        if self.chain_strategy not in CHAIN_STRATEGIES:
            raise ConfigError(
                f"Unknown chain strategy {self.chain_strategy!r}, "
                f"expected one of {', '.join(CHAIN_STRATEGIES)}"
            )
        if not self.override_meta_key:
            raise ConfigError("override_meta_key must not be empty")


@dataclass
class AppConfig:
    """Main application configuration."""
    mysql: MySQLConfig
    tables: TableConfig
    search: SearchConfig


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_list(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigError: If a value is present but invalid
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    # Build MySQL configuration
    mysql_config = MySQLConfig(
        host=os.getenv("MYSQL_HOST", "localhost"),
        port=_parse_int("MYSQL_PORT", "3306"),
        user=os.getenv("MYSQL_USER", "root"),
        password=os.getenv("MYSQL_PASSWORD", "root"),
        database=os.getenv("MYSQL_DATABASE", "wordpress"),
        charset=os.getenv("MYSQL_CHARSET", "utf8mb4"),
        connect_timeout=_parse_int("MYSQL_CONNECT_TIMEOUT", "10")
    )

    table_config = TableConfig(prefix=os.getenv("TABLE_PREFIX", "wp_"))

    search_config = SearchConfig(
        override_meta_key=os.getenv("OVERRIDE_META_KEY", DEFAULT_OVERRIDE_META_KEY),
        hierarchical_taxonomies=_parse_list(os.getenv("HIERARCHICAL_TAXONOMIES", "category")),
        chain_strategy=os.getenv("CHAIN_STRATEGY", RECURSIVE_CTE)
    )

    # Build main application configuration
    _config_instance = AppConfig(
        mysql=mysql_config,
        tables=table_config,
        search=search_config
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
