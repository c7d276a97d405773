# ==============================================
# STORAGE (MySQL term tables)
# ==============================================
#
# This package handles all database access:
# connecting, fetching terms, and knowing which taxonomies
# are hierarchical.
#
# Modules:
# --------
# - mysql_client.py       → MySQL connection and read queries
# - term_store.py         → Fetch a term by ID or slug
# - taxonomy_registry.py  → Which taxonomies support hierarchy
#
# ==============================================

from .mysql_client import MySQLClient
from .term_store import TermStore
from .taxonomy_registry import TaxonomyRegistry

__all__ = [
    "MySQLClient",
    "TermStore",
    "TaxonomyRegistry"
]
