# ==============================================
# TermMetaLookup — Orchestrator
# ==============================================
#
# PURPOSE:
#   Wire configuration, the MySQL client, the term store and the
#   hierarchical search together for host applications that just
#   want "the headline for term 26 or its nearest ancestor".
#
# USES:
# -----
#   - config.py        → AppConfig
#   - storage/         → MySQLClient, TermStore, TaxonomyRegistry
#   - hierarchy/       → AncestorChainResolver, HierarchicalAttributeSearch
#
# USAGE:
# ------
#   with TermMetaLookup() as lookup:
#       headline = lookup.find_meta(26, "category", "headline", check_override=True)
#
# ==============================================

from typing import List, Optional, Sequence

from term_hierarchy.config import AppConfig, get_config
from term_hierarchy.hierarchy import AncestorChainResolver, HierarchicalAttributeSearch
from term_hierarchy.models import AncestorRecord, Term
from term_hierarchy.storage import MySQLClient, TermStore, TaxonomyRegistry


class TermMetaLookup:
    """
    High-level entry point over a single MySQL connection.
    The client is created here but only connected on connect() / __enter__.
    """

    def __init__(self, config: Optional[AppConfig] = None, client=None):
        self._config = config or get_config()
        self._client = client or MySQLClient.from_config(self._config.mysql)

        self.terms = TermStore(self._client, self._config.tables)
        self.registry = TaxonomyRegistry.from_config(self._config.search)
        self.resolver = AncestorChainResolver(
            self._client,
            self._config.tables,
            strategy=self._config.search.chain_strategy
        )
        self.search = HierarchicalAttributeSearch(
            self.resolver,
            self.registry,
            override_meta_key=self._config.search.override_meta_key
        )

    def connect(self) -> None:
        self._client.connect()

    def close(self) -> None:
        self._client.disconnect()

    def get_term(self, term_id: int, taxonomy: Optional[str] = None) -> Term:
        return self.terms.get_term(term_id, taxonomy)

    def find_meta(
        self,
        term_id: int,
        taxonomy: str,
        meta_key: str,
        check_override: bool = False
    ) -> Optional[str]:
        """
        Fetch the term, then search it and its ancestors for meta_key.

        Raises:
            TermNotFoundError: If the term does not exist in the taxonomy
        """
        term = self.terms.get_term(term_id, taxonomy)
        return self.search.find(term, meta_key, check_override=check_override)

    def ancestor_chain(self, term_id: int, meta_keys: Sequence[str]) -> List[AncestorRecord]:
        return self.resolver.resolve(term_id, meta_keys)

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
