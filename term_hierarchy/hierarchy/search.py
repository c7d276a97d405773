# ==============================================
# HierarchicalAttributeSearch
# ==============================================
#
# PURPOSE:
#   Find a term meta value by walking up the term hierarchy:
#   term -> parent -> grandparent -> ... until a level has a value.
#
# OVERRIDE CHECK:
# ---------------
#   With check_override=True every level's override flag
#   ("enable_content_archive_settings" by default) is fetched too.
#   A level with the flag set returns ITS value for the meta key,
#   even when that value is empty. The flag makes that level
#   authoritative for everything below it.
#
# NOT FOUND:
# ----------
#   find() returns None when:
#     - the term's taxonomy is not hierarchical (no query issued)
#     - the term has no parent (no query issued)
#     - the chain query failed or returned nothing
#     - no level had a value or a set override flag
#
# ==============================================

import logging
from typing import List, Optional, Sequence

from term_hierarchy.config import DEFAULT_OVERRIDE_META_KEY
from term_hierarchy.errors import PreconditionViolation
from term_hierarchy.models import AncestorRecord, Term
from .ancestor_chain import AncestorChainResolver

logger = logging.getLogger(__name__)

# Values a flag column holds when the checkbox is off
_FALSY_FLAGS = frozenset({"", "0"})


def has_parent(term: Term) -> bool:
    """Checks if the term has a parent."""
    return term.has_parent


def is_flag_set(value: Optional[str]) -> bool:
    return value is not None and value not in _FALSY_FLAGS


class HierarchicalAttributeSearch:
    def __init__(
        self,
        resolver: AncestorChainResolver,
        registry,
        override_meta_key: str = DEFAULT_OVERRIDE_META_KEY
    ):
        self.resolver = resolver
        self.registry = registry
        self.override_meta_key = override_meta_key

    def get_hierarchical_metadata(self, term: Term, meta_keys: Sequence[str]) -> List[AncestorRecord]:
        """
        Get the term's ancestor chain with the given meta values attached.

        Returns [] without querying when the taxonomy is flat or the
        term is a root.
        """
        if term is None:
            raise PreconditionViolation("term is required")

        if not self.registry.is_hierarchical(term.taxonomy):
            logger.debug("Taxonomy '%s' is not hierarchical; skipping term %s",
                         term.taxonomy, term.term_id)
            return []

        if not has_parent(term):
            logger.debug("Term %s has no parent; skipping", term.term_id)
            return []

        return self.resolver.resolve(term.term_id, meta_keys)

    def find(self, term: Term, meta_key: str, check_override: bool = False) -> Optional[str]:
        """
        Get the meta value for the term or the closest ancestor that has one.

        Args:
            term: The term to start from
            meta_key: Meta key of the value to retrieve
            check_override: When True, a level whose override flag is set
                returns its own value for meta_key, empty or not

        Returns:
            The value, or None when not found
        """
        if not isinstance(meta_key, str) or not meta_key:
            raise PreconditionViolation(f"meta_key must be a non-empty string, got {meta_key!r}")

        meta_keys = [meta_key]
        if check_override:
            meta_keys.append(self.override_meta_key)

        for ancestor in self.get_hierarchical_metadata(term, meta_keys):
            if check_override and is_flag_set(ancestor.get(self.override_meta_key)):
                logger.debug("Override set at term %s for '%s'", ancestor.term_id, meta_key)
                return ancestor.get(meta_key) or ""

            if ancestor.has_value(meta_key):
                return ancestor.get(meta_key)

        return None
