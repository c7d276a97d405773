# ==============================================
# HIERARCHY (Ancestor walk + meta search)
# ==============================================
#
# Modules:
# --------
# - sql.py             → Builds the single ancestor chain SELECT
# - ancestor_chain.py  → Runs it and shapes rows into AncestorRecords
# - search.py          → Applies the stop rule to find a meta value
#
# ==============================================

from .ancestor_chain import AncestorChainResolver
from .search import HierarchicalAttributeSearch, has_parent, is_flag_set
from .sql import build_ancestor_chain_query, build_query_params

__all__ = [
    "AncestorChainResolver",
    "HierarchicalAttributeSearch",
    "has_parent",
    "is_flag_set",
    "build_ancestor_chain_query",
    "build_query_params"
]
