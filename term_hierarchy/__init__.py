# ==============================================
# Term Hierarchical Search
# ==============================================
#
# Find a term meta value within the term's hierarchy: start at the
# term and walk up parent -> grandparent -> ... N levels, fetching
# every level's record and meta in one SQL query.
#
# Package Structure:
#
# term_hierarchy/
# ├── models/        # Term, AncestorRecord
# ├── storage/       # MySQL client, term fetch, taxonomy registry
# ├── hierarchy/     # Ancestor chain SQL, resolver, search
# ├── config.py      # Configuration management
# ├── errors.py      # Exception taxonomy
# ├── lookup.py      # Orchestrator class
# └── cli.py         # Command line entry point
#
# ==============================================

from .errors import (
    TermHierarchyError,
    ConfigError,
    PreconditionViolation,
    TermNotFoundError,
    StoreNotConnectedError,
)
from .models import Term, AncestorRecord
from .hierarchy import AncestorChainResolver, HierarchicalAttributeSearch

__version__ = "1.0.0"

__all__ = [
    "TermHierarchyError",
    "ConfigError",
    "PreconditionViolation",
    "TermNotFoundError",
    "StoreNotConnectedError",
    "Term",
    "AncestorRecord",
    "AncestorChainResolver",
    "HierarchicalAttributeSearch",
]
