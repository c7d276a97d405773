# ==============================================
# Term Models (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes for the rows this package reads: the term itself
#   and the per-level records of an ancestor chain.
#
# CLASSES:
# --------
# - Term (dataclass)
#     A node in a taxonomy, as fetched from the term tables.
#
#     Attributes:
#     -----------
#     - term_id: int         → Primary key of the term
#     - taxonomy: str        → Name of the taxonomy the term belongs to
#     - parent: int          → Parent term ID, 0 for a root term
#     - name: str            → Display name
#     - slug: str            → URL slug
#
# - AncestorRecord (dataclass)
#     One level of an ancestor chain, produced fresh per resolve call.
#
#     Attributes:
#     -----------
#     - term_id: int                       → The term at this level
#     - parent_id: int                     → Its parent (0 at the root)
#     - values: dict[str, str | None]      → Requested meta key → meta value
#
#     Methods:
#     --------
#     - get(meta_key) -> str | None
#     - has_value(meta_key) -> bool        → Non-empty value present?
#     - is_root -> bool                    → parent_id <= 0
#
# ==============================================

from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class Term:
    """A term row joined with its taxonomy row."""

    term_id: int
    taxonomy: str
    parent: int = 0
    name: str = ""
    slug: str = ""

    @property
    def has_parent(self) -> bool:
        return self.parent > 0

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Term":
        """Build a Term from a DictCursor row."""
        return cls(
            term_id=int(row["term_id"]),
            taxonomy=row["taxonomy"],
            parent=int(row.get("parent") or 0),
            name=row.get("name") or "",
            slug=row.get("slug") or "",
        )


@dataclass
class AncestorRecord:
    """
    One level in a term's ancestor chain.

    Every record of a single resolve call carries the same set of keys
    in `values`; a key whose meta row is missing maps to None.
    """

    term_id: int
    parent_id: int
    values: Dict[str, Optional[str]] = field(default_factory=dict)

    def get(self, meta_key: str) -> Optional[str]:
        return self.values.get(meta_key)

    def has_value(self, meta_key: str) -> bool:
        """True when the key resolved to a non-empty string."""
        return bool(self.values.get(meta_key))

    @property
    def is_root(self) -> bool:
        return self.parent_id <= 0
