# ==============================================
# TermStore
# ==============================================
#
# PURPOSE:
#   Fetch single terms (term row + taxonomy row) by ID or slug.
#   This is the "previously-fetched entity" the search starts from.
#
# CLASS: TermStore
# ----------------
#   - __init__(client: MySQLClient, tables: TableConfig)
#   - get_term(term_id: int, taxonomy: str | None = None) -> Term
#   - get_term_by_slug(slug: str, taxonomy: str) -> Term
#
#   Both raise TermNotFoundError when no row matches.
#
# ==============================================

import logging
from typing import Optional

from term_hierarchy.config import TableConfig
from term_hierarchy.errors import PreconditionViolation, TermNotFoundError
from term_hierarchy.models import Term

logger = logging.getLogger(__name__)


class TermStore:
    def __init__(self, client, tables: TableConfig):
        self.client = client
        self.tables = tables

    def _select(self) -> str:
        return (
            "SELECT t.term_id, t.name, t.slug, tt.taxonomy, tt.parent "
            f"FROM {self.tables.terms} AS t "
            f"INNER JOIN {self.tables.term_taxonomy} AS tt ON tt.term_id = t.term_id "
        )

    def get_term(self, term_id: int, taxonomy: Optional[str] = None) -> Term:
        """
        Fetch a term by ID.

        Args:
            term_id: Positive term ID
            taxonomy: Restrict to this taxonomy. When omitted and the term
                sits in several taxonomies, the lowest term_taxonomy row wins.

        Returns:
            The Term

        Raises:
            PreconditionViolation: If term_id is not a positive integer
            TermNotFoundError: If no row matches
        """
        if isinstance(term_id, bool) or not isinstance(term_id, int) or term_id <= 0:
            raise PreconditionViolation(f"term_id must be a positive integer, got {term_id!r}")

        query = self._select() + "WHERE t.term_id = %s"
        params: tuple = (term_id,)
        if taxonomy:
            query += " AND tt.taxonomy = %s"
            params += (taxonomy,)
        query += " ORDER BY tt.term_taxonomy_id LIMIT 1"

        row = self.client.fetch_one(query, params)
        if row is None:
            raise TermNotFoundError(term_id, taxonomy)
        return Term.from_row(row)

    def get_term_by_slug(self, slug: str, taxonomy: str) -> Term:
        if not slug or not taxonomy:
            raise PreconditionViolation("slug and taxonomy are required")

        query = self._select() + "WHERE t.slug = %s AND tt.taxonomy = %s LIMIT 1"
        row = self.client.fetch_one(query, (slug, taxonomy))
        if row is None:
            raise TermNotFoundError(slug, taxonomy)
        return Term.from_row(row)
