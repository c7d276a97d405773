# ==============================================
# AncestorChainResolver
# ==============================================
#
# PURPOSE:
#   Given a term ID and meta keys, return the term's ancestor chain
#   (the term itself, its parent, grandparent, ... up to the root)
#   with each requested meta value attached, using ONE query.
#
# WHY THIS CLASS EXISTS:
#   Walking parent links one query per level costs a round trip per
#   level plus one per meta lookup. Here the database does the walk
#   and the joins, and the client only shapes the rows.
#
# CLASS: AncestorChainResolver
# ----------------------------
#   - __init__(client, tables: TableConfig, strategy="recursive_cte")
#   - resolve(term_id: int, meta_keys: Sequence[str]) -> list[AncestorRecord]
#       Empty list means "no chain": zero rows, a failed query, or rows
#       that do not link the term all the way to a root.
#
# ORDERING:
# ---------
#   Rows are re-linked client side by following parent_id from the
#   start term, so the result is leaf → root whatever order the engine
#   returns rows in. Duplicate rows (a term in several taxonomies, or
#   a meta key stored twice) keep their first occurrence.
#
# ==============================================

import logging
from typing import Dict, List, Sequence

import pymysql

from term_hierarchy.config import TableConfig, RECURSIVE_CTE
from term_hierarchy.errors import PreconditionViolation
from term_hierarchy.models import AncestorRecord
from .sql import build_ancestor_chain_query, build_query_params, meta_column

logger = logging.getLogger(__name__)


def _validate(term_id, meta_keys) -> None:
    if isinstance(term_id, bool) or not isinstance(term_id, int) or term_id <= 0:
        raise PreconditionViolation(f"term_id must be a positive integer, got {term_id!r}")
    if isinstance(meta_keys, str) or not meta_keys:
        raise PreconditionViolation("meta_keys must be a non-empty sequence of strings")
    for key in meta_keys:
        if not isinstance(key, str) or not key:
            raise PreconditionViolation(f"Invalid meta key: {key!r}")


def _as_text(value):
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


class AncestorChainResolver:
    def __init__(self, client, tables: TableConfig, strategy: str = RECURSIVE_CTE):
        self.client = client
        self.tables = tables
        self.strategy = strategy

    def resolve(self, term_id: int, meta_keys: Sequence[str]) -> List[AncestorRecord]:
        """
        Fetch the ancestor chain for a term in a single query.

        Args:
            term_id: ID of the term to start from (included as the first record)
            meta_keys: Meta keys to attach to every level, in order

        Returns:
            Records ordered from the term up to its root, or [] when the
            chain could not be resolved

        Raises:
            PreconditionViolation: If term_id or meta_keys break the contract
        """
        _validate(term_id, meta_keys)
        meta_keys = list(meta_keys)

        query = build_ancestor_chain_query(len(meta_keys), self.tables, self.strategy)
        params = build_query_params(term_id, meta_keys)

        try:
            rows = self.client.fetch_all(query, params)
        except pymysql.MySQLError as e:
            logger.warning("Ancestor chain query failed for term %s: %s", term_id, e)
            return []

        if not rows:
            logger.debug("No ancestor chain rows for term %s", term_id)
            return []

        records = [self._to_record(row, meta_keys) for row in rows]
        return self._link(term_id, records)

    @staticmethod
    def _to_record(row: dict, meta_keys: List[str]) -> AncestorRecord:
        values = {
            key: _as_text(row.get(meta_column(position)))
            for position, key in enumerate(meta_keys, start=1)
        }
        return AncestorRecord(
            term_id=int(row["term_id"]),
            parent_id=int(row.get("parent_id") or 0),
            values=values,
        )

    @staticmethod
    def _link(term_id: int, records: List[AncestorRecord]) -> List[AncestorRecord]:
        """
        Order records by following parent links from term_id.

        Returns [] unless the links reach a root: a missing level or a
        cycle means the rows do not describe the whole chain.
        """
        by_id: Dict[int, AncestorRecord] = {}
        for record in records:
            by_id.setdefault(record.term_id, record)

        chain: List[AncestorRecord] = []
        seen = set()
        current = term_id
        while current in by_id:
            if current in seen:
                logger.warning("Parent cycle at term %s in the chain of term %s", current, term_id)
                return []
            seen.add(current)
            record = by_id[current]
            chain.append(record)
            if record.is_root:
                return chain
            current = record.parent_id

        logger.warning("Ancestor chain for term %s is missing term %s", term_id, current)
        return []
