# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests. No live database is used:
# FakeMySQLClient stands in for MySQLClient, answers the ancestor
# chain and term queries from an in-memory forest, and records
# every query it executes. @th_parent queries replay the ordered
# scan and variable carry; WITH RECURSIVE queries walk the parents.
#
# The default forest:
#
#   1  "Root"     parent 0   headline "Y"
#   └─ 3 "Middle" parent 1   headline "X"
#      └─ 5 "Leaf" parent 3  headline ""
#   9  "Orphan"   parent 0   (no meta)
#   7  "Tag"      parent 0   taxonomy post_tag
#
# ==============================================

import pytest
import pymysql

from term_hierarchy.config import TableConfig, SearchConfig, MySQLConfig, AppConfig
from term_hierarchy.hierarchy import AncestorChainResolver, HierarchicalAttributeSearch
from term_hierarchy.models import Term
from term_hierarchy.storage import TaxonomyRegistry


class FakeMySQLClient:
    """In-memory stand-in for MySQLClient.fetch_all / fetch_one."""

    def __init__(self, terms=None, meta=None):
        # term_id -> (taxonomy, parent, name)
        self.terms = terms or {}
        # (term_id, meta_key) -> meta_value
        self.meta = meta or {}
        self.queries = []
        self.error = None
        self.rows_override = None
        self.connect_error = None
        self.connected = False

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def disconnect(self):
        self.connected = False

    def fetch_all(self, query, params=None):
        self.queries.append((query, params))
        if self.error is not None:
            raise self.error
        if self.rows_override is not None:
            return list(self.rows_override)
        if "@th_parent" in query:
            return self._session_variable_rows(params[0], params[1:])
        if "WITH RECURSIVE" in query:
            return self._recursive_rows(params[0], params[1:])
        return self._term_rows(query, params)

    def fetch_one(self, query, params=None):
        rows = self.fetch_all(query, params)
        return rows[0] if rows else None

    def _chain_row(self, term_id, parent, meta_keys):
        row = {"term_id": term_id, "parent_id": parent}
        for position, key in enumerate(meta_keys, start=1):
            row[f"meta_value_{position}"] = self.meta.get((term_id, key))
        return row

    def _session_variable_rows(self, term_id, meta_keys):
        # Scan by GREATEST(term_id, parent) DESC; ties put the higher
        # term_id first, which is the order that hurts the carry.
        scan = sorted(
            ((tid, parent) for tid, (_, parent, _) in self.terms.items()),
            key=lambda edge: (max(edge), edge[0]),
            reverse=True,
        )
        rows = []
        carried = term_id
        for tid, parent in scan:
            if tid == carried:
                rows.append(self._chain_row(tid, parent, meta_keys))
                carried = parent
        return rows

    def _recursive_rows(self, term_id, meta_keys):
        rows = []
        current = term_id
        while current in self.terms:
            _, parent, _ = self.terms[current]
            rows.append(self._chain_row(current, parent, meta_keys))
            if parent == 0:
                break
            current = parent
        return rows

    def _term_rows(self, query, params):
        key = params[0]
        taxonomy = params[1] if len(params) > 1 else None
        if "t.slug = %s" in query:
            matches = [tid for tid, (_, _, name) in self.terms.items() if name.lower() == key]
        else:
            matches = [key] if key in self.terms else []
        rows = []
        for tid in matches:
            tax, parent, name = self.terms[tid]
            if taxonomy is not None and tax != taxonomy:
                continue
            rows.append({"term_id": tid, "name": name, "slug": name.lower(),
                         "taxonomy": tax, "parent": parent})
        return rows

    @property
    def chain_queries(self):
        return [q for q in self.queries if "@th_parent" in q[0] or "WITH RECURSIVE" in q[0]]


@pytest.fixture
def forest_client():
    """FakeMySQLClient loaded with the default forest."""
    return FakeMySQLClient(
        terms={
            1: ("category", 0, "Root"),
            3: ("category", 1, "Middle"),
            5: ("category", 3, "Leaf"),
            9: ("category", 0, "Orphan"),
            7: ("post_tag", 0, "Tag"),
        },
        meta={
            (1, "headline"): "Y",
            (3, "headline"): "X",
            (5, "headline"): "",
            (1, "intro_text"): "root intro",
        },
    )


@pytest.fixture
def tables():
    return TableConfig()


@pytest.fixture
def registry():
    return TaxonomyRegistry(hierarchical=("category",))


@pytest.fixture
def resolver(forest_client, tables):
    return AncestorChainResolver(forest_client, tables)


@pytest.fixture
def search(resolver, registry):
    return HierarchicalAttributeSearch(resolver, registry)


@pytest.fixture
def leaf_term():
    return Term(term_id=5, taxonomy="category", parent=3, name="Leaf", slug="leaf")


@pytest.fixture
def app_config():
    return AppConfig(mysql=MySQLConfig(), tables=TableConfig(), search=SearchConfig())


@pytest.fixture
def query_error():
    return pymysql.err.OperationalError(2013, "Lost connection to MySQL server during query")
