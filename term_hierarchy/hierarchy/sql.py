# ==============================================
# Ancestor Chain SQL
# ==============================================
#
# PURPOSE:
#   Build the single SELECT that walks from a term up to its root
#   and joins in one meta value column per requested meta key.
#
# STRATEGIES:
# -----------
# - recursive_cte (MySQL 8.0+, MariaDB 10.2+), the default
#     WITH RECURSIVE anchored at the start term, following parent
#     until parent = 0, ordered by depth.
#
# - session_variable (MySQL 5.x)
#     Scan term_taxonomy ordered by GREATEST(term_id, parent) DESC,
#     carry the "next parent" in @th_parent across rows, and keep only
#     the rows whose term_id equals the carried value. Complete only
#     when every level is scanned after its child, i.e. when parent
#     IDs are lower than child IDs along the chain. Otherwise the
#     rows stop short of the root and the resolver reports no chain.
#
# OUTPUT COLUMNS:
# ---------------
#   term_id, parent_id, meta_value_1 .. meta_value_N
#   (meta_value_i belongs to meta_keys[i - 1])
#
# ==============================================

from typing import Sequence

from term_hierarchy.config import TableConfig, SESSION_VARIABLE, RECURSIVE_CTE, CHAIN_STRATEGIES

META_COLUMN_PREFIX = "meta_value_"


def meta_column(position: int) -> str:
    """Column alias for the 1-based meta key position."""
    return f"{META_COLUMN_PREFIX}{position}"


def _meta_columns(source: str, meta_count: int) -> str:
    columns = [f"{source}.term_id", f"{source}.parent_id"]
    columns += [f"tm{n}.meta_value AS {meta_column(n)}" for n in range(1, meta_count + 1)]
    return ", ".join(columns)


def _meta_joins(termmeta: str, source: str, meta_count: int) -> str:
    return "\n".join(
        f"LEFT JOIN {termmeta} AS tm{n} ON tm{n}.term_id = {source}.term_id AND tm{n}.meta_key = %s"
        for n in range(1, meta_count + 1)
    )


def _session_variable_query(meta_count: int, tables: TableConfig) -> str:
    select = ["t.term_id", "@th_parent := t.parent AS parent_id"]
    select += [f"tm{n}.meta_value AS {meta_column(n)}" for n in range(1, meta_count + 1)]
    return (
        f"SELECT {', '.join(select)}\n"
        "FROM (\n"
        "    SELECT tt.term_id, tt.parent\n"
        f"    FROM {tables.term_taxonomy} AS tt\n"
        "    ORDER BY CASE WHEN tt.term_id > tt.parent THEN tt.term_id ELSE tt.parent END DESC\n"
        # A LIMIT keeps the derived table materialized so its ORDER BY is honoured
        "    LIMIT 18446744073709551615\n"
        ") AS t\n"
        "JOIN (SELECT @th_parent := %s) AS tmp\n"
        f"{_meta_joins(tables.termmeta, 't', meta_count)}\n"
        "WHERE t.term_id = @th_parent"
    )


def _recursive_cte_query(meta_count: int, tables: TableConfig) -> str:
    return (
        "WITH RECURSIVE chain (term_id, parent_id, depth) AS (\n"
        "    SELECT tt.term_id, tt.parent, 0\n"
        f"    FROM {tables.term_taxonomy} AS tt\n"
        "    WHERE tt.term_id = %s\n"
        "    UNION ALL\n"
        "    SELECT tt.term_id, tt.parent, chain.depth + 1\n"
        f"    FROM {tables.term_taxonomy} AS tt\n"
        "    INNER JOIN chain ON tt.term_id = chain.parent_id\n"
        "    WHERE chain.parent_id > 0\n"
        ")\n"
        f"SELECT {_meta_columns('chain', meta_count)}\n"
        "FROM chain\n"
        f"{_meta_joins(tables.termmeta, 'chain', meta_count)}\n"
        "ORDER BY chain.depth"
    )


def build_ancestor_chain_query(
    meta_count: int,
    tables: TableConfig,
    strategy: str = RECURSIVE_CTE
) -> str:
    """
    Build the ancestor chain SELECT with %s placeholders.

    Args:
        meta_count: Number of meta keys to join (one column each)
        tables: Table names to query
        strategy: "session_variable" or "recursive_cte"

    Returns:
        SQL string; pair it with build_query_params()
    """
    if meta_count < 1:
        raise ValueError("At least one meta key is required")
    if strategy == SESSION_VARIABLE:
        return _session_variable_query(meta_count, tables)
    if strategy == RECURSIVE_CTE:
        return _recursive_cte_query(meta_count, tables)
    raise ValueError(f"Unknown chain strategy {strategy!r}, expected one of {CHAIN_STRATEGIES}")


def build_query_params(term_id: int, meta_keys: Sequence[str]) -> tuple:
    # The start ID placeholder precedes the meta key placeholders in both strategies
    return (term_id, *meta_keys)
