# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Sandbox for trying the hierarchical search against a live
#   database configured through .env.
#
# COMMANDS:
# ---------
# 1. Find a meta value for a term or its nearest ancestor:
#    python -m term_hierarchy.cli find 26 category headline
#    python -m term_hierarchy.cli find 26 category headline --override
#
# 2. Print the ancestor chain with meta values:
#    python -m term_hierarchy.cli chain 26 headline enable_content_archive_settings
#
# Add --verbose to any command to see debug logging.
#
# ==============================================

import logging
import sys
from typing import List, Optional

import pymysql

from term_hierarchy.errors import TermHierarchyError
from term_hierarchy.lookup import TermMetaLookup

USAGE = """Term Hierarchical Search
============================================================

Usage:
  python -m term_hierarchy.cli find <term_id> <taxonomy> <meta_key> [--override]
  python -m term_hierarchy.cli chain <term_id> <meta_key> [<meta_key> ...]

Options:
  --override   Stop at the first level whose override flag is set
  --verbose    Enable debug logging
"""


def _find(lookup: TermMetaLookup, args: List[str], check_override: bool) -> int:
    if len(args) != 3:
        print(USAGE)
        return 2
    term_id, taxonomy, meta_key = int(args[0]), args[1], args[2]

    term = lookup.get_term(term_id, taxonomy)
    print(f"Term {term.term_id} '{term.name}' ({term.taxonomy}, parent {term.parent})")

    value = lookup.search.find(term, meta_key, check_override=check_override)
    if value is None:
        print(f"✗ {meta_key}: (not found)")
        return 1
    print(f"✓ {meta_key}: {value!r}")
    return 0


def _chain(lookup: TermMetaLookup, args: List[str]) -> int:
    if len(args) < 2:
        print(USAGE)
        return 2
    term_id, meta_keys = int(args[0]), args[1:]

    chain = lookup.ancestor_chain(term_id, meta_keys)
    if not chain:
        print(f"✗ No ancestor chain for term {term_id}")
        return 1
    for depth, record in enumerate(chain):
        print(f"{'  ' * depth}→ term {record.term_id} (parent {record.parent_id})")
        for key, value in record.values.items():
            print(f"{'  ' * depth}    {key} = {value!r}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    flags = {arg for arg in argv if arg.startswith("--")}
    args = [arg for arg in argv if not arg.startswith("--")]

    if "--verbose" in flags:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args or args[0] not in ("find", "chain"):
        if args:
            print(f"Unknown command: {args[0]}")
        print(USAGE)
        return 2

    command, rest = args[0], args[1:]
    try:
        with TermMetaLookup() as lookup:
            if command == "find":
                return _find(lookup, rest, "--override" in flags)
            return _chain(lookup, rest)
    except (TermHierarchyError, pymysql.MySQLError, ValueError) as e:
        print(f"✗ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
