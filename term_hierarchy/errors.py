# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Exception taxonomy for the term hierarchy search.
#
#   Only caller-contract violations and infrastructure misuse are
#   raised. Data-driven outcomes (not hierarchical, no parent, empty
#   chain, failed chain query) collapse to "not found" and never
#   surface as exceptions from HierarchicalAttributeSearch.find().
#
# ==============================================


class TermHierarchyError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(TermHierarchyError):
    """A configuration value is present but invalid."""


class PreconditionViolation(TermHierarchyError, ValueError):
    """The caller broke the contract: missing term, empty key, bad ID."""


class TermNotFoundError(TermHierarchyError, LookupError):
    """No term row matched the requested ID (and taxonomy)."""

    def __init__(self, term_id, taxonomy=None):
        self.term_id = term_id
        self.taxonomy = taxonomy
        where = f" in taxonomy '{taxonomy}'" if taxonomy else ""
        super().__init__(f"Term {term_id!r} not found{where}")


class StoreNotConnectedError(TermHierarchyError, RuntimeError):
    """A query was issued before the client connected."""
