# ==============================================
# MODELS
# ==============================================
#
# Data classes shared by the storage and hierarchy packages.
#
# Modules:
# --------
# - term.py  → Term, AncestorRecord
#
# ==============================================

from .term import Term, AncestorRecord

__all__ = [
    "Term",
    "AncestorRecord"
]
