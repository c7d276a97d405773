# ==============================================
# TaxonomyRegistry
# ==============================================
#
# PURPOSE:
#   Answers "does this taxonomy support parent/child terms?".
#
# WHY THIS CLASS EXISTS:
#   Whether a taxonomy is hierarchical is registered by application
#   code, not stored in the term tables. The registry holds that
#   knowledge in memory and is seeded from SearchConfig.
#
# ==============================================

from typing import Dict, Iterable

from term_hierarchy.config import SearchConfig


class TaxonomyRegistry:
    def __init__(self, hierarchical: Iterable[str] = ("category",)):
        self._taxonomies: Dict[str, bool] = {}
        for name in hierarchical:
            self.register(name, hierarchical=True)

    @classmethod
    def from_config(cls, config: SearchConfig) -> "TaxonomyRegistry":
        return cls(hierarchical=config.hierarchical_taxonomies)

    def register(self, name: str, hierarchical: bool = True) -> None:
        self._taxonomies[name] = hierarchical

    def is_hierarchical(self, name: str) -> bool:
        # Unknown taxonomies are treated as flat
        return self._taxonomies.get(name, False)
