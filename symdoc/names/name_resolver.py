"""
Resolution of opaque type references (precise identifiers) to display names.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Set

from .. import logger
from .name_cache import NameCache

OBJC_PREFIXES = ("c:objc(cs)", "c:objc(pl)")

# Well-known standard library references that never need a demangler
BUILTIN_NAMES: Dict[str, str] = {
    "s:SH": "Hashable",
    "s:SQ": "Equatable",
    "s:s7CVarArgP": "CVarArg",
    "s:SE": "Encodable",
    "s:Se": "Decodable",
    "s:Sb": "Bool",
    "s:Si": "Int",
    "s:Ss": "String",
    "s:Sa": "Array",
}


class BatchResolver(ABC):
    """External capability that turns many references into names in one call."""

    @abstractmethod
    def batch_resolve(self, references: List[str]) -> List[Optional[str]]:
        """
        Resolve references.

        Returns:
            List parallel to references; None where a reference could not be resolved
        """
        pass


class NullResolver(BatchResolver):
    """Resolves nothing. Used when no external capability is configured."""

    def batch_resolve(self, references: List[str]) -> List[Optional[str]]:
        return [None] * len(references)


def resolve_builtin(reference: str) -> Optional[str]:
    """Resolve a reference from the Objective-C prefixes or the builtin table alone."""
    if reference.startswith(OBJC_PREFIXES):
        return reference.rsplit(")", 1)[-1] or None
    return BUILTIN_NAMES.get(reference)


class NameResolver:
    """
    Resolves references through fixed tables first, then a cached batch call.

    Both successes and failures of the batch capability are cached, so a
    reference reaches the capability at most once per run.
    """

    def __init__(self, batch_resolver: Optional[BatchResolver] = None, cache: Optional[NameCache] = None):
        self.batch_resolver = batch_resolver or NullResolver()
        self.cache = cache if cache is not None else NameCache()

    def reset(self):
        """Forget everything resolved so far. Called at the start of every run."""
        self.cache.clear()

    def resolve(self, reference: str) -> Optional[str]:
        return self.resolve_many([reference]).get(reference)

    def resolve_many(self, references: Iterable[str]) -> Dict[str, Optional[str]]:
        """
        Resolve several references with at most one batch call for the uncached ones.

        Returns:
            Mapping reference -> name (None for failures)
        """
        resolved: Dict[str, Optional[str]] = {}
        pending: List[str] = []
        seen: Set[str] = set()

        for reference in references:
            if reference in seen:
                continue
            seen.add(reference)
            builtin = resolve_builtin(reference)
            if builtin is not None:
                resolved[reference] = builtin
                continue
            hit, name = self.cache.lookup(reference)
            if hit:
                resolved[reference] = name
            else:
                pending.append(reference)

        if pending:
            names = self._call_batch(pending)
            for reference, name in zip(pending, names):
                self.cache.store(reference, name)
                resolved[reference] = name

        return resolved

    def _call_batch(self, references: List[str]) -> List[Optional[str]]:
        try:
            names = list(self.batch_resolver.batch_resolve(references))
        except Exception as e:
            logger.warning(f"Name resolution failed for {len(references)} references: {e}")
            return [None] * len(references)

        if len(names) != len(references):
            logger.warning(
                f"Name resolver returned {len(names)} names for {len(references)} references"
            )
            names = (names + [None] * len(references))[:len(references)]
        return names
