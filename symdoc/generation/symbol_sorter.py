"""
SymbolSorter - dependency and hierarchy ordering of symbols.
"""

import heapq
from collections import deque
from typing import Dict, Iterable, List, Optional, Set

from ..symbols import Relationship, Symbol

DependencyGraph = Dict[str, Set[str]]


def _unique(symbols: Iterable[Symbol]) -> List[Symbol]:
    unique = []
    seen = set()
    for symbol in symbols:
        if symbol.precise_id not in seen:
            seen.add(symbol.precise_id)
            unique.append(symbol)
    return unique


class SymbolSorter:
    """
    Orders the symbols of one rendering unit (a module's top-level set or one
    extension group).

    The dependency graph maps a symbol ID to the IDs it depends on; edges are
    any relationship whose both endpoints belong to the unit.
    """

    @staticmethod
    def build_dependency_graph(symbols: List[Symbol],
                               relationships: Iterable[Relationship]) -> DependencyGraph:
        graph: DependencyGraph = {symbol.precise_id: set() for symbol in symbols}
        for relationship in relationships:
            source, target = relationship.source_id, relationship.target_id
            if source == target:
                continue
            if source in graph and target in graph:
                graph[source].add(target)
        return graph

    @staticmethod
    def topological_sort(symbols: List[Symbol], graph: DependencyGraph) -> List[Symbol]:
        """
        Kahn's algorithm: dependencies come before their dependents.

        Ready symbols are emitted first-in first-out, seeded in input order.
        Symbols left over by a cycle are appended in input order. IDs in the
        graph that are not among the symbols are ignored.
        """
        ordered = _unique(symbols)
        ids = {symbol.precise_id for symbol in ordered}

        in_degree: Dict[str, int] = {}
        dependents: Dict[str, List[str]] = {symbol_id: [] for symbol_id in ids}
        for symbol in ordered:
            symbol_id = symbol.precise_id
            deps = {d for d in graph.get(symbol_id, ()) if d in ids and d != symbol_id}
            in_degree[symbol_id] = len(deps)
            for dep in deps:
                dependents[dep].append(symbol_id)

        by_id = {symbol.precise_id: symbol for symbol in ordered}
        queue = deque(s.precise_id for s in ordered if in_degree[s.precise_id] == 0)
        result: List[Symbol] = []
        emitted: Set[str] = set()

        while queue:
            symbol_id = queue.popleft()
            result.append(by_id[symbol_id])
            emitted.add(symbol_id)
            for dependent in dependents[symbol_id]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    queue.append(dependent)

        # Cycle
        result.extend(s for s in ordered if s.precise_id not in emitted)
        return result

    @staticmethod
    def get_hierarchy_rank(kind_identifier: str) -> int:
        """Classes, structs, enums, protocols, extensions, macros, functions, then the rest."""
        if kind_identifier == "swift.class":
            return 1
        if kind_identifier == "swift.struct":
            return 2
        if kind_identifier == "swift.enum":
            return 3
        if kind_identifier == "swift.protocol":
            return 4
        if "extension" in kind_identifier:
            return 5
        if kind_identifier == "swift.macro":
            return 6
        if kind_identifier == "swift.func":
            return 7
        return 8

    @classmethod
    def sort_by_hierarchy(cls, symbols: List[Symbol], graph: DependencyGraph) -> List[Symbol]:
        """
        Group by hierarchy rank, keeping dependency order inside each group.

        Within a group a symbol follows its in-group dependencies; among the
        symbols that are ready at the same time the smallest title goes first,
        then the earliest topological position.
        """
        topo_order = cls.topological_sort(symbols, graph)
        position = {symbol.precise_id: i for i, symbol in enumerate(topo_order)}

        groups: Dict[int, List[Symbol]] = {}
        for symbol in topo_order:
            groups.setdefault(cls.get_hierarchy_rank(symbol.kind_identifier), []).append(symbol)

        result: List[Symbol] = []
        for rank in sorted(groups):
            result.extend(cls._order_group(groups[rank], graph, position))
        return result

    @staticmethod
    def _order_group(group: List[Symbol], graph: DependencyGraph,
                     position: Dict[str, int]) -> List[Symbol]:
        by_id = {symbol.precise_id: symbol for symbol in group}
        in_degree: Dict[str, int] = {}
        dependents: Dict[str, List[str]] = {symbol_id: [] for symbol_id in by_id}
        for symbol in group:
            symbol_id = symbol.precise_id
            deps = {d for d in graph.get(symbol_id, ()) if d in by_id and d != symbol_id}
            in_degree[symbol_id] = len(deps)
            for dep in deps:
                dependents[dep].append(symbol_id)

        heap = [(s.title, position[s.precise_id], s.precise_id)
                for s in group if in_degree[s.precise_id] == 0]
        heapq.heapify(heap)

        ordered: List[Symbol] = []
        emitted: Set[str] = set()
        while heap:
            _, _, symbol_id = heapq.heappop(heap)
            ordered.append(by_id[symbol_id])
            emitted.add(symbol_id)
            for dependent in dependents[symbol_id]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    heapq.heappush(heap, (by_id[dependent].title, position[dependent], dependent))

        ordered.extend(s for s in group if s.precise_id not in emitted)
        return ordered

    @staticmethod
    def find_main_symbol(symbols: List[Symbol], relationships: Iterable[Relationship],
                         module_name: str) -> Optional[Symbol]:
        """
        Pick the symbol that opens the module's interface.

        The most inherited-from symbol wins (ties: smallest title, then precise
        ID). Without any inheritance inside the set, the first symbol titled
        like the module is used.
        """
        by_id = {}
        for symbol in symbols:
            by_id.setdefault(symbol.precise_id, symbol)

        counts: Dict[str, int] = {}
        for relationship in relationships:
            if relationship.is_inheritance and relationship.target_id in by_id:
                counts[relationship.target_id] = counts.get(relationship.target_id, 0) + 1

        if counts:
            best = max(counts.values())
            candidates = [by_id[symbol_id] for symbol_id, count in counts.items() if count == best]
            return min(candidates, key=lambda s: (s.title, s.precise_id))

        for symbol in symbols:
            if symbol.title == module_name:
                return symbol
        return None
