"""
Bilingual type-ahead filtering for the selection widgets.

A candidate matches when its Latin name contains the query case-insensitively,
or its Bengali name contains the query as typed (Bengali has no case). This is
plain substring matching; there is no typo tolerance.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from bd_geocode.hierarchy import HierarchyIndex
from bd_geocode.models.region import BilingualName, Level, Region
from bd_geocode.models.selection import Selection
from bd_geocode.selection import candidates as level_candidates

T = TypeVar("T")


def bilingual_name(candidate: Region | BilingualName) -> BilingualName:
    if isinstance(candidate, BilingualName):
        return candidate
    return candidate.names


def filter_by_query(
    candidates: Sequence[T],
    query: str | None,
    name_of: Callable[[T], BilingualName] = bilingual_name,
) -> Sequence[T]:
    """
    Keep the candidates whose Latin or Bengali name contains query.

    An empty or whitespace-only query returns `candidates` itself, unchanged.
    Otherwise a new tuple is returned in the original order.
    """
    if not query or not query.strip():
        return candidates
    lowered = query.lower()
    matches = []
    for candidate in candidates:
        name = name_of(candidate)
        if lowered in name.latin.lower() or (name.native and query in name.native):
            matches.append(candidate)
    return tuple(matches)


def search(index: HierarchyIndex, selection: Selection, level: Level, query: str | None) -> Sequence:
    """Filter the options available at `level` under `selection` by query."""
    return filter_by_query(level_candidates(index, selection, level), query)
