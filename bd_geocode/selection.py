"""
Cascading selection over the administrative hierarchy.

Every function here is pure: it takes the caller's current Selection and
returns the next one. Changing a level always clears every level below it, so
a form can never keep a district chosen under a previous division.
"""

from typing import Optional

from bd_geocode.hierarchy import HierarchyIndex
from bd_geocode.models.region import Level, RegionId
from bd_geocode.models.selection import ResolvedSelection, Selection

LEVEL_FIELDS = {
    Level.DIVISION: "division_id",
    Level.DISTRICT: "district_id",
    Level.SUB_DISTRICT: "sub_district_id",
    Level.LOCALITY: "locality_name",
}


def clear_from(selection: Selection, level: Level) -> Selection:
    """Unset every level strictly below `level`."""
    below = {LEVEL_FIELDS[lower]: None for lower in Level if lower > level}
    return selection.model_copy(update=below)


def _set(selection: Selection, level: Level, value) -> Selection:
    return clear_from(selection, level).model_copy(update={LEVEL_FIELDS[level]: value})


def set_division(selection: Selection, division_id: Optional[RegionId]) -> Selection:
    return _set(selection, Level.DIVISION, division_id)


def set_district(selection: Selection, district_id: Optional[RegionId]) -> Selection:
    # The division is kept as is; candidates() only offers districts of it.
    return _set(selection, Level.DISTRICT, district_id)


def set_sub_district(selection: Selection, sub_district_id: Optional[RegionId]) -> Selection:
    return _set(selection, Level.SUB_DISTRICT, sub_district_id)


def set_locality(selection: Selection, locality_name: Optional[str]) -> Selection:
    return _set(selection, Level.LOCALITY, locality_name)


def candidates(index: HierarchyIndex, selection: Selection, level: Level) -> tuple:
    """
    Options a widget at `level` may offer under the current selection.

    Returns all divisions at the top level, the children of the selected
    parent below it, and an empty tuple while the parent level is unset.
    """
    level = Level(level)
    if level is Level.DIVISION:
        return index.divisions()
    parent_id = getattr(selection, LEVEL_FIELDS[Level(level - 1)])
    if parent_id is None:
        return ()
    if level is Level.DISTRICT:
        return index.children_of_division(parent_id)
    if level is Level.SUB_DISTRICT:
        return index.children_of_district(parent_id)
    return index.localities_of(parent_id)


def resolve_selection(index: HierarchyIndex, selection: Selection) -> ResolvedSelection:
    """Look up the entities a selection points at, for showing the chosen labels."""
    locality = None
    if selection.locality_name is not None and selection.sub_district_id is not None:
        locality = next(
            (
                candidate for candidate in index.localities_of(selection.sub_district_id)
                if candidate.latin == selection.locality_name
            ),
            None,
        )
    return ResolvedSelection(
        division=index.division(selection.division_id),
        district=index.district(selection.district_id),
        sub_district=index.sub_district(selection.sub_district_id),
        locality=locality,
    )
