"""
Parent -> children index over the administrative reference tables.

Build once per reference dataset with build_index() and share the resulting
HierarchyIndex; it is immutable after construction.

Responsibilities:
- Normalize raw rows (tolerating column-name drift) into Division, District and
  SubDistrict models
- Exclude rows that cannot be placed (missing id/name/parent, unknown parent,
  duplicate id) instead of failing
- Resolve the parallel locality arrays attached to each sub-district
- Answer children-of and id lookups in O(1), preserving source order
"""

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from bd_geocode.mappers import district_mapper, division_mapper, locality_mapper, sub_district_mapper
from bd_geocode.models.region import District, Division, Level, Locality, RegionId, SubDistrict, id_key
from bd_geocode.utils.keys import normalize_record

logger = logging.getLogger(__name__)

Records = Iterable[Mapping[str, Any]]


class HierarchyIndex:
    """Read-only lookup hierarchy: division -> district -> sub-district -> locality."""

    def __init__(
        self,
        divisions: Iterable[Division],
        districts: Iterable[District],
        sub_districts: Iterable[SubDistrict],
        localities: Mapping[RegionId, Iterable[Locality]] | None = None,
    ) -> None:
        """Index already-validated models.

        Entities whose parent is not indexed at the level above, or whose id
        repeats an earlier entity at the same level, are left out and counted
        in `skipped`. Most callers want build_index() instead.
        """
        self.skipped: Counter[Level] = Counter()

        self._divisions_by_id: dict[str, Division] = {}
        for division in divisions:
            self._admit(self._divisions_by_id, division, Level.DIVISION)

        self._districts_by_id: dict[str, District] = {}
        districts_by_division: dict[str, list[District]] = defaultdict(list)
        for district in districts:
            parent = id_key(district.parent_division_id)
            if parent in self._divisions_by_id and self._admit(self._districts_by_id, district, Level.DISTRICT):
                districts_by_division[parent].append(district)
            elif parent not in self._divisions_by_id:
                self.skipped[Level.DISTRICT] += 1

        self._sub_districts_by_id: dict[str, SubDistrict] = {}
        subs_by_district: dict[str, list[SubDistrict]] = defaultdict(list)
        for sub_district in sub_districts:
            parent = id_key(sub_district.parent_district_id)
            if parent in self._districts_by_id and self._admit(self._sub_districts_by_id, sub_district, Level.SUB_DISTRICT):
                subs_by_district[parent].append(sub_district)
            elif parent not in self._districts_by_id:
                self.skipped[Level.SUB_DISTRICT] += 1

        self._localities_by_sub_district: dict[str, tuple[Locality, ...]] = {}
        for owner_id, owned in (localities or {}).items():
            owner = id_key(owner_id)
            if owner in self._sub_districts_by_id:
                self._localities_by_sub_district[owner] = tuple(owned)
            else:
                self.skipped[Level.LOCALITY] += 1

        self._divisions = tuple(self._divisions_by_id.values())
        self._districts_by_division = {k: tuple(v) for k, v in districts_by_division.items()}
        self._sub_districts_by_district = {k: tuple(v) for k, v in subs_by_district.items()}

    def _admit(self, by_id: dict, entity, level: Level) -> bool:
        key = id_key(entity.id)
        if key in by_id:
            logger.debug("Duplicate %s id %s ignored", level.name.lower(), key)
            self.skipped[level] += 1
            return False
        by_id[key] = entity
        return True

    # ----------------------------
    # Children queries
    # ----------------------------
    def divisions(self) -> tuple[Division, ...]:
        return self._divisions

    def children_of_division(self, division_id: RegionId) -> tuple[District, ...]:
        return self._districts_by_division.get(id_key(division_id), ())

    def children_of_district(self, district_id: RegionId) -> tuple[SubDistrict, ...]:
        return self._sub_districts_by_district.get(id_key(district_id), ())

    def localities_of(self, sub_district_id: RegionId) -> tuple[Locality, ...]:
        """Localities of a sub-district in source order; empty when none are known."""
        return self._localities_by_sub_district.get(id_key(sub_district_id), ())

    def all_localities(self) -> tuple[tuple[RegionId, Locality], ...]:
        """Every (sub_district_id, locality) pair, grouped by sub-district in source order."""
        return tuple(
            (sub_district.id, locality)
            for sub_district in self._sub_districts_by_id.values()
            for locality in self.localities_of(sub_district.id)
        )

    # ----------------------------
    # Id lookups
    # ----------------------------
    def division(self, division_id: RegionId | None) -> Optional[Division]:
        return self._divisions_by_id.get(id_key(division_id))

    def district(self, district_id: RegionId | None) -> Optional[District]:
        return self._districts_by_id.get(id_key(district_id))

    def sub_district(self, sub_district_id: RegionId | None) -> Optional[SubDistrict]:
        return self._sub_districts_by_id.get(id_key(sub_district_id))


def _validate_rows(records: Records | None, mapper: dict, model: type[BaseModel], level: Level, skipped: Counter) -> list:
    placed = []
    for record in records or ():
        try:
            placed.append(model(**normalize_record(record, mapper)))
        except ValidationError as error:
            logger.debug("Cannot place %s record %r: %s", level.name.lower(), record, error)
            skipped[level] += 1
    return placed


def _pair_localities(latin: Any, native: Any, owner_id: RegionId) -> tuple[Locality, ...]:
    """Zip the parallel name arrays by position, truncating to the shorter one."""
    latin = latin if isinstance(latin, list) else []
    native = native if isinstance(native, list) else []
    if len(latin) != len(native):
        logger.warning(
            "Locality arrays of sub-district %s differ in length (%s latin, %s native); dropping %s unmatched",
            owner_id, len(latin), len(native), abs(len(latin) - len(native)),
        )
    return tuple(
        Locality(latin=str(name), native="" if native_name is None else str(native_name))
        for name, native_name in zip(latin, native)
        if name is not None
    )


def _collect_localities(records: Records | None, skipped: Counter) -> dict[str, tuple[Locality, ...]]:
    localities: dict[str, tuple[Locality, ...]] = {}
    for record in records or ():
        fields = normalize_record(record, locality_mapper)
        if "latin" not in fields and "native" not in fields:
            continue
        owner_id = fields.get("owner_id")
        if owner_id is None:
            skipped[Level.LOCALITY] += 1
            continue
        # The first record for a sub-district wins.
        if id_key(owner_id) in localities:
            continue
        localities[id_key(owner_id)] = _pair_localities(fields.get("latin"), fields.get("native"), owner_id)
    return localities


def build_index(
    divisions: Records | None,
    districts: Records | None,
    sub_districts: Records | None,
    areas: Records | None = None,
) -> HierarchyIndex:
    """
    Build a HierarchyIndex from raw reference rows.

    params:
        divisions: Rows of divisions.json (id, name, bn_name).
        districts: Rows of districts.json (id, division_id, name, bn_name).
        sub_districts: Rows of upazilas.json (id, district_id, name, bn_name).
        areas: Rows of area.json (upazila_id, areas, bn_areas). When omitted,
            locality arrays are read from the sub-district rows themselves.

    returns:
        index (HierarchyIndex): Never raises for malformed rows; they are
        skipped and counted in index.skipped.
    """
    skipped: Counter[Level] = Counter()
    sub_district_rows = list(sub_districts or ())
    index = HierarchyIndex(
        _validate_rows(divisions, division_mapper, Division, Level.DIVISION, skipped),
        _validate_rows(districts, district_mapper, District, Level.DISTRICT, skipped),
        _validate_rows(sub_district_rows, sub_district_mapper, SubDistrict, Level.SUB_DISTRICT, skipped),
        _collect_localities(sub_district_rows if areas is None else areas, skipped),
    )
    index.skipped.update(skipped)
    logger.info(
        "Built hierarchy index: %s divisions, %s districts, %s sub-districts, %s sub-districts with localities",
        len(index.divisions()),
        len(index._districts_by_id),
        len(index._sub_districts_by_id),
        len(index._localities_by_sub_district),
    )
    if index.skipped:
        logger.warning(
            "Skipped reference records: %s",
            {level.name.lower(): count for level, count in sorted(index.skipped.items())},
        )
    return index
