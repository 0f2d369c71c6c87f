"""
Dictionaries mapping model fields to the canonical reference table columns
that feed them, per administrative level.

Canonical names follow the bd-geocode exports (divisions.json, districts.json,
upazilas.json, area.json) first, then the model's own field names, so rows
keyed nameLatin/parentDivisionId/parentDistrictId resolve as well.
Alternatives are tried left to right.
"""

CANONICAL_FIELDS = frozenset({
    "id",
    "name",
    "name_latin",
    "bn_name",
    "name_native",
    "division_id",
    "parent_division_id",
    "district_id",
    "parent_district_id",
    "upazila_id",
    "areas",
    "bn_areas",
    "localities",
    "localities_native",
})

division_mapper = {
    "id": ("id",),
    "name_latin": ("name", "name_latin"),
    "name_native": ("bn_name", "name_native"),
}

district_mapper = {
    "id": ("id",),
    "name_latin": ("name", "name_latin"),
    "name_native": ("bn_name", "name_native"),
    "parent_division_id": ("division_id", "parent_division_id"),
}

sub_district_mapper = {
    "id": ("id",),
    "name_latin": ("name", "name_latin"),
    "name_native": ("bn_name", "name_native"),
    "parent_district_id": ("district_id", "parent_district_id"),
}

# Rows in area.json are keyed by upazila_id; upazila rows carrying their own
# arrays are keyed by id.
locality_mapper = {
    "owner_id": ("upazila_id", "id"),
    "latin": ("areas", "localities"),
    "native": ("bn_areas", "localities_native"),
}
