from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from bd_geocode.models.region import District, Division, Locality, RegionId, SubDistrict


class Selection(BaseModel):
    """
    The current choice at each level of one location form.

    Owned by the caller (one per form) and only changed through the setters in
    bd_geocode.selection, which clear descendant levels on every write.
    """
    model_config = ConfigDict(frozen=True)

    division_id: Optional[RegionId] = None
    district_id: Optional[RegionId] = None
    sub_district_id: Optional[RegionId] = None
    locality_name: Optional[str] = Field(default=None, description="Latin name of the chosen locality.")


class ResolvedSelection(BaseModel):
    """The entities a Selection points at. Unset or unknown levels are None."""
    model_config = ConfigDict(frozen=True)

    division: Optional[Division] = None
    district: Optional[District] = None
    sub_district: Optional[SubDistrict] = None
    locality: Optional[Locality] = None
