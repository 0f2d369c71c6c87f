from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, Field
from typing import Union

# Reference tables mix numeric and string ids.
RegionId = Union[str, int]


def id_key(value: RegionId | None) -> str | None:
    """Compare ids string-wise so 5 and "5" refer to the same region."""
    return None if value is None else str(value)


class Level(IntEnum):
    """Administrative levels, ordered from the top of the hierarchy down."""
    DIVISION = 0
    DISTRICT = 1
    SUB_DISTRICT = 2  # upazila / thana
    LOCALITY = 3  # area


class Language(str, Enum):
    """Display languages offered by the selection widgets."""
    EN = "en"
    BN = "bn"


class BilingualName(BaseModel):
    """A name in Latin script and in Bengali script."""
    model_config = ConfigDict(frozen=True)

    latin: str = Field(..., description="Latin-script (English) name. Example: 'Dhanmondi'")
    native: str = Field(default="", description="Bengali-script name. Empty when the source has none. Example: 'ধানমন্ডি'")

    def label(self, language: Language | str = Language.EN) -> str:
        if Language(language) is Language.BN and self.native:
            return self.native
        return self.latin


class Locality(BilingualName):
    """A named neighbourhood (area) inside a sub-district. Localities have no id of their own."""


class Region(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RegionId = Field(..., description="Id as found in the reference table.")
    name_latin: str = Field(..., description="Latin-script name, the 'name' column.")
    name_native: str = Field(default="", description="Bengali-script name, the 'bn_name' column.")

    @property
    def names(self) -> BilingualName:
        return BilingualName(latin=self.name_latin, native=self.name_native)

    def label(self, language: Language | str = Language.EN) -> str:
        return self.names.label(language)


class Division(Region):
    """Top level of the hierarchy (e.g. Dhaka, Chattogram). Has no parent."""


class District(Region):
    parent_division_id: RegionId = Field(..., description="Id of the owning Division, the 'division_id' column.")


class SubDistrict(Region):
    """An upazila or thana."""
    parent_district_id: RegionId = Field(..., description="Id of the owning District, the 'district_id' column.")
