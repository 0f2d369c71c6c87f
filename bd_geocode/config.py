import os
from pathlib import Path

from bd_geocode.utils.tables import DISCRIMINATOR_KEY, PAYLOAD_KEY, TABLE_TAG

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_FILE = "bd_geocode.log"


class GeocodeConfig:
    """
    Configuration settings for loading the reference tables from disk.

    Attributes:
        data_dir: Directory holding the table files (reads BD_GEOCODE_DATA_DIR env var if not provided, else ./data)
        divisions_file: File name of the divisions table (default: divisions.json)
        districts_file: File name of the districts table (default: districts.json)
        sub_districts_file: File name of the upazilas table (default: upazilas.json)
        areas_file: File name of the areas table, or None to read locality arrays from the upazila rows (default: area.json)
        discriminator_key: Envelope key naming the entry type (default: "type")
        table_tag: Discriminator value of the data table entry (default: "table")
        payload_key: Envelope key holding the rows (default: "data")
        log_level: Level used by configure_loader_logging (reads BD_GEOCODE_LOG_LEVEL env var, default: INFO)
        log_file: Sink file of configure_loader_logging (reads BD_GEOCODE_LOG_FILE env var, default: bd_geocode.log)
    """

    def __init__(
        self,
        *,
        data_dir: str | os.PathLike | None = None,
        divisions_file: str = "divisions.json",
        districts_file: str = "districts.json",
        sub_districts_file: str = "upazilas.json",
        areas_file: str | None = "area.json",
        discriminator_key: str = DISCRIMINATOR_KEY,
        table_tag: str = TABLE_TAG,
        payload_key: str = PAYLOAD_KEY,
        log_level: str | None = None,
        log_file: str | os.PathLike | None = None,
    ) -> None:
        self.data_dir = Path(data_dir or os.getenv("BD_GEOCODE_DATA_DIR") or DEFAULT_DATA_DIR)
        self.divisions_file = divisions_file
        self.districts_file = districts_file
        self.sub_districts_file = sub_districts_file
        self.areas_file = areas_file
        self.discriminator_key = discriminator_key
        self.table_tag = table_tag
        self.payload_key = payload_key
        self.log_level = log_level or os.getenv("BD_GEOCODE_LOG_LEVEL", "INFO")
        self.log_file = Path(log_file or os.getenv("BD_GEOCODE_LOG_FILE") or DEFAULT_LOG_FILE)

    @property
    def envelope_keys(self) -> dict[str, str]:
        return {
            "discriminator_key": self.discriminator_key,
            "table_tag": self.table_tag,
            "payload_key": self.payload_key,
        }
