"""
Load the reference tables from a local directory and build the hierarchy.

This is the only part of the package that touches the filesystem. Hosts that
fetch or bundle the tables some other way can call build_index() directly.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from loguru import logger

from bd_geocode.config import GeocodeConfig
from bd_geocode.hierarchy import HierarchyIndex, build_index
from bd_geocode.utils.tables import read_table_file


def configure_loader_logging(
    config: GeocodeConfig | None = None,
    *,
    rotation: str = "1 MB",
    retention: int | str = 10,
) -> int:
    """Send bd_geocode log records to the file named by config.log_file.

    Nothing is added at import time; call this from application code. Only
    records logged from the bd_geocode package reach the file, at config.log_level
    and above. Returns the handler id so callers can remove it again.
    """
    cfg = config or GeocodeConfig()
    return logger.add(
        str(cfg.log_file),
        level=cfg.log_level,
        filter="bd_geocode",
        rotation=rotation,
        retention=retention,
        enqueue=True,
    )


def load_table(path: Path, config: GeocodeConfig) -> list[dict[str, Any]]:
    """Read one table file. A missing file yields no rows rather than an error."""
    if not path.exists():
        logger.warning("Reference table not found, treating as empty: {}", path)
        return []
    records = read_table_file(path, **config.envelope_keys)
    logger.debug("Read {} records from {}", len(records), path)
    return records


def load_reference_data(config: GeocodeConfig | None = None) -> HierarchyIndex:
    """
    Read divisions, districts, upazilas and areas from config.data_dir and index them.

    Raises:
        ReferenceDataError: If a table file exists but cannot be parsed.
    """
    cfg = config or GeocodeConfig()
    logger.info("Loading reference data from {}", cfg.data_dir)
    divisions = load_table(cfg.data_dir / cfg.divisions_file, cfg)
    districts = load_table(cfg.data_dir / cfg.districts_file, cfg)
    sub_districts = load_table(cfg.data_dir / cfg.sub_districts_file, cfg)
    # Without area rows, locality arrays are read from the upazila rows.
    areas = (load_table(cfg.data_dir / cfg.areas_file, cfg) or None) if cfg.areas_file else None
    index = build_index(divisions, districts, sub_districts, areas)
    logger.info("Reference data loaded: {} divisions", len(index.divisions()))
    return index
