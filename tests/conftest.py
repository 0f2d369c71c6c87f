"""Shared test fixtures and configuration for the geocode engine tests"""
import json
import sys
from pathlib import Path

import pytest

# Ensure project root and tests dir are on sys.path so `import bd_geocode` and
# `import sample_data` work without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for path in (PROJECT_ROOT, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from bd_geocode.hierarchy import build_index  # noqa: E402
from bd_geocode.utils.tables import extract_records  # noqa: E402
from sample_data import sample_geocode as sample  # noqa: E402


@pytest.fixture
def bd_index():
    """Index over the numeric-id sample tables with a separate area table"""
    return build_index(
        extract_records(sample.RAW_DIVISIONS),
        extract_records(sample.RAW_DISTRICTS),
        extract_records(sample.RAW_UPAZILAS),
        extract_records(sample.RAW_AREAS),
    )


@pytest.fixture
def slug_index():
    """Index over the slug-id sample tables, localities on the sub-district rows"""
    return build_index(sample.SLUG_DIVISIONS, sample.SLUG_DISTRICTS, sample.SLUG_SUB_DISTRICTS)


@pytest.fixture
def data_dir(tmp_path):
    """Temporary directory holding the sample tables as JSON exports"""
    directory = tmp_path / "data"
    directory.mkdir()
    for file_name, raw in (
        ("divisions.json", sample.RAW_DIVISIONS),
        ("districts.json", sample.RAW_DISTRICTS),
        ("upazilas.json", sample.RAW_UPAZILAS),
        ("area.json", sample.RAW_AREAS),
    ):
        (directory / file_name).write_text(json.dumps(raw, ensure_ascii=False), encoding="utf-8")
    return directory
