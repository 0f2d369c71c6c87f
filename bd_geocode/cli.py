"""
Browse the administrative hierarchy from the command line.

    bd-geocode --data-dir data divisions
    bd-geocode --lang bn districts 3 --query ঢা
    bd-geocode areas 493
"""

from __future__ import annotations

import argparse
import logging
import sys

from loguru import logger

from bd_geocode.config import GeocodeConfig
from bd_geocode.errors import ReferenceDataError
from bd_geocode.loader import load_reference_data
from bd_geocode.models.region import Language, Level
from bd_geocode.models.selection import Selection
from bd_geocode.search import search
from bd_geocode.selection import set_district, set_division, set_sub_district

COMMAND_LEVELS = {
    "divisions": Level.DIVISION,
    "districts": Level.DISTRICT,
    "upazilas": Level.SUB_DISTRICT,
    "areas": Level.LOCALITY,
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="bd-geocode", add_help=True)
    p.add_argument("--data-dir", default=None, help="Directory with the reference tables (default: $BD_GEOCODE_DATA_DIR or ./data).")
    p.add_argument("--lang", choices=[lang.value for lang in Language], default=Language.EN.value, help="Label language.")
    p.add_argument("--verbose", action="store_true", help="Log loader progress to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    divisions = sub.add_parser("divisions", help="List divisions.")
    divisions.add_argument("--query", default="", help="Bilingual substring filter.")

    for cmd, parent, help_text in (
        ("districts", "division_id", "List districts of a division."),
        ("upazilas", "district_id", "List upazilas/thanas of a district."),
        ("areas", "upazila_id", "List areas of an upazila/thana."),
    ):
        cmd_parser = sub.add_parser(cmd, help=help_text)
        cmd_parser.add_argument("parent_id", metavar=parent.upper())
        cmd_parser.add_argument("--query", default="", help="Bilingual substring filter.")
    return p.parse_args(argv)


def _selection_for(cmd: str, parent_id: str | None) -> Selection:
    # Parent ids from the command line are strings; the index compares ids string-wise.
    selection = Selection()
    if cmd == "districts":
        selection = set_division(selection, parent_id)
    elif cmd == "upazilas":
        selection = set_district(selection, parent_id)
    elif cmd == "areas":
        selection = set_sub_district(selection, parent_id)
    return selection


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    core_logger = logging.getLogger("bd_geocode")
    core_level = core_logger.level
    if not args.verbose:
        # Index build warnings come from stdlib logging, loader messages from loguru.
        core_logger.setLevel(logging.ERROR)
        logger.disable("bd_geocode")
    try:
        index = load_reference_data(GeocodeConfig(data_dir=args.data_dir))
    except ReferenceDataError as error:
        print(f"bd-geocode: {error.message}", file=sys.stderr)
        return 1
    finally:
        core_logger.setLevel(core_level)
        logger.enable("bd_geocode")

    level = COMMAND_LEVELS[args.cmd]
    selection = _selection_for(args.cmd, getattr(args, "parent_id", None))
    for item in search(index, selection, level, args.query):
        if level is Level.LOCALITY:
            print(item.label(args.lang))
        else:
            print(f"{item.id}\t{item.label(args.lang)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
