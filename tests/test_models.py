"""Tests for the region and selection models"""
import pytest
from pydantic import ValidationError

from bd_geocode.models.region import BilingualName, District, Division, Language, Level, Locality, id_key
from bd_geocode.models.selection import Selection


def test_levels_are_ordered():
    assert Level.DIVISION < Level.DISTRICT < Level.SUB_DISTRICT < Level.LOCALITY


def test_id_key():
    assert id_key(5) == id_key("5") == "5"
    assert id_key(None) is None


def test_labels():
    dhaka = Division(id="6", name_latin="Dhaka", name_native="ঢাকা")
    assert dhaka.label() == "Dhaka"
    assert dhaka.label(Language.BN) == "ঢাকা"
    assert dhaka.label("bn") == "ঢাকা"


def test_label_falls_back_to_latin():
    khulna = Division(id="3", name_latin="Khulna")
    assert khulna.label(Language.BN) == "Khulna"
    assert Locality(latin="Banani").label("bn") == "Banani"


def test_unknown_language_raises():
    with pytest.raises(ValueError):
        BilingualName(latin="Dhaka").label("fr")


def test_models_are_frozen():
    selection = Selection(division_id="6")
    with pytest.raises(ValidationError):
        selection.division_id = "1"
    with pytest.raises(ValidationError):
        Locality(latin="A", native="ক").latin = "B"


def test_district_requires_parent():
    with pytest.raises(ValidationError):
        District(id="47", name_latin="Dhaka")


def test_ids_keep_source_type():
    assert District(id=41, name_latin="Gazipur", parent_division_id=6).parent_division_id == 6
    assert Selection(division_id="6").division_id == "6"


def test_models_are_hashable():
    assert len({Locality(latin="A", native="ক"), Locality(latin="A", native="ক")}) == 1
