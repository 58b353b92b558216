"""Tests for sitegen/models"""

import dataclasses

import pytest

from sitegen.errors import ConfigIntegrityError
from sitegen.models import CityEntry, PageDescriptor, PageKind


class TestCityEntry:
    def test_paths(self, san_francisco):
        assert san_francisco.key == "ca/san-francisco"
        assert san_francisco.base_path == "/ca/san-francisco"

    def test_missing_state_slug_raises(self):
        with pytest.raises(ConfigIntegrityError, match="state_slug"):
            CityEntry(state_slug="", city_slug="fresno", city_name="Fresno")

    def test_missing_city_slug_raises(self):
        with pytest.raises(ConfigIntegrityError, match="city_slug"):
            CityEntry(state_slug="ca", city_slug="", city_name="Fresno")

    def test_unslugged_identity_raises(self):
        with pytest.raises(ConfigIntegrityError):
            CityEntry(state_slug="ca", city_slug="Palm Springs")

    def test_is_immutable(self, fresno):
        with pytest.raises(dataclasses.FrozenInstanceError):
            fresno.city_slug = "clovis"

    def test_from_dict(self):
        city = CityEntry.from_dict({
            "state_slug": "ca",
            "city_slug": "irvine",
            "city_name": "Irvine",
            "hospitals": ["Hoag Hospital Irvine"],
        })
        assert city.hospitals == ("Hoag Hospital Irvine",)
        assert city.neighborhoods == ()
        assert city.venues == ()

    def test_from_dict_rejects_non_list_names(self):
        with pytest.raises(ConfigIntegrityError, match="hospitals"):
            CityEntry.from_dict({"state_slug": "ca", "city_slug": "irvine", "hospitals": "Hoag"})

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ConfigIntegrityError):
            CityEntry.from_dict(["ca", "irvine"])


class TestPageDescriptor:
    def test_global_home_has_no_city(self):
        home = PageDescriptor(path="/", kind=PageKind.HOME)
        assert home.city is None

    def test_descriptors_compare_by_value(self, fresno):
        a = PageDescriptor("/ca/fresno/", PageKind.CITY_HOME, fresno)
        b = PageDescriptor("/ca/fresno/", PageKind.CITY_HOME, fresno)
        assert a == b
