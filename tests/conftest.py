"""Shared test fixtures."""

from datetime import date

import pytest

from sitegen.catalog import CatalogRegistry
from sitegen.models import CatalogItem, CityEntry

BUILD_DATE = date(2026, 3, 1)


def _items(prefix, count):
    return [CatalogItem(slug=f"{prefix}-{i}", name=f"{prefix.title()} {i}") for i in range(count)]


@pytest.fixture
def build_date():
    return BUILD_DATE


@pytest.fixture
def san_francisco():
    return CityEntry(
        state_slug="ca",
        city_slug="san-francisco",
        city_name="San Francisco",
        state_name="California",
        hospitals=("UCSF Medical Center", "St. Mary's Medical Center"),
        neighborhoods=("Mission", "Haight-Ashbury", "SoMa"),
        funeral_homes=("Duggan's Serra Mortuary",),
        venues=("City Hall", "The Presidio"),
    )


@pytest.fixture
def fresno():
    return CityEntry(
        state_slug="ca",
        city_slug="fresno",
        city_name="Fresno",
        hospitals=("Valley Children's Hospital",),
        neighborhoods=(),
    )


@pytest.fixture
def sample_registry(san_francisco, fresno):
    """Two cities with small catalogs."""
    return CatalogRegistry(
        cities=[san_francisco, fresno],
        occasions=[CatalogItem("birthday", "Birthday"), CatalogItem("sympathy", "Sympathy")],
        product_types=[CatalogItem("plants", "Plants")],
        seasonal=[CatalogItem("easter", "Easter")],
        funeral_types=[CatalogItem("funeral-wreaths", "Funeral Wreaths")],
        guides=[CatalogItem("flower-care", "How to Keep Flowers Fresh Longer")],
        blog_posts=[
            CatalogItem("meaning-of-flower-colors"),
            CatalogItem("sympathy-flowers-etiquette"),
        ],
    )


@pytest.fixture
def make_registry():
    """
    Factory for registries of a given shape.

    Hospital and neighborhood names are unique per city, so the free-text
    dimensions never collide.
    """
    def factory(cities=1, occasions=0, product_types=0, seasonal=0, guides=0,
                funeral_types=0, blog_posts=0, hospitals=0, neighborhoods=0):
        city_entries = [
            CityEntry(
                state_slug="ca",
                city_slug=f"city-{c}",
                city_name=f"City {c}",
                hospitals=tuple(f"Hospital {h}" for h in range(hospitals)),
                neighborhoods=tuple(f"Neighborhood {n}" for n in range(neighborhoods)),
            )
            for c in range(cities)
        ]
        return CatalogRegistry(
            cities=city_entries,
            occasions=_items("occasion", occasions),
            product_types=_items("type", product_types),
            seasonal=_items("season", seasonal),
            funeral_types=_items("funeral", funeral_types),
            guides=_items("guide", guides),
            blog_posts=_items("post", blog_posts),
        )
    return factory


@pytest.fixture
def config_dir(tmp_path):
    """A minimal, valid YAML config directory."""
    (tmp_path / "cities.yaml").write_text(
        "cities:\n"
        "  - state_slug: ca\n"
        "    city_slug: oakland\n"
        "    city_name: Oakland\n"
        "    hospitals:\n"
        "      - \"Highland Hospital\"\n"
        "      - \"UCSF Benioff Children's Hospital Oakland\"\n"
        "    neighborhoods:\n"
        "      - \"Lake Merritt\"\n",
        encoding="utf-8",
    )
    (tmp_path / "categories.yaml").write_text(
        "occasions:\n"
        "  - {slug: birthday, name: Birthday}\n"
        "product_types:\n"
        "  - {slug: plants, name: Plants}\n"
        "seasonal:\n"
        "  - {slug: easter, name: Easter}\n"
        "funeral_types:\n"
        "  - {slug: funeral-urn, name: Urn Arrangements}\n",
        encoding="utf-8",
    )
    (tmp_path / "guides.yaml").write_text(
        "guides:\n  - {slug: flower-care, title: Flower Care}\n", encoding="utf-8"
    )
    (tmp_path / "blog_posts.yaml").write_text(
        "blog_posts:\n  - {slug: seasonal-flowers-guide, title: Seasonal Flowers}\n", encoding="utf-8"
    )
    (tmp_path / "site.yaml").write_text(
        "site_url: https://flowers.example.com\n"
        "include_venues: true\n",
        encoding="utf-8",
    )
    return tmp_path
