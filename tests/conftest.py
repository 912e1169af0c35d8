"""Shared builders for provider-shaped geocoding results."""

from typing import Dict, List, Optional

import pytest


def component(long_name: str, *types: str, short_name: Optional[str] = None) -> Dict:
    return {"long_name": long_name, "short_name": short_name or long_name, "types": list(types)}


def geocode_result(
    formatted_address: str,
    location_type: str = "ROOFTOP",
    partial_match: bool = False,
    types: Optional[List[str]] = None,
    components: Optional[List[Dict]] = None,
) -> Dict:
    result = {
        "formatted_address": formatted_address,
        "geometry": {"location_type": location_type},
        "types": types if types is not None else ["street_address"],
        "address_components": components or [],
    }
    if partial_match:
        result["partial_match"] = True
    return result


def amphitheatre_components() -> List[Dict]:
    return [
        component("1600", "street_number"),
        component("Amphitheatre Pkwy", "route"),
        component("Mountain View", "locality", "political"),
        component("Santa Clara County", "administrative_area_level_2", "political"),
        component("California", "administrative_area_level_1", "political", short_name="CA"),
        component("United States", "country", "political", short_name="US"),
        component("94043", "postal_code"),
    ]


@pytest.fixture()
def amphitheatre_result() -> Dict:
    return geocode_result(
        "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
        components=amphitheatre_components(),
    )


@pytest.fixture()
def country_fallback_result() -> Dict:
    return geocode_result(
        "United States",
        location_type="APPROXIMATE",
        partial_match=True,
        types=["country", "political"],
        components=[component("United States", "country", "political", short_name="US")],
    )
