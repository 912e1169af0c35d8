from __future__ import annotations

from typing import Optional, Sequence

from .components import ExtractedComponents, RawComponent


def first_component(
    components: Sequence[RawComponent],
    tag: str,
    abbreviated: bool = False,
) -> Optional[str]:
    """Return the value of the first component tagged ``tag``, if any."""
    for component in components:
        if tag in component.tags:
            return component.value(abbreviated)
    return None


def extract_components(components: Sequence[RawComponent]) -> ExtractedComponents:
    if not components:
        return ExtractedComponents()

    return ExtractedComponents(
        street_number=first_component(components, "street_number"),
        street_name=first_component(components, "route"),
        city=first_component(components, "locality") or first_component(components, "postal_town"),
        state=first_component(components, "administrative_area_level_1", abbreviated=True),
        postal_code=first_component(components, "postal_code"),
    )
