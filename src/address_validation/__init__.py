"""US address validation on top of the Google geocoder."""

from .client import GeocodingClient
from .components import (
    Candidate,
    ClassificationOutcome,
    Corrected,
    Exact,
    ExtractedComponents,
    LocationType,
    RawComponent,
    Unverifiable,
)
from .engine import ResultClassifier, classify
from .scorer import compare_addresses

__all__ = [
    "Candidate",
    "ClassificationOutcome",
    "Corrected",
    "Exact",
    "ExtractedComponents",
    "GeocodingClient",
    "LocationType",
    "RawComponent",
    "ResultClassifier",
    "Unverifiable",
    "classify",
    "compare_addresses",
]
