from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .scorer import ComparisonBreakdown


class LocationType(str, Enum):
    """Precision tier reported by the geocoding provider."""

    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LocationType":
        if not value:
            return cls.OTHER
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class RawComponent:
    """One entry of a provider ``address_components`` list."""

    long_name: str = ""
    short_name: str = ""
    tags: frozenset = frozenset()

    def value(self, abbreviated: bool = False) -> str:
        return self.short_name if abbreviated else self.long_name

    @classmethod
    def from_result(cls, record: Mapping[str, Any]) -> "RawComponent":
        long_name = record.get("long_name") or ""
        return cls(
            long_name=long_name,
            short_name=record.get("short_name") or long_name,
            tags=frozenset(record.get("types") or ()),
        )


@dataclass(frozen=True)
class Candidate:
    """A single geocoding result, as returned by the provider."""

    formatted_address: str
    is_partial_match: bool = False
    location_type: LocationType = LocationType.OTHER
    types: frozenset = frozenset()
    components: Tuple[RawComponent, ...] = ()

    @classmethod
    def from_result(cls, record: Mapping[str, Any]) -> "Candidate":
        """Build a candidate from a provider-native result record."""
        geometry = record.get("geometry") or {}
        return cls(
            formatted_address=record.get("formatted_address") or "",
            is_partial_match=bool(record.get("partial_match", False)),
            location_type=LocationType.parse(geometry.get("location_type")),
            types=frozenset(record.get("types") or ()),
            components=tuple(
                RawComponent.from_result(item) for item in record.get("address_components") or ()
            ),
        )


@dataclass(frozen=True)
class ExtractedComponents:
    """Normalized subset of a candidate's components."""

    street_number: Optional[str] = None
    street_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None

    def has_locating_detail(self) -> bool:
        """True when anything finer than state level is present."""
        return any((self.street_number, self.street_name, self.city, self.postal_code))

    def as_dict(self) -> Dict[str, str]:
        fields = {
            "street_number": self.street_number,
            "street_name": self.street_name,
            "city": self.city,
            "state": self.state,
            "zipCode": self.postal_code,
        }
        return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True)
class Exact:
    formatted_address: str
    components: ExtractedComponents
    comparison: Optional[ComparisonBreakdown] = None

    status = "VALIDATED"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "exactMatch": {
                "formatted_address": self.formatted_address,
                "components": self.components.as_dict(),
            },
        }


@dataclass(frozen=True)
class Corrected:
    alternatives: Tuple[str, ...]
    comparison: Optional[ComparisonBreakdown] = None

    status = "CORRECTED"

    def __post_init__(self) -> None:
        if not self.alternatives:
            raise ValueError("Corrected outcome requires at least one alternative")
        object.__setattr__(self, "alternatives", tuple(self.alternatives))

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "possibleMatches": list(self.alternatives)}


@dataclass(frozen=True)
class Unverifiable:
    message: str

    status = "UNVERIFIABLE"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message}


ClassificationOutcome = Union[Exact, Corrected, Unverifiable]


def candidates_from_results(records: Optional[Sequence[Mapping[str, Any]]]) -> List[Candidate]:
    return [Candidate.from_result(record) for record in records or ()]
