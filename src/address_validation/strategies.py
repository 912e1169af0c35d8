from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, List

from .components import Candidate, LocationType
from .extractor import extract_components

APPROXIMATE_LOCATION_TYPES: FrozenSet[LocationType] = frozenset(
    {
        LocationType.RANGE_INTERPOLATED,
        LocationType.GEOMETRIC_CENTER,
        LocationType.APPROXIMATE,
    }
)


class CandidateFilter(ABC):
    name: str

    @abstractmethod
    def accepts(self, candidate: Candidate) -> bool:
        raise NotImplementedError

    def select(self, candidates: Iterable[Candidate]) -> List[Candidate]:
        """Keep accepted candidates in provider order."""
        return [candidate for candidate in candidates if self.accepts(candidate)]

    def reject(self, candidates: Iterable[Candidate]) -> List[Candidate]:
        return [candidate for candidate in candidates if not self.accepts(candidate)]


class CountryOnlyFallback(CandidateFilter):
    """Partial matches the provider produced from its country bias alone.

    Junk input restricted to the US tends to come back as a bare
    "United States" result, typed ``country`` or carrying no component finer
    than the state.
    """

    name = "country_only"

    def accepts(self, candidate: Candidate) -> bool:
        if not candidate.is_partial_match:
            return False
        if "country" in candidate.types:
            return True
        return not extract_components(candidate.components).has_locating_detail()


class ExactMatchFilter(CandidateFilter):
    name = "exact"

    def accepts(self, candidate: Candidate) -> bool:
        return not candidate.is_partial_match and candidate.location_type is LocationType.ROOFTOP


class PossibleMatchFilter(CandidateFilter):
    name = "possible"

    def __init__(self, location_types: FrozenSet[LocationType] = APPROXIMATE_LOCATION_TYPES) -> None:
        self.location_types = location_types

    def accepts(self, candidate: Candidate) -> bool:
        return candidate.is_partial_match or candidate.location_type in self.location_types
