from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .components import Candidate, ClassificationOutcome, Corrected, Exact, Unverifiable
from .extractor import extract_components
from .scorer import SIMILARITY_THRESHOLD, compare_addresses
from .strategies import (
    CandidateFilter,
    CountryOnlyFallback,
    ExactMatchFilter,
    PossibleMatchFilter,
)

NO_ADDRESS_FOUND = "No address found."
NO_PRECISE_MATCH = "No precise US match found."


@dataclass
class ClassifierConfig:
    similarity_threshold: float = SIMILARITY_THRESHOLD
    fallback_filter: CandidateFilter = field(default_factory=CountryOnlyFallback)
    exact_filter: CandidateFilter = field(default_factory=ExactMatchFilter)
    possible_filter: CandidateFilter = field(default_factory=PossibleMatchFilter)


class ResultClassifier:
    """Turns the candidates of one provider response into a single outcome.

    Classification never raises: no match, ambiguity and country-level noise
    all end up as ``Unverifiable`` or ``Corrected``.
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        self.config = config or ClassifierConfig()

    def classify(self, candidates: Sequence[Candidate], original_input: str) -> ClassificationOutcome:
        if not candidates:
            return Unverifiable(NO_ADDRESS_FOUND)

        remaining = self.config.fallback_filter.reject(candidates)
        if not remaining:
            return Unverifiable(NO_PRECISE_MATCH)

        exact = self.config.exact_filter.select(remaining)
        if exact:
            # Provider order is authoritative; ties among rooftop hits are not broken.
            best = exact[0]
            comparison = compare_addresses(
                original_input,
                best.formatted_address,
                threshold=self.config.similarity_threshold,
            )
            if comparison.validated:
                return Exact(
                    formatted_address=best.formatted_address,
                    components=extract_components(best.components),
                    comparison=comparison,
                )
            return Corrected(alternatives=(best.formatted_address,), comparison=comparison)

        possible = self.config.possible_filter.select(remaining)
        if possible:
            return Corrected(alternatives=tuple(c.formatted_address for c in possible))

        return Unverifiable(NO_PRECISE_MATCH)


_default_classifier = ResultClassifier()


def classify(candidates: Sequence[Candidate], original_input: str) -> ClassificationOutcome:
    return _default_classifier.classify(candidates, original_input)
