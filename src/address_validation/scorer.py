from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rapidfuzz import fuzz

from .normalize import normalize_for_comparison

# Word-overlap ratio a provider result must exceed to confirm the input.
# Candidate for empirical re-tuning.
SIMILARITY_THRESHOLD = 0.6


class MatchVerdict(str, Enum):
    VALIDATED = "validated"
    CORRECTED = "corrected"


@dataclass(frozen=True)
class ComparisonBreakdown:
    verdict: MatchVerdict
    similarity: float
    fuzzy_score: float
    normalized_input: str
    normalized_result: str

    @property
    def validated(self) -> bool:
        return self.verdict is MatchVerdict.VALIDATED


def _word_overlap(left: str, right: str) -> float:
    left_words = set(left.split(" "))
    right_words = set(right.split(" "))
    common = len(left_words & right_words)
    return common / max(len(left_words), len(right_words))


def compare_addresses(
    address_input: str,
    result: str,
    threshold: float = SIMILARITY_THRESHOLD,
) -> ComparisonBreakdown:
    """Decide whether a provider's formatted address confirms the user's input.

    Both strings are normalized first. Identical forms are validated outright;
    otherwise the share of common words (set semantics, divided by the larger
    word set) must exceed ``threshold``. ``fuzzy_score`` is reported for
    diagnostics only and does not affect the verdict.
    """

    normalized_input = normalize_for_comparison(address_input)
    normalized_result = normalize_for_comparison(result)
    fuzzy_score = fuzz.token_sort_ratio(normalized_input, normalized_result) / 100.0

    if normalized_input == normalized_result:
        similarity = 1.0
        verdict = MatchVerdict.VALIDATED
    else:
        similarity = _word_overlap(normalized_input, normalized_result)
        verdict = MatchVerdict.VALIDATED if similarity > threshold else MatchVerdict.CORRECTED

    return ComparisonBreakdown(
        verdict=verdict,
        similarity=similarity,
        fuzzy_score=fuzzy_score,
        normalized_input=normalized_input,
        normalized_result=normalized_result,
    )
