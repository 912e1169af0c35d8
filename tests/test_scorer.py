import pytest

from address_validation.normalize import normalize_for_comparison
from address_validation.scorer import SIMILARITY_THRESHOLD, MatchVerdict, compare_addresses


def test_normalize_lowercases_strips_punctuation_and_abbreviates():
    assert normalize_for_comparison("123 Main Street, Apt. 4") == "123 main st apt 4"
    assert normalize_for_comparison("Mountain View Road") == "mtn view rd"
    assert normalize_for_comparison("  Fifth   Avenue,\tNew York ") == "fifth ave new york"


def test_word_boundaries_are_ascii_only():
    assert normalize_for_comparison("Éroad") == "érd"
    assert compare_addresses("éroad", "érd").verdict is MatchVerdict.VALIDATED


def test_normalize_only_rewrites_whole_words():
    assert normalize_for_comparison("Broadway") == "broadway"
    assert normalize_for_comparison("Streetsboro Roadside") == "streetsboro roadside"


@pytest.mark.parametrize(
    "text",
    [
        "1600 Amphitheatre Parkway, Mountain View, CA",
        "123 Main Street",
        "500 elm st dallas tx",
        "",
    ],
)
def test_normalize_is_idempotent(text):
    once = normalize_for_comparison(text)
    assert normalize_for_comparison(once) == once


def test_identical_addresses_validate():
    breakdown = compare_addresses("123 Main Street, Chicago", "123 main st chicago")
    assert breakdown.verdict is MatchVerdict.VALIDATED
    assert breakdown.similarity == 1.0
    assert breakdown.fuzzy_score == pytest.approx(1.0)


def test_mostly_overlapping_words_validate():
    breakdown = compare_addresses(
        "1600 amphitheatre pkwy mountain view ca",
        "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
    )
    assert breakdown.validated
    assert breakdown.similarity == pytest.approx(6 / 8)


def test_overlap_at_threshold_is_a_correction():
    breakdown = compare_addresses("100 oak st springfield il", "100 Oak St, Denver, CO")
    assert breakdown.similarity == pytest.approx(SIMILARITY_THRESHOLD)
    assert breakdown.verdict is MatchVerdict.CORRECTED


def test_repeated_words_count_once():
    breakdown = compare_addresses("main main main st", "Main St")
    assert breakdown.similarity == 1.0
    assert breakdown.validated


def test_unrelated_addresses_are_corrected():
    breakdown = compare_addresses("Main Street", "456 Oak Avenue, Other City, NY")
    assert breakdown.verdict is MatchVerdict.CORRECTED
    assert breakdown.similarity == 0.0
    assert 0.0 <= breakdown.fuzzy_score < 0.5


@pytest.mark.parametrize(
    "left, right",
    [
        ("123 Mian St", "123 Main St, Anytown, CA 90210, USA"),
        ("100 oak st springfield il", "100 Oak St, Denver, CO"),
        ("1600 amphitheatre pkwy mountain view ca", "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA"),
    ],
)
def test_comparison_is_symmetric(left, right):
    forward = compare_addresses(left, right)
    backward = compare_addresses(right, left)
    assert forward.verdict is backward.verdict
    assert forward.similarity == pytest.approx(backward.similarity)


def test_custom_threshold():
    breakdown = compare_addresses("100 oak st springfield il", "100 Oak St, Denver, CO", threshold=0.5)
    assert breakdown.validated
