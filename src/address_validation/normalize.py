from __future__ import annotations

import re
from typing import Any, Dict

from .exceptions import InvalidAddressPayload

# Whole-word rewrites applied before comparing an input with a provider result.
# Candidates for re-tuning against real traffic.
STREET_ABBREVIATIONS: Dict[str, str] = {
    "road": "rd",
    "street": "st",
    "avenue": "ave",
    "mountain": "mtn",
}

MAX_ADDRESS_LENGTH = 512

PUNCTUATION_PATTERN = re.compile(r"[.,]")
WHITESPACE_PATTERN = re.compile(r"\s+")
ABBREVIATION_PATTERNS = [
    (re.compile(rf"\b{word}\b", re.ASCII), abbreviation) for word, abbreviation in STREET_ABBREVIATIONS.items()
]
CONTROL_CHARACTER_PATTERN = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
LINE_BREAK_PATTERN = re.compile(r"[\r\n\t]+")


def normalize_for_comparison(text: str) -> str:
    if not text:
        return ""

    normalized = PUNCTUATION_PATTERN.sub("", str(text).lower())
    for pattern, abbreviation in ABBREVIATION_PATTERNS:
        normalized = pattern.sub(abbreviation, normalized)
    return WHITESPACE_PATTERN.sub(" ", normalized).strip()


def sanitize_address(raw: Any) -> str:
    """Validate a free-form address from a request body and return its cleaned form.

    NUL characters are dropped, CR/LF/TAB become spaces and whitespace runs
    collapse. Other control characters, empty input and input longer than
    ``MAX_ADDRESS_LENGTH`` (measured before cleaning) are rejected.
    """

    if not isinstance(raw, str):
        raise InvalidAddressPayload("'address' must be a string")

    without_nul = raw.replace("\x00", "")
    if CONTROL_CHARACTER_PATTERN.search(without_nul):
        raise InvalidAddressPayload("'address' contains invalid control characters")

    collapsed = WHITESPACE_PATTERN.sub(" ", LINE_BREAK_PATTERN.sub(" ", without_nul)).strip()
    if not collapsed:
        raise InvalidAddressPayload("'address' must be a non-empty string")

    if len(raw) > MAX_ADDRESS_LENGTH:
        raise InvalidAddressPayload(f"'address' exceeds {MAX_ADDRESS_LENGTH} characters")

    return collapsed
