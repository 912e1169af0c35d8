"""Geocoding client: calls the provider and classifies what it returns."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .components import ClassificationOutcome, Unverifiable, candidates_from_results
from .config import DEFAULT_GEOCODING_URL
from .engine import NO_ADDRESS_FOUND, ResultClassifier
from .exceptions import (
    GeocodingAccessDenied,
    GeocodingQuotaExceeded,
    GeocodingUnavailable,
    GeocodingUpstreamError,
)
from .status import ProviderStatus, check_status

logger = logging.getLogger(__name__)

COUNTRY_RESTRICTION = "country:US"


class GeocodingClient:
    """
    US-restricted client for the Google Maps Geocoding API.

    Owns an ``httpx.Client`` unless one is supplied. Provider failures are
    raised as GeocodingError subclasses; everything else comes back as a
    classification outcome.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_GEOCODING_URL,
        timeout: float = 10.0,
        classifier: Optional[ResultClassifier] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._classifier = classifier or ResultClassifier()
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    # ── Public API ────────────────────────────────────────────────

    def validate(self, address: str) -> ClassificationOutcome:
        """Geocode *address* and classify the provider's answer."""
        payload = self.geocode(address)
        status = check_status(payload.get("status"))
        if status is ProviderStatus.ZERO_RESULTS:
            return Unverifiable(NO_ADDRESS_FOUND)

        candidates = candidates_from_results(payload.get("results"))
        outcome = self._classifier.classify(candidates, address)
        logger.debug(
            "geocoding.classified",
            extra={"candidates": len(candidates), "outcome": outcome.status},
        )
        return outcome

    def geocode(self, address: str) -> Dict[str, Any]:
        """Return the raw provider payload for *address*."""
        params = {
            "address": address,
            "components": COUNTRY_RESTRICTION,
            "key": self._api_key,
        }
        try:
            response = self._http.get(self._base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise _http_status_error(exc.response.status_code) from exc
        except httpx.RequestError as exc:
            logger.error("geocoding.transport_error", extra={"error": str(exc)})
            raise GeocodingUpstreamError("Geocoding upstream unavailable") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("geocoding.invalid_body")
            raise GeocodingUpstreamError("Geocoding upstream returned an unreadable response") from exc
        if not isinstance(payload, dict):
            logger.error("geocoding.invalid_body")
            raise GeocodingUpstreamError("Geocoding upstream returned an unreadable response")
        return payload

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> GeocodingClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def _http_status_error(status_code: int) -> Exception:
    logger.error("geocoding.http_error", extra={"status": status_code})
    if status_code == 403:
        return GeocodingAccessDenied("Geocoding access forbidden")
    if status_code == 429:
        return GeocodingQuotaExceeded("Geocoding rate limited")
    if status_code >= 500:
        return GeocodingUnavailable("Geocoding upstream error")
    return GeocodingUpstreamError("Geocoding upstream unavailable")
