"""Provider status handling for Google geocoding responses."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .exceptions import (
    GeocodingAccessDenied,
    GeocodingQuotaExceeded,
    GeocodingRequestInvalid,
    GeocodingUnavailable,
    UnexpectedGeocodingStatus,
)

logger = logging.getLogger(__name__)


class ProviderStatus(str, Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def check_status(raw: Optional[str]) -> ProviderStatus:
    """
    Return the status of a provider response that may be classified.

    Only ``OK`` and ``ZERO_RESULTS`` come back; every other status raises the
    matching GeocodingError subclass. Unrecognized statuses raise
    UnexpectedGeocodingStatus.
    """
    try:
        status = ProviderStatus(raw)
    except ValueError:
        logger.warning("geocoding.unexpected_status", extra={"status": raw})
        raise UnexpectedGeocodingStatus(str(raw)) from None

    if status is ProviderStatus.OK or status is ProviderStatus.ZERO_RESULTS:
        return status

    if status is ProviderStatus.OVER_QUERY_LIMIT:
        logger.warning("geocoding.over_query_limit")
        raise GeocodingQuotaExceeded("Geocoding quota exceeded")
    elif status is ProviderStatus.OVER_DAILY_LIMIT:
        logger.warning("geocoding.over_daily_limit")
        raise GeocodingAccessDenied(
            "Geocoding request denied: invalid/missing key, billing, or usage cap"
        )
    elif status is ProviderStatus.REQUEST_DENIED:
        logger.warning("geocoding.request_denied")
        raise GeocodingAccessDenied("Geocoding request denied")
    elif status is ProviderStatus.INVALID_REQUEST:
        logger.warning("geocoding.invalid_request")
        raise GeocodingRequestInvalid("Invalid geocoding request: missing or malformed query")
    elif status is ProviderStatus.UNKNOWN_ERROR:
        logger.warning("geocoding.unknown_error")
        raise GeocodingUnavailable("Geocoding service error, try again later")
    else:
        logger.warning("geocoding.unexpected_status", extra={"status": status.value})
        raise UnexpectedGeocodingStatus(status.value)
