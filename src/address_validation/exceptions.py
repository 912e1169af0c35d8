"""Exception hierarchy for address_validation.

Every error carries the HTTP status code the API answers with.
"""

from __future__ import annotations

from typing import Any, Optional


class AddressValidationError(Exception):
    """Base exception for all address_validation errors."""

    status_code = 500

    def __init__(self, message: str, details: Any = None, status_code: Optional[int] = None):
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidAddressPayload(AddressValidationError):
    """The request body does not carry a usable address string."""

    status_code = 400


class RouteNotFound(AddressValidationError):
    status_code = 404

    def __init__(self, message: str = "Route not found", details: Any = None):
        super().__init__(message, details)


class GeocodingError(AddressValidationError):
    """The geocoding provider could not produce a usable response."""

    status_code = 502


class GeocodingQuotaExceeded(GeocodingError):
    status_code = 429


class GeocodingAccessDenied(GeocodingError):
    """Invalid or missing key, billing problem, or usage cap."""

    status_code = 403


class GeocodingRequestInvalid(GeocodingError):
    status_code = 400


class GeocodingUnavailable(GeocodingError):
    """Provider-side failure worth retrying later."""

    status_code = 503


class GeocodingUpstreamError(GeocodingError):
    """The provider could not be reached or answered with garbage."""

    status_code = 502


class UnexpectedGeocodingStatus(GeocodingError):
    status_code = 502

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Unexpected geocoding status: {status}")
