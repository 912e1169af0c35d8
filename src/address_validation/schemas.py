"""Request and response models for the HTTP API."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from .components import ClassificationOutcome
from .exceptions import InvalidAddressPayload
from .normalize import sanitize_address

SOURCE_NAME = "Google Maps Geocoding API"

# Error type the API turns back into an InvalidAddressPayload message.
ADDRESS_ERROR_TYPE = "address_payload"


class ValidateAddressRequest(BaseModel):
    """Request model for single address validation."""

    address: Any = Field(
        default=None,
        validate_default=True,
        description="Free-form US address",
        examples=["1600 Amphitheatre Pkwy, Mountain View, CA"],
    )

    @field_validator("address", mode="before")
    @classmethod
    def clean_address(cls, value: Any) -> str:
        try:
            return sanitize_address(value)
        except InvalidAddressPayload as exc:
            raise PydanticCustomError(ADDRESS_ERROR_TYPE, exc.message) from exc


class AddressComponentsModel(BaseModel):
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipCode: Optional[str] = None


class ExactMatchModel(BaseModel):
    formatted_address: str
    components: AddressComponentsModel


class ResponseMetadata(BaseModel):
    source: str = SOURCE_NAME
    country_restricted_to: str = "US"
    confidence_score: Optional[float] = None
    fuzzy_score: Optional[float] = None


class ValidateAddressResponse(BaseModel):
    """Response model for single address validation.

    Exactly one of ``exactMatch``, ``possibleMatches`` and ``message`` is set,
    depending on ``status``.
    """

    original_input: str
    status: Literal["VALIDATED", "CORRECTED", "UNVERIFIABLE"]
    exactMatch: Optional[ExactMatchModel] = None
    possibleMatches: Optional[List[str]] = None
    message: Optional[str] = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    @classmethod
    def from_outcome(cls, original_input: str, outcome: ClassificationOutcome) -> "ValidateAddressResponse":
        metadata = ResponseMetadata()
        comparison = getattr(outcome, "comparison", None)
        if comparison is not None:
            metadata = ResponseMetadata(
                confidence_score=round(comparison.similarity, 3),
                fuzzy_score=round(comparison.fuzzy_score, 3),
            )
        return cls(original_input=original_input, metadata=metadata, **outcome.to_dict())
