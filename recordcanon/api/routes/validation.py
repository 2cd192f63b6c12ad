"""POST /validate/address — geocoder-backed address validation.

Unset retry parameters fall back to the ``VALIDATION_*`` settings.  The
response always succeeds: when the provider cannot answer, ``source`` says
whether the local canonical form or the original input was returned.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from recordcanon.api.deps import get_address_validator
from recordcanon.core.settings import get_settings
from recordcanon.geocoding.validator import AddressValidator, ValidationRequest

router = APIRouter(prefix="/validate", tags=["validation"])


class ValidateAddressBody(BaseModel):
    address: str
    retry_count: int | None = Field(default=None, ge=0, le=10)
    delay_s: float | None = Field(default=None, ge=0, le=60)
    timeout_s: float | None = Field(default=None, gt=0, le=120)
    fallback_to_local: bool | None = None


@router.post("/address", summary="Validate an address with the geocoding provider")
def validate_address(
    body: ValidateAddressBody,
    validator: AddressValidator = Depends(get_address_validator),
) -> dict[str, str | int]:
    settings = get_settings()
    request = ValidationRequest(
        address=body.address,
        retry_count=settings.validation_retry_count if body.retry_count is None else body.retry_count,
        delay_s=settings.validation_delay_s if body.delay_s is None else body.delay_s,
        timeout_s=settings.validation_timeout_s if body.timeout_s is None else body.timeout_s,
        fallback_to_local=(
            settings.validation_fallback_to_local
            if body.fallback_to_local is None
            else body.fallback_to_local
        ),
    )
    outcome = validator.validate(request)
    return {
        "validated": outcome.value,
        "source": outcome.source,
        "attempts": outcome.attempts,
    }
