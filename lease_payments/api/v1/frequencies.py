"""GET /v1/frequencies - Supported payment frequencies"""

from fastapi import APIRouter

from lease_payments.api.dependencies import resolve_frequency
from lease_payments.api.v1.schemas import FrequencyListResponse, FrequencySchema
from lease_payments.domain.frequencies import list_payment_frequencies

router = APIRouter()


@router.get("/frequencies", response_model=FrequencyListResponse)
def get_frequencies():
    """List every supported payment frequency"""
    return FrequencyListResponse(
        frequencies=[FrequencySchema.model_validate(f) for f in list_payment_frequencies()]
    )


@router.get("/frequencies/{value}", response_model=FrequencySchema)
def get_frequency(value: str):
    """Fetch a single frequency; unknown keys are a 404, never a silent default"""
    return FrequencySchema.model_validate(resolve_frequency(value, status_code=404))
