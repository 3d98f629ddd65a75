"""Dependency injection for FastAPI endpoints"""

from fastapi import HTTPException, Request
from lease_payments.config import Settings, settings
from lease_payments.domain.exceptions import UnknownFrequencyError
from lease_payments.domain.frequencies import resolve_payment_frequency
from lease_payments.domain.models import PaymentFrequency
from lease_payments.infrastructure.observability.metrics import unknown_frequency_counter


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def resolve_frequency(value: str, status_code: int = 422) -> PaymentFrequency:
    """Strict frequency lookup for request input; unknown keys become an HTTP error"""
    try:
        return resolve_payment_frequency(value)
    except UnknownFrequencyError as e:
        unknown_frequency_counter.inc()
        raise HTTPException(status_code=status_code, detail=str(e))
