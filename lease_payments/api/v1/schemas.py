"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import Dict, List, Literal, Optional

from lease_payments.domain.models import PaymentStatus, PeriodUnit


class FrequencySchema(BaseModel):
    """Supported payment frequency"""

    model_config = ConfigDict(from_attributes=True)

    value: str
    label: str
    period_unit: PeriodUnit
    period_amount: int
    days: int


class FrequencyListResponse(BaseModel):
    """Response for GET /v1/frequencies"""

    frequencies: List[FrequencySchema]


class DueDateRequest(BaseModel):
    """Request body for POST /v1/due-date"""

    payment_start_date: date
    frequency: str = Field(default="monthly", min_length=1)
    payment_day: Optional[int] = Field(default=None, ge=1, le=31, description="Day-of-month override")
    reference_date: Optional[date] = Field(default=None, description="Defaults to today")


class DueDateResponse(BaseModel):
    """Response for POST /v1/due-date"""

    due_date: date
    frequency: FrequencySchema


class PaymentSchema(BaseModel):
    """Single payment, as stored by the caller"""

    model_config = ConfigDict(from_attributes=True)

    due_date: Optional[date] = None
    amount_cents: int = Field(..., ge=0)
    payment_type: str = "rent"
    payment_date: Optional[date] = None
    notes: Optional[str] = None
    lease_id: Optional[str] = None
    payment_method: Optional[str] = None
    is_auto_generated: bool = False
    effective_status: Optional[PaymentStatus] = None


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/schedule"""

    lease_id: Optional[str] = None
    payment_start_date: date
    end_date: Optional[date] = None
    frequency: str = Field(default="monthly", min_length=1)
    payment_day: Optional[int] = Field(default=None, ge=1, le=31)
    rent_cents: int = Field(default=0, ge=0)
    security_deposit_cents: int = Field(default=0, ge=0)
    agency_fee_cents: int = Field(default=0, ge=0)
    initial_as_paid: bool = False
    reference_date: Optional[date] = Field(default=None, description="Defaults to today")
    existing_due_dates: List[date] = Field(default_factory=list, description="Rent due dates already stored")
    existing_payment_types: List[str] = Field(default_factory=list, description="Initial payment types already stored")


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    lease_id: Optional[str] = None
    frequency: FrequencySchema
    next_due_date: date
    payments: List[PaymentSchema]


class StatusRequest(BaseModel):
    """Request body for POST /v1/payments/status"""

    payments: List[PaymentSchema]
    grace_period_days: Optional[int] = Field(default=None, ge=0, le=365, description="Defaults to the configured grace period")
    reference_date: Optional[date] = Field(default=None, description="Defaults to today")
    sort_field: Literal["due_date", "effective_status", "amount_cents", "payment_type", "payment_date"] = "due_date"
    descending: bool = True


class PaymentStatsSchema(BaseModel):
    """Aggregate payment figures"""

    model_config = ConfigDict(from_attributes=True)

    total_due_cents: int
    total_paid_cents: int
    balance_cents: int
    paid_payments: int
    pending_payments: int
    late_payments: int
    advanced_payments: int
    undefined_payments: int


class TypeTotalsSchema(BaseModel):
    """Amounts for one payment type"""

    model_config = ConfigDict(from_attributes=True)

    total_cents: int
    paid_cents: int
    pending_cents: int


class StatusResponse(BaseModel):
    """Response for POST /v1/payments/status"""

    reference_date: date
    grace_period_days: int
    payments: List[PaymentSchema]
    stats: PaymentStatsSchema
    totals_by_type: Dict[str, TypeTotalsSchema]
