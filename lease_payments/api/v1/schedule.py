"""POST /v1/due-date and POST /v1/schedule - Due date and schedule computation"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from lease_payments.api.v1.schemas import (
    DueDateRequest,
    DueDateResponse,
    FrequencySchema,
    PaymentSchema,
    ScheduleRequest,
    ScheduleResponse,
)
from lease_payments.api.dependencies import get_request_id, resolve_frequency
from lease_payments.domain.exceptions import InvalidDateError, InvalidScheduleError
from lease_payments.domain.models import Lease
from lease_payments.domain.schedule import (
    build_lease_schedule,
    calculate_next_due_date,
    next_due_date_for_lease,
)
from lease_payments.infrastructure.observability.logging import log_schedule_generated
from lease_payments.infrastructure.observability.metrics import record_schedule

router = APIRouter()


@router.post("/due-date", response_model=DueDateResponse)
def compute_due_date(request_body: DueDateRequest):
    """Next due date of a lease relative to the reference date"""
    frequency = resolve_frequency(request_body.frequency)

    due_date = calculate_next_due_date(
        request_body.payment_start_date,
        frequency,
        payment_day=request_body.payment_day,
        reference_date=request_body.reference_date,
    )

    return DueDateResponse(due_date=due_date, frequency=FrequencySchema.model_validate(frequency))


@router.post("/schedule", response_model=ScheduleResponse)
def generate_schedule(request_body: ScheduleRequest, request: Request):
    """
    Generate the payment schedule of a lease.

    Flow:
    1. Resolve the frequency (unknown keys are rejected)
    2. Build initial payments (deposit, agency fee) and recurring rent
    3. Skip due dates and initial payment types the caller already stored
    4. Return the new payments for the caller to persist
    """
    start_time = time.time()
    request_id = get_request_id(request)

    frequency = resolve_frequency(request_body.frequency)

    try:
        if request_body.end_date and request_body.end_date < request_body.payment_start_date:
            raise InvalidScheduleError("Lease end date is before the payment start date")

        lease = Lease(
            payment_start_date=request_body.payment_start_date,
            frequency=frequency.value,
            payment_day=request_body.payment_day,
            lease_id=request_body.lease_id,
            end_date=request_body.end_date,
            rent_cents=request_body.rent_cents,
            security_deposit_cents=request_body.security_deposit_cents,
            agency_fee_cents=request_body.agency_fee_cents,
        )

        payments = build_lease_schedule(
            lease,
            reference_date=request_body.reference_date,
            existing_due_dates=request_body.existing_due_dates,
            existing_types=request_body.existing_payment_types,
            initial_as_paid=request_body.initial_as_paid,
        )
        next_due_date = next_due_date_for_lease(lease, reference_date=request_body.reference_date)

    except (InvalidScheduleError, InvalidDateError) as e:
        logging.warning(f"Rejected schedule request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_schedule(frequency.value, (p.payment_type for p in payments))
    log_schedule_generated(
        request_id,
        request_body.lease_id,
        frequency.value,
        payments_generated=len(payments),
        existing_payments=len(request_body.existing_due_dates) + len(request_body.existing_payment_types),
        duration_ms=duration_ms,
    )

    return ScheduleResponse(
        lease_id=request_body.lease_id,
        frequency=FrequencySchema.model_validate(frequency),
        next_due_date=next_due_date,
        payments=[PaymentSchema.model_validate(p) for p in payments],
    )
