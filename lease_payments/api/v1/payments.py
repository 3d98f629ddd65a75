"""POST /v1/payments/status - Effective status of a lease's payments"""

from datetime import date
from fastapi import APIRouter, Depends

from lease_payments.api.v1.schemas import (
    PaymentSchema,
    PaymentStatsSchema,
    StatusRequest,
    StatusResponse,
    TypeTotalsSchema,
)
from lease_payments.api.dependencies import get_settings
from lease_payments.config import Settings
from lease_payments.domain.models import Payment
from lease_payments.domain.status import (
    annotate_payments,
    sort_payments,
    summarize_payments,
    totals_by_type,
)
from lease_payments.infrastructure.observability.metrics import record_statuses

router = APIRouter()


@router.post("/payments/status", response_model=StatusResponse)
def classify_payments(request_body: StatusRequest, settings: Settings = Depends(get_settings)):
    """
    Annotate payments with their effective status for display.

    Statuses are recomputed from due date and payment date on every call;
    any effective_status sent by the caller is ignored.

    Returns:
        Sorted payments with effective status, aggregate stats and
        totals per payment type
    """
    reference_date = request_body.reference_date or date.today()
    grace_period_days = (
        request_body.grace_period_days
        if request_body.grace_period_days is not None
        else settings.default_grace_period_days
    )

    payments = [
        Payment(**p.model_dump(exclude={"effective_status"}))
        for p in request_body.payments
    ]
    annotated = annotate_payments(payments, grace_period_days, reference_date)
    record_statuses(p.effective_status.value for p in annotated)

    return StatusResponse(
        reference_date=reference_date,
        grace_period_days=grace_period_days,
        payments=[
            PaymentSchema.model_validate(p)
            for p in sort_payments(annotated, request_body.sort_field, request_body.descending)
        ],
        stats=PaymentStatsSchema.model_validate(summarize_payments(annotated)),
        totals_by_type={
            payment_type: TypeTotalsSchema.model_validate(totals)
            for payment_type, totals in totals_by_type(annotated).items()
        },
    )
