"""Payment status classification, sorting and aggregation"""

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from lease_payments.domain.exceptions import InvalidDateError
from lease_payments.domain.models import Payment, PaymentStats, PaymentStatus, TypeTotals
from lease_payments.utils.date_utils import DateLike, add_days, to_date, to_optional_date

DEFAULT_GRACE_PERIOD_DAYS = 5

# Most urgent first
STATUS_ORDER: Dict[PaymentStatus, int] = {
    PaymentStatus.LATE: 0,
    PaymentStatus.PENDING: 1,
    PaymentStatus.PAID: 2,
    PaymentStatus.ADVANCED: 3,
    PaymentStatus.UNDEFINED: 4,
}

PAYMENT_TYPES = ("deposit", "agency_fee", "rent", "other")

SETTLED_STATUSES = {PaymentStatus.PAID, PaymentStatus.ADVANCED}


def determine_payment_status(
    due_date: Optional[DateLike],
    payment_date: Optional[DateLike] = None,
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS,
    reference_date: Optional[DateLike] = None,
) -> PaymentStatus:
    """
    Classify a payment at reference_date (default: today).

    Evaluation order:
    1. No due date -> undefined
    2. Paid before the due date -> advanced
    3. Paid on or after the due date -> paid (never late once paid)
    4. Unpaid and more than grace_period_days past due -> late
    5. Otherwise -> pending
    """
    if grace_period_days < 0:
        raise ValueError(f"grace_period_days must be >= 0, got {grace_period_days}")

    due = to_optional_date(due_date)
    if due is None:
        return PaymentStatus.UNDEFINED

    paid_on = to_optional_date(payment_date)
    if paid_on is not None:
        return PaymentStatus.ADVANCED if paid_on < due else PaymentStatus.PAID

    reference = to_date(reference_date) if reference_date is not None else date.today()
    try:
        grace_end = add_days(due, grace_period_days)
    except InvalidDateError:
        # Grace window ends after 9999-12-31; no reference date can be past it
        return PaymentStatus.PENDING
    if reference > grace_end:
        return PaymentStatus.LATE

    return PaymentStatus.PENDING


def effective_status_of(
    payment: Payment,
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS,
    reference_date: Optional[DateLike] = None,
) -> PaymentStatus:
    return determine_payment_status(
        payment.due_date, payment.payment_date, grace_period_days, reference_date
    )


def annotate_payments(
    payments: Iterable[Payment],
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS,
    reference_date: Optional[DateLike] = None,
) -> List[Payment]:
    """Copies of payments with effective_status computed at reference_date"""
    reference = to_date(reference_date) if reference_date is not None else date.today()
    return [
        replace(p, effective_status=effective_status_of(p, grace_period_days, reference))
        for p in payments
    ]


def mark_payment_paid(
    payment: Payment,
    paid_on: Optional[DateLike] = None,
) -> Payment:
    """Copy of payment recorded as paid on paid_on (default: today)"""
    payment_date = to_optional_date(paid_on) or date.today()
    paid = replace(payment, payment_date=payment_date)
    paid.effective_status = effective_status_of(paid, reference_date=payment_date)
    return paid


def _status_rank(payment: Payment) -> int:
    status = payment.effective_status or PaymentStatus.UNDEFINED
    return STATUS_ORDER.get(status, STATUS_ORDER[PaymentStatus.UNDEFINED])


def _field_key(payment: Payment, field: str) -> Tuple[bool, Any]:
    value = getattr(payment, field)
    return (value is not None, value)


def sort_payments(
    payments: Iterable[Payment],
    field: str = "due_date",
    descending: bool = True,
) -> List[Payment]:
    """
    Sort payments for display (default: newest due date first).

    - due_date: payments without a due date sort as the oldest
    - effective_status: late, pending, paid, advanced, undefined
    - any other Payment attribute: by value, None sorting lowest
    """
    if field == "due_date":
        key = lambda p: p.due_date or date.min
    elif field == "effective_status":
        key = _status_rank
    elif field in Payment.__dataclass_fields__:
        key = lambda p: _field_key(p, field)
    else:
        raise ValueError(f"Cannot sort payments by {field!r}")

    return sorted(payments, key=key, reverse=descending)


def summarize_payments(payments: Iterable[Payment]) -> PaymentStats:
    """
    Aggregate amounts and status counts.

    Payments are counted by their effective_status (payments that were never
    annotated count as undefined). Paid and advanced payments make up the
    total paid; balance is what remains of the total due.
    """
    stats = PaymentStats()
    counters = {
        PaymentStatus.PAID: "paid_payments",
        PaymentStatus.PENDING: "pending_payments",
        PaymentStatus.LATE: "late_payments",
        PaymentStatus.ADVANCED: "advanced_payments",
        PaymentStatus.UNDEFINED: "undefined_payments",
    }

    for payment in payments:
        status = payment.effective_status or PaymentStatus.UNDEFINED
        stats.total_due_cents += payment.amount_cents
        if status in SETTLED_STATUSES:
            stats.total_paid_cents += payment.amount_cents
        counter = counters[status]
        setattr(stats, counter, getattr(stats, counter) + 1)

    stats.balance_cents = stats.total_due_cents - stats.total_paid_cents
    return stats


def totals_by_type(payments: Iterable[Payment]) -> Dict[str, TypeTotals]:
    """Amounts per payment type; unrecognized types are folded into "other" """
    totals = {payment_type: TypeTotals() for payment_type in PAYMENT_TYPES}

    for payment in payments:
        bucket = totals.get(payment.payment_type, totals["other"])
        status = payment.effective_status or PaymentStatus.UNDEFINED
        bucket.total_cents += payment.amount_cents
        if status in SETTLED_STATUSES:
            bucket.paid_cents += payment.amount_cents
        else:
            bucket.pending_cents += payment.amount_cents

    return totals
