"""Unit tests for payment status classification and aggregation"""

import pytest
from datetime import date
from lease_payments.domain.models import Payment, PaymentStatus
from lease_payments.domain.status import (
    annotate_payments,
    determine_payment_status,
    mark_payment_paid,
    sort_payments,
    summarize_payments,
    totals_by_type,
)

REFERENCE = date(2024, 1, 20)


def test_unpaid_past_grace_period_is_late():
    """Test the 20th is after due date (10th) + 5 days of grace"""
    status = determine_payment_status("2024-01-10", None, grace_period_days=5, reference_date="2024-01-20")
    assert status == PaymentStatus.LATE


def test_unpaid_within_grace_period_is_pending():
    status = determine_payment_status("2024-01-10", None, grace_period_days=5, reference_date="2024-01-14")
    assert status == PaymentStatus.PENDING


def test_grace_period_boundary():
    """Test the last day of grace is still pending, the day after is late"""
    due = date(2024, 1, 10)

    assert determine_payment_status(due, reference_date=date(2024, 1, 15)) == PaymentStatus.PENDING
    assert determine_payment_status(due, reference_date=date(2024, 1, 16)) == PaymentStatus.LATE
    assert determine_payment_status(due, grace_period_days=0, reference_date=date(2024, 1, 10)) == PaymentStatus.PENDING
    assert determine_payment_status(due, grace_period_days=0, reference_date=date(2024, 1, 11)) == PaymentStatus.LATE


def test_paid_before_due_date_is_advanced():
    status = determine_payment_status("2024-01-10", "2024-01-05", grace_period_days=5, reference_date="2024-01-20")
    assert status == PaymentStatus.ADVANCED


def test_paid_after_grace_period_is_paid_not_late():
    """Test lateness is never applied once the payment is recorded"""
    status = determine_payment_status("2024-01-10", "2024-02-01", grace_period_days=5, reference_date="2024-02-02")
    assert status == PaymentStatus.PAID


def test_paid_on_due_date_is_paid():
    assert determine_payment_status(date(2024, 1, 10), date(2024, 1, 10)) == PaymentStatus.PAID


@pytest.mark.parametrize("payment_date", [None, "2024-01-05", date(2030, 1, 1)])
def test_missing_due_date_is_undefined(payment_date):
    status = determine_payment_status(None, payment_date, grace_period_days=5, reference_date=REFERENCE)
    assert status == PaymentStatus.UNDEFINED


def test_negative_grace_period_rejected():
    with pytest.raises(ValueError):
        determine_payment_status(date(2024, 1, 10), grace_period_days=-1)


def test_status_is_idempotent():
    args = (date(2024, 1, 10), None, 5, REFERENCE)
    assert determine_payment_status(*args) == determine_payment_status(*args)


def test_annotate_payments(mixed_payments):
    annotated = annotate_payments(mixed_payments, grace_period_days=5, reference_date=REFERENCE)

    assert [p.effective_status for p in annotated] == [
        PaymentStatus.PAID,
        PaymentStatus.ADVANCED,
        PaymentStatus.LATE,
        PaymentStatus.PENDING,
        PaymentStatus.UNDEFINED,
    ]
    # Originals untouched
    assert all(p.effective_status is None for p in mixed_payments)


def test_mark_payment_paid():
    payment = Payment(due_date=date(2024, 1, 10), amount_cents=50000)

    paid = mark_payment_paid(payment, paid_on=date(2024, 1, 25))
    early = mark_payment_paid(payment, paid_on="2024-01-05")

    assert paid.payment_date == date(2024, 1, 25)
    assert paid.effective_status == PaymentStatus.PAID
    assert early.effective_status == PaymentStatus.ADVANCED
    assert payment.payment_date is None


def test_sort_by_due_date_newest_first(mixed_payments):
    sorted_payments = sort_payments(mixed_payments)

    assert [p.due_date for p in sorted_payments] == [
        date(2024, 2, 1),
        date(2024, 1, 18),
        date(2024, 1, 10),
        date(2024, 1, 1),
        None,  # Missing due dates sort as oldest
    ]


def test_sort_by_effective_status(mixed_payments):
    annotated = annotate_payments(mixed_payments, reference_date=REFERENCE)
    sorted_payments = sort_payments(annotated, field="effective_status", descending=False)

    assert [p.effective_status for p in sorted_payments] == [
        PaymentStatus.LATE,
        PaymentStatus.PENDING,
        PaymentStatus.PAID,
        PaymentStatus.ADVANCED,
        PaymentStatus.UNDEFINED,
    ]


def test_sort_by_other_field(mixed_payments):
    sorted_payments = sort_payments(mixed_payments, field="payment_date", descending=False)

    # Unpaid payments first
    assert [p.payment_date for p in sorted_payments][:3] == [None, None, None]
    assert sorted_payments[-1].payment_date == date(2024, 1, 18)


def test_sort_by_unknown_field(mixed_payments):
    with pytest.raises(ValueError):
        sort_payments(mixed_payments, field="tenant_name")


def test_summarize_payments(mixed_payments):
    stats = summarize_payments(annotate_payments(mixed_payments, reference_date=REFERENCE))

    assert stats.total_due_cents == 210000
    assert stats.total_paid_cents == 100000  # Paid + advanced
    assert stats.balance_cents == 110000
    assert stats.paid_payments == 1
    assert stats.advanced_payments == 1
    assert stats.late_payments == 1
    assert stats.pending_payments == 1
    assert stats.undefined_payments == 1


def test_summarize_unannotated_payments_count_as_undefined(mixed_payments):
    stats = summarize_payments(mixed_payments)

    assert stats.undefined_payments == 5
    assert stats.total_paid_cents == 0


def test_totals_by_type(mixed_payments):
    totals = totals_by_type(annotate_payments(mixed_payments, reference_date=REFERENCE))

    assert set(totals) == {"deposit", "agency_fee", "rent", "other"}
    assert totals["rent"].total_cents == 100000
    assert totals["rent"].paid_cents == 100000
    assert totals["deposit"].pending_cents == 50000
    assert totals["agency_fee"].pending_cents == 50000
    # Unknown "penalty" type folds into other
    assert totals["other"].total_cents == 10000
    assert totals["other"].pending_cents == 10000


def test_grace_window_past_last_supported_date_is_pending():
    """Test grace periods reaching beyond 9999-12-31 never make a payment late"""
    assert determine_payment_status(
        date(9999, 12, 30), grace_period_days=5, reference_date=date(9999, 12, 31)
    ) == PaymentStatus.PENDING
    assert determine_payment_status(
        date(2024, 1, 10), grace_period_days=3_000_000, reference_date=date(2024, 2, 1)
    ) == PaymentStatus.PENDING


def test_mark_payment_paid_ignores_grace_period():
    """Test paid status does not depend on a grace period"""
    payment = Payment(due_date=date(2024, 1, 10), amount_cents=50000)

    with pytest.raises(TypeError):
        mark_payment_paid(payment, paid_on=date(2024, 3, 1), grace_period_days=5)

    assert mark_payment_paid(payment, paid_on=date(2024, 3, 1)).effective_status == PaymentStatus.PAID
