"""Due date computation and payment schedule generation for leases"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Union

from dateutil.relativedelta import relativedelta

from lease_payments.config import settings
from lease_payments.domain.exceptions import InvalidDateError, InvalidScheduleError
from lease_payments.domain.frequencies import get_payment_frequency
from lease_payments.domain.models import Lease, Payment, PaymentFrequency, PeriodUnit
from lease_payments.utils.date_utils import (
    DateLike,
    add_days,
    add_months,
    days_in_month,
    last_day_of_month,
    shift_date,
    to_date,
    to_optional_date,
    with_clamped_day,
)

FrequencyLike = Union[str, PaymentFrequency]


def _as_frequency(frequency: FrequencyLike) -> PaymentFrequency:
    if isinstance(frequency, PaymentFrequency):
        return frequency
    return get_payment_frequency(frequency)


def _period_delta(frequency: PaymentFrequency, periods: int = 1) -> Union[timedelta, relativedelta]:
    """Offset covering `periods` whole periods of the frequency"""
    amount = frequency.period_amount * periods
    if frequency.period_unit == PeriodUnit.DAYS:
        return timedelta(days=amount)
    if frequency.period_unit == PeriodUnit.WEEKS:
        return timedelta(weeks=amount)
    if frequency.period_unit == PeriodUnit.MONTHS:
        return relativedelta(months=amount)
    if frequency.period_unit == PeriodUnit.YEARS:
        return relativedelta(years=amount)
    raise InvalidScheduleError(f"Unsupported period unit: {frequency.period_unit!r}")


def calculate_period_end_date(start_date: DateLike, frequency: FrequencyLike) -> date:
    """
    End of the period beginning at start_date.

    Monthly periods (one month) are anchored to calendar months: the end is
    the last day of the start month, not start_date + 1 month. Every other
    frequency adds period_amount units to start_date.
    """
    start = to_date(start_date)
    freq = _as_frequency(frequency)

    if freq.period_unit == PeriodUnit.MONTHS and freq.period_amount == 1:
        return last_day_of_month(start)

    return shift_date(start, _period_delta(freq))


def calculate_next_due_date(
    payment_start_date: DateLike,
    frequency: FrequencyLike,
    payment_day: Optional[int] = None,
    reference_date: Optional[DateLike] = None,
) -> date:
    """
    Next due date of a lease relative to reference_date (default: today).

    Rules per period unit:
    - months: due on payment_day (or the start date's day-of-month) of the
      reference month, or period_amount months later if the reference day
      is already past it; clamped to the month length
    - days: always the day after reference_date
    - weeks: next start-date weekday after reference_date (a full week ahead
      when reference_date is that weekday), aligned to a whole number of
      periods since the start date for multi-week frequencies
    - years: start month/day in the reference year, next year if already past
    """
    start = to_date(payment_start_date)
    reference = to_date(reference_date) if reference_date is not None else date.today()
    freq = _as_frequency(frequency)

    if payment_day is not None and not 1 <= payment_day <= 31:
        raise ValueError(f"payment_day must be between 1 and 31, got {payment_day}")

    if freq.period_unit == PeriodUnit.MONTHS:
        target_day = payment_day or start.day
        due = reference.replace(day=1)
        if reference.day > target_day:
            due = add_months(due, freq.period_amount)
        return with_clamped_day(due, target_day)

    if freq.period_unit == PeriodUnit.DAYS:
        return add_days(reference, 1)

    if freq.period_unit == PeriodUnit.WEEKS:
        days_ahead = (start.weekday() - reference.weekday()) % 7 or 7
        due = add_days(reference, days_ahead)
        if freq.period_amount > 1:
            # Same weekday as start, so the difference is a whole number of weeks
            weeks_since_start = (due - start).days // 7
            offset = weeks_since_start % freq.period_amount
            if offset:
                due = add_days(due, 7 * (freq.period_amount - offset))
        return due

    if freq.period_unit == PeriodUnit.YEARS:
        due = _anniversary(start, reference.year)
        if due < reference:
            due = _anniversary(start, reference.year + 1)
        return due

    # Only reachable with a PaymentFrequency built outside the table whose
    # unit is none of the above; calculate_period_end_date rejects it
    return calculate_period_end_date(reference, freq)


def _anniversary(start: date, year: int) -> date:
    """start's month/day in the given year (Feb 29 -> Feb 28 in common years)"""
    if not date.min.year <= year <= date.max.year:
        raise InvalidDateError(f"Year out of range: {year}")
    return date(year, start.month, min(start.day, days_in_month(year, start.month)))


def generate_recurring_due_dates(
    start_date: DateLike,
    end_date: DateLike,
    frequency: FrequencyLike,
    max_payments: Optional[int] = None,
) -> List[date]:
    """
    All due dates from start_date to end_date (inclusive), one per period.

    Each date is start_date plus a whole number of periods, so a schedule
    starting on the 31st returns to the 31st after passing through short
    months instead of drifting to the 28th.

    Raises:
        InvalidScheduleError: If start_date is after end_date or the schedule
            would exceed max_payments (default: settings.max_schedule_payments)
    """
    start = to_date(start_date)
    end = to_date(end_date)
    freq = _as_frequency(frequency)
    limit = max_payments if max_payments is not None else settings.max_schedule_payments

    if start > end:
        raise InvalidScheduleError("Start date must be on or before end date")

    due_dates = []
    due = start
    while due <= end:
        if len(due_dates) >= limit:
            raise InvalidScheduleError(f"Schedule exceeds {limit} payments")
        due_dates.append(due)
        try:
            due = shift_date(start, _period_delta(freq, len(due_dates)))
        except InvalidDateError:
            # Next period starts after 9999-12-31, hence after end_date
            break

    return due_dates


def generate_recurring_payments(
    lease_id: Optional[str],
    start_date: DateLike,
    end_date: DateLike,
    amount_cents: int,
    frequency: FrequencyLike = "monthly",
    payment_type: str = "rent",
    existing_due_dates: Iterable[DateLike] = (),
) -> List[Payment]:
    """
    Unpaid, auto-generated payments for every due date in the period.

    Due dates listed in existing_due_dates are skipped so callers can
    regenerate a schedule without duplicating rows they already stored.
    """
    if amount_cents <= 0:
        raise InvalidScheduleError("Payment amount must be positive")

    existing = {to_date(d) for d in existing_due_dates}

    return [
        Payment(
            due_date=due_date,
            amount_cents=amount_cents,
            payment_type=payment_type,
            lease_id=lease_id,
            payment_method="bank_transfer",
            is_auto_generated=True,
        )
        for due_date in generate_recurring_due_dates(start_date, end_date, frequency)
        if due_date not in existing
    ]


def generate_historical_payments(
    lease_id: Optional[str],
    amount_cents: int,
    start_date: DateLike,
    frequency: FrequencyLike = "monthly",
    reference_date: Optional[DateLike] = None,
    existing_due_dates: Iterable[DateLike] = (),
) -> List[Payment]:
    """Recurring rent from start_date up to reference_date (default: today)"""
    end = to_date(reference_date) if reference_date is not None else date.today()
    return generate_recurring_payments(
        lease_id,
        start_date,
        end,
        amount_cents,
        frequency=frequency,
        payment_type="rent",
        existing_due_dates=existing_due_dates,
    )


def generate_initial_payments(
    lease: Lease,
    effective_date: Optional[DateLike] = None,
    as_paid: bool = False,
    existing_types: Iterable[str] = (),
) -> List[Payment]:
    """
    Security deposit and agency fee payments due when the lease is signed.

    Zero amounts and types listed in existing_types produce no payment.
    """
    due = to_optional_date(effective_date) or date.today()
    existing = set(existing_types)

    initial = [
        ("deposit", lease.security_deposit_cents, "Initial security deposit"),
        ("agency_fee", lease.agency_fee_cents, "Agency fee"),
    ]

    return [
        Payment(
            due_date=due,
            amount_cents=amount,
            payment_type=payment_type,
            payment_date=due if as_paid else None,
            notes=notes,
            lease_id=lease.lease_id,
            payment_method="bank_transfer",
            is_auto_generated=True,
        )
        for payment_type, amount, notes in initial
        if amount > 0 and payment_type not in existing
    ]


def build_lease_schedule(
    lease: Lease,
    reference_date: Optional[DateLike] = None,
    existing_due_dates: Iterable[DateLike] = (),
    existing_types: Iterable[str] = (),
    initial_as_paid: bool = False,
) -> List[Payment]:
    """
    Initial payments followed by recurring rent for the whole lease.

    Rent runs from payment_start_date to end_date, or up to reference_date
    (default: today) for open-ended leases. A lease with no rent only gets
    its initial payments.
    """
    payments = generate_initial_payments(
        lease,
        effective_date=lease.payment_start_date,
        as_paid=initial_as_paid,
        existing_types=existing_types,
    )

    if lease.rent_cents > 0:
        end = lease.end_date or to_optional_date(reference_date) or date.today()
        if end >= lease.payment_start_date:
            payments.extend(
                generate_recurring_payments(
                    lease.lease_id,
                    lease.payment_start_date,
                    end,
                    lease.rent_cents,
                    frequency=lease.frequency,
                    existing_due_dates=existing_due_dates,
                )
            )

    return payments


def next_due_date_for_lease(lease: Lease, reference_date: Optional[DateLike] = None) -> date:
    """calculate_next_due_date applied to a lease's own terms"""
    return calculate_next_due_date(
        lease.payment_start_date,
        lease.frequency,
        payment_day=lease.payment_day,
        reference_date=reference_date,
    )
