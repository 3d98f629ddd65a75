"""Supported payment frequencies and their lookup"""

import logging
from typing import Dict, List

from lease_payments.domain.exceptions import UnknownFrequencyError
from lease_payments.domain.models import PaymentFrequency, PeriodUnit

DEFAULT_FREQUENCY = "monthly"

PAYMENT_FREQUENCIES: Dict[str, PaymentFrequency] = {
    f.value: f
    for f in (
        PaymentFrequency("daily", "Daily", PeriodUnit.DAYS, 1, 1),
        PaymentFrequency("weekly", "Weekly", PeriodUnit.WEEKS, 1, 7),
        PaymentFrequency("biweekly", "Every two weeks", PeriodUnit.WEEKS, 2, 14),
        PaymentFrequency("monthly", "Monthly", PeriodUnit.MONTHS, 1, 30),
        PaymentFrequency("quarterly", "Quarterly", PeriodUnit.MONTHS, 3, 90),
        PaymentFrequency("biannually", "Twice a year", PeriodUnit.MONTHS, 6, 180),
        PaymentFrequency("annually", "Yearly", PeriodUnit.MONTHS, 12, 365),
    )
}


def resolve_payment_frequency(value: str) -> PaymentFrequency:
    """
    Strict frequency lookup.

    Raises:
        UnknownFrequencyError: If value is not a supported frequency key
    """
    try:
        return PAYMENT_FREQUENCIES[value]
    except KeyError:
        raise UnknownFrequencyError(value) from None


def get_payment_frequency(value: str) -> PaymentFrequency:
    """
    Lenient frequency lookup: unknown keys fall back to monthly.

    The result alone does not tell an explicit "monthly" apart from an
    unrecognized key; use resolve_payment_frequency when that matters.
    """
    try:
        return resolve_payment_frequency(value)
    except UnknownFrequencyError:
        logging.warning(
            "Unknown payment frequency, using default",
            extra={"frequency": value, "default_frequency": DEFAULT_FREQUENCY},
        )
        return PAYMENT_FREQUENCIES[DEFAULT_FREQUENCY]


def list_payment_frequencies() -> List[PaymentFrequency]:
    """All supported frequencies, shortest period first"""
    return list(PAYMENT_FREQUENCIES.values())
