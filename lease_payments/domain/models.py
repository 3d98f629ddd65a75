"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class PeriodUnit(str, Enum):
    """Calendar granularity used to step a date forward"""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class PaymentStatus(str, Enum):
    """Effective lifecycle status of a payment at a reference time"""

    PAID = "paid"
    PENDING = "pending"
    LATE = "late"
    ADVANCED = "advanced"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class PaymentFrequency:
    """How often lease payments recur"""

    value: str
    label: str
    period_unit: PeriodUnit
    period_amount: int
    days: int  # Nominal length, display only

    def __post_init__(self) -> None:
        if self.period_amount < 1:
            raise ValueError(f"period_amount must be >= 1, got {self.period_amount}")


@dataclass
class Payment:
    """Single scheduled or recorded obligation tied to a lease"""

    due_date: Optional[date]
    amount_cents: int
    payment_type: str = "rent"  # rent | deposit | agency_fee | other
    payment_date: Optional[date] = None
    notes: Optional[str] = None
    lease_id: Optional[str] = None
    payment_method: Optional[str] = None
    is_auto_generated: bool = False
    effective_status: Optional[PaymentStatus] = None


@dataclass
class Lease:
    """Lease terms consumed by the scheduling engine"""

    payment_start_date: date
    frequency: str = "monthly"
    payment_day: Optional[int] = None
    lease_id: Optional[str] = None
    end_date: Optional[date] = None
    rent_cents: int = 0
    security_deposit_cents: int = 0
    agency_fee_cents: int = 0


@dataclass
class PaymentStats:
    """Aggregate figures for a lease's payments"""

    total_due_cents: int = 0
    total_paid_cents: int = 0
    balance_cents: int = 0
    paid_payments: int = 0
    pending_payments: int = 0
    late_payments: int = 0
    advanced_payments: int = 0
    undefined_payments: int = 0


@dataclass
class TypeTotals:
    """Amounts for one payment type"""

    total_cents: int = 0
    paid_cents: int = 0
    pending_cents: int = 0
