"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from lease_payments.api.main import create_app
from lease_payments.domain.models import Lease, Payment


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def lease() -> Lease:
    """Six-month monthly lease with deposit and agency fee"""
    return Lease(
        payment_start_date=date(2024, 1, 1),
        frequency="monthly",
        lease_id="lease_1",
        end_date=date(2024, 6, 30),
        rent_cents=50000,  # $500
        security_deposit_cents=100000,  # $1000
        agency_fee_cents=25000,  # $250
    )


@pytest.fixture
def mixed_payments() -> list[Payment]:
    """One payment per status as of 2024-01-20 (5-day grace period)"""
    return [
        # paid on time -> paid
        Payment(due_date=date(2024, 1, 1), amount_cents=50000, payment_date=date(2024, 1, 3)),
        # paid before due -> advanced
        Payment(due_date=date(2024, 2, 1), amount_cents=50000, payment_date=date(2024, 1, 18)),
        # unpaid, 10 days past due -> late
        Payment(due_date=date(2024, 1, 10), amount_cents=50000, payment_type="deposit"),
        # unpaid, within grace -> pending
        Payment(due_date=date(2024, 1, 18), amount_cents=50000, payment_type="agency_fee"),
        # legacy row without due date -> undefined
        Payment(due_date=None, amount_cents=10000, payment_type="penalty"),
    ]
