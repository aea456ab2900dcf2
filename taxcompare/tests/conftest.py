"""Shared pytest fixtures for the taxcompare test suite."""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from taxcompare.intake.schemas import TaxInputs
from taxcompare.main import app
from taxcompare.tests.demo_profiles import DEMO_PROFILES


@pytest_asyncio.fixture
async def client():
    """Async httpx client using ASGI transport: no live server needed."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def salaried_inputs() -> TaxInputs:
    """₹12L gross with 80C + 80D: old ₹1,11,800 vs new ₹81,900."""
    return TaxInputs(**DEMO_PROFILES["salaried_12l"]["inputs"])
