"""
Pytest configuration and fixtures for backend tests.

Provides the async HTTP client for API tests and reusable task payloads.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from math_engine.api.main import app


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def prop_firm_payload() -> dict[str, Any]:
    """Standard 100K evaluation: 8% target, 5% daily, 10% total drawdown."""
    return {
        "config": {
            "accountSize": 100000,
            "currency": "USD",
            "targetReturnPct": 8,
            "maxDailyDrawdownPct": 5,
            "maxTotalDrawdownPct": 10,
        },
        "riskPerTradePct": 2,
        "expectedRR": 2,
        "expectedWinratePct": 45,
        "maxTradesPerDay": 3,
    }
