from unittest.mock import AsyncMock

import httpx
import pytest


def _outage(**overrides) -> dict:
    record = {
        "outageId": "ORION-12345",
        "utility": {"name": "Orion Group", "id": "ORION_NZ"},
        "region": "Auckland",
        "regionCode": "NZ-AUK",
        "outageStart": "2024-01-15T10:30:00Z",
        "cause": "Equipment failure",
        "status": "active",
        "customersAffected": 500,
        "location": {
            "coordinates": {"latitude": -36.8485, "longitude": 174.7633},
            "areas": ["Ponsonby"],
            "streets": [],
        },
    }
    record.update(overrides)
    return record


def _report(outages: list[dict]) -> dict:
    return {
        "version": "1.0",
        "timestamp": "2024-01-15T11:00:00Z",
        "summary": {
            "totalUtilities": 1,
            "totalOutages": len(outages),
            "totalCustomersAffected": sum(o["customersAffected"] for o in outages),
        },
        "utilities": [{"name": "Orion Group", "id": "ORION_NZ", "status": "ok", "outageCount": len(outages)}],
        "outages": outages,
    }


@pytest.fixture
def make_outage():
    return _outage


@pytest.fixture
def make_report():
    return _report


@pytest.fixture
def mock_async_client():
    """Build an httpx.AsyncClient stand-in whose get/post return ``response``."""

    def _build(response: httpx.Response | None = None, side_effect: Exception | None = None) -> AsyncMock:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=response, side_effect=side_effect)
        mock_client.post = AsyncMock(return_value=response, side_effect=side_effect)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        return mock_client

    return _build
