from unittest.mock import patch

import httpx
import pytest

from poweroutages.config import settings
from poweroutages.errors import TransportError
from poweroutages.schemas.feature import FeatureCollection, IncidentFeature, IncidentProperties, PointGeometry
from poweroutages.services.submission import submit

CLIENT_PATH = "poweroutages.services.submission.httpx.AsyncClient"


def _collection() -> FeatureCollection:
    return FeatureCollection(features=[
        IncidentFeature(
            id="poweroutage-1",
            properties=IncidentProperties(callsign="Orion Group - Ponsonby", type="a-f-X-i", icon="icon"),
            geometry=PointGeometry(coordinates=[174.7633, -36.8485]),
        )
    ])


@pytest.mark.asyncio
async def test_submit_without_url_only_logs(monkeypatch, mock_async_client, caplog):
    monkeypatch.setattr(settings, "submit_url", "")
    client = mock_async_client(httpx.Response(200))

    with patch(CLIENT_PATH, return_value=client) as client_cls:
        with caplog.at_level("INFO"):
            await submit(_collection())

    client_cls.assert_not_called()
    assert "1 features not submitted" in caplog.text


@pytest.mark.asyncio
async def test_submit_posts_geojson_with_token(monkeypatch, mock_async_client):
    monkeypatch.setattr(settings, "submit_url", "https://tak.example.nz/api/layer/7/cot")
    monkeypatch.setattr(settings, "submit_token", "secret")
    client = mock_async_client(httpx.Response(200))

    with patch(CLIENT_PATH, return_value=client):
        await submit(_collection())

    client.post.assert_awaited_once()
    call = client.post.call_args
    assert call.args[0] == "https://tak.example.nz/api/layer/7/cot"
    assert call.kwargs["headers"] == {"Authorization": "Bearer secret"}
    body = call.kwargs["json"]
    assert body["type"] == "FeatureCollection"
    assert body["features"][0]["geometry"] == {"type": "Point", "coordinates": [174.7633, -36.8485]}


@pytest.mark.asyncio
async def test_submit_rejected(monkeypatch, mock_async_client):
    monkeypatch.setattr(settings, "submit_url", "https://tak.example.nz/api/layer/7/cot")
    monkeypatch.setattr(settings, "submit_token", "")
    client = mock_async_client(httpx.Response(401))

    with patch(CLIENT_PATH, return_value=client):
        with pytest.raises(TransportError) as exc_info:
            await submit(_collection())

    assert exc_info.value.status_code == 401
    assert "Failed to submit features: 401 Unauthorized" == str(exc_info.value)
