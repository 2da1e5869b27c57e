"""
Tests for metrics emission.

Tests verify:
- /metrics exposes the service collectors in Prometheus text format
- report latency is observed per report
- seed fetch failures are counted by the seed client
"""
import httpx
import pytest
from fastapi.testclient import TestClient
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY

from app.deps import get_transaction_repo
from app.main import app
from domain.entities import TransactionStatistics
from domain.exceptions import SeedSourceError
from domain.interfaces import TransactionRepository
from infrastructure.clients.seed_client import SeedClient
from infrastructure.metrics.metrics_adapter import MetricsAdapter


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


@pytest.fixture
def client(mocker):
    repo = mocker.AsyncMock(spec=TransactionRepository)
    repo.get_statistics.return_value = TransactionStatistics(10.0, 1, 0)
    app.dependency_overrides[get_transaction_repo] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_metrics_endpoint_exposes_collectors(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"] == CONTENT_TYPE_LATEST
    assert "seed_fetch_failures_total" in response.text
    assert "report_latency_seconds" in response.text


def test_report_latency_is_observed(client):
    before = _sample("report_latency_seconds_count", {"report": "statistics"})

    client.get("/api/transactions/statistics", params={"month": 3})

    assert _sample("report_latency_seconds_count", {"report": "statistics"}) == before + 1


def test_adapter_increments_seed_outcome():
    before = _sample("seed_runs_total", {"outcome": "success"})

    MetricsAdapter().increment_seed_total(outcome="success")

    assert _sample("seed_runs_total", {"outcome": "success"}) == before + 1


@pytest.mark.asyncio
async def test_seed_fetch_failure_is_counted():
    before = _sample("seed_fetch_failures_total")
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    async with SeedClient(url="https://seed.example.com/data.json", transport=transport) as seed_client:
        with pytest.raises(SeedSourceError):
            await seed_client.fetch_transactions()

    assert _sample("seed_fetch_failures_total") == before + 1


@pytest.mark.asyncio
@pytest.mark.parametrize("record", [
    {"title": "broken"},
    {"title": "A", "description": "d", "price": "n/a", "dateOfSale": "2021-03-05", "sold": True, "category": "X"},
    {"title": "A", "description": "d", "price": 1, "dateOfSale": "not a date", "sold": True, "category": "X"},
])
async def test_malformed_seed_record_is_counted(record):
    before = _sample("seed_fetch_failures_total")
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[record]))

    async with SeedClient(url="https://seed.example.com/data.json", transport=transport) as seed_client:
        with pytest.raises(SeedSourceError):
            await seed_client.fetch_transactions()

    assert _sample("seed_fetch_failures_total") == before + 1
