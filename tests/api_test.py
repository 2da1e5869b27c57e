"""
HTTP layer tests.

The repository and seed source are replaced through app.dependency_overrides,
so no store or network is needed.
"""
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.deps import get_seed_source, get_transaction_repo
from app.main import app
from domain.entities import (
    BarChartEntry,
    PieChartEntry,
    Transaction,
    TransactionStatistics,
)
from domain.interfaces import SeedSource, TransactionRepository
from domain.services.price_buckets import PRICE_BUCKETS


@pytest.fixture
def mock_repo(mocker):
    repo = mocker.AsyncMock(spec=TransactionRepository)
    repo.list_transactions.return_value = [
        Transaction(
            id=7,
            title="A",
            description="desc",
            price=50.0,
            date_of_sale="2021-03-05",
            sold=True,
            category="X",
        )
    ]
    repo.get_statistics.return_value = TransactionStatistics(50.0, 1, 0)
    repo.get_bar_chart.return_value = [
        BarChartEntry(b.label, 1 if b.index == 0 else 0) for b in PRICE_BUCKETS
    ]
    repo.get_pie_chart.return_value = [PieChartEntry("X", 1)]
    return repo


@pytest.fixture
def mock_seed_source(mocker):
    return mocker.AsyncMock(spec=SeedSource)


@pytest.fixture
def client(mock_repo, mock_seed_source):
    """Test client for FastAPI app."""
    app.dependency_overrides[get_transaction_repo] = lambda: mock_repo
    app.dependency_overrides[get_seed_source] = lambda: mock_seed_source
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_list_transactions_serializes_records(client, mock_repo):
    response = client.get("/api/transactions", params={"month": "3", "search": "a", "page": 2, "perPage": 5})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [{
        "id": 7,
        "title": "A",
        "description": "desc",
        "price": 50.0,
        "dateOfSale": "2021-03-05",
        "sold": True,
        "category": "X",
    }]
    mock_repo.list_transactions.assert_awaited_once_with(month=3, search="a", offset=5, limit=5)


def test_list_transactions_defaults(client, mock_repo):
    response = client.get("/api/transactions")

    assert response.status_code == status.HTTP_200_OK
    mock_repo.list_transactions.assert_awaited_once_with(month=None, search=None, offset=0, limit=10)


def test_month_names_are_accepted(client, mock_repo):
    response = client.get("/api/transactions/statistics", params={"month": "March"})

    assert response.status_code == status.HTTP_200_OK
    mock_repo.get_statistics.assert_awaited_once_with(3)


@pytest.mark.parametrize("params", [
    {"page": "two"},
    {"perPage": "ten"},
    {"page": "0"},
    {"perPage": "-1"},
    {"page": "1.5"},
])
def test_malformed_pagination_is_rejected_with_400(client, mock_repo, params):
    response = client.get("/api/transactions", params=params)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "invalid_request"
    mock_repo.list_transactions.assert_not_awaited()


def test_page_beyond_store_offset_range_is_rejected_with_400(client, mock_repo):
    response = client.get("/api/transactions", params={"page": "10000000000000000000"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "invalid_request"
    mock_repo.list_transactions.assert_not_awaited()


@pytest.mark.parametrize("path", [
    "/api/transactions",
    "/api/transactions/statistics",
    "/api/transactions/barchart",
    "/api/transactions/piechart",
    "/api/transactions/combined",
])
def test_invalid_month_is_rejected_with_400(client, path):
    response = client.get(path, params={"month": "13"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "invalid_request"


def test_non_ascii_digit_month_is_rejected_with_400(client, mock_repo):
    response = client.get("/api/transactions/statistics", params={"month": "²"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "invalid_request"
    mock_repo.get_statistics.assert_not_awaited()


def test_statistics_shape(client):
    response = client.get("/api/transactions/statistics", params={"month": 3})

    assert response.json() == {"totalSaleAmount": 50.0, "soldItems": 1, "notSoldItems": 0}


def test_bar_chart_shape(client):
    response = client.get("/api/transactions/barchart", params={"month": 3})

    body = response.json()
    assert len(body) == 10
    assert body[0] == {"range": "0-100", "count": 1}
    assert body[-1] == {"range": "901-above", "count": 0}


def test_pie_chart_shape(client):
    response = client.get("/api/transactions/piechart", params={"month": 3})

    assert response.json() == [{"category": "X", "count": 1}]


def test_combined_matches_individual_endpoints(client):
    combined = client.get("/api/transactions/combined", params={"month": 3}).json()

    assert set(combined) == {"transactions", "statistics", "barChart", "pieChart"}
    assert combined["statistics"] == client.get("/api/transactions/statistics", params={"month": 3}).json()
    assert combined["barChart"] == client.get("/api/transactions/barchart", params={"month": 3}).json()
    assert combined["pieChart"] == client.get("/api/transactions/piechart", params={"month": 3}).json()
    assert combined["transactions"][0]["dateOfSale"] == "2021-03-05"


def test_seed_success(client, mock_seed_source, mock_repo):
    mock_seed_source.fetch_transactions.return_value = mock_repo.list_transactions.return_value
    mock_repo.replace_all.return_value = 1

    response = client.get("/api/seed")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Database seeded successfully", "count": 1}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize("path, code", [
    ("/api/seed", "500"),
    ("/api/transactions", "400"),
    ("/api/transactions", "500"),
    ("/api/transactions/combined", "400"),
])
def test_error_bodies_are_documented(client, path, code):
    schema = client.get("/openapi.json").json()

    response = schema["paths"][path]["get"]["responses"][code]
    assert response["content"]["application/json"]["schema"]["$ref"] == "#/components/schemas/ErrorResponse"
