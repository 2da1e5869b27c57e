"""
Seed dataset client using httpx for async HTTP calls.

Fetches the remote JSON array of product transactions and maps each object
to a domain Transaction.
"""
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

import httpx

from domain.entities import Transaction
from domain.exceptions import SeedSourceError
from domain.interfaces import SeedSource
from infrastructure.metrics.metrics import seed_fetch_failures_total

REQUIRED_FIELDS = ("title", "description", "price", "dateOfSale", "sold", "category")

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-")


class SeedClient(SeedSource):
    """
    HTTP client for the seed dataset.

    Uses httpx.AsyncClient with configurable timeouts:
    - connect_timeout: 2 seconds (default)
    - read_timeout: 10 seconds (default)

    On failure, increments seed_fetch_failures_total.
    """

    def __init__(
        self,
        url: str,
        connect_timeout: float = 2.0,
        read_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the seed client.

        Args:
            url: Full URL of the JSON dataset
            connect_timeout: Connection timeout in seconds (default: 2.0)
            read_timeout: Read timeout in seconds (default: 10.0)
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.url = url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=connect_timeout,
                read=read_timeout,
                write=read_timeout,
                pool=connect_timeout,
            ),
            transport=transport,
        )

    async def fetch_transactions(self) -> list[Transaction]:
        """
        Fetch the dataset and convert it to domain entities.

        Raises:
            SeedSourceError: on non-2xx, timeout, network error, a body that is
                not a JSON array, or a malformed record (missing field, bad price or date)
        """
        records = await self._fetch_records()
        try:
            return [self._map_to_domain_entity(index, raw) for index, raw in enumerate(records)]
        except SeedSourceError:
            seed_fetch_failures_total.inc()
            raise

    async def _fetch_records(self) -> list[Any]:
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            seed_fetch_failures_total.inc()
            raise SeedSourceError(
                f"Seed source returned {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            seed_fetch_failures_total.inc()
            raise SeedSourceError(
                f"Seed source request timed out after {self.read_timeout}s"
            ) from e
        except httpx.RequestError as e:
            seed_fetch_failures_total.inc()
            raise SeedSourceError(f"Seed source request failed: {e}") from e
        except ValueError as e:
            seed_fetch_failures_total.inc()
            raise SeedSourceError("Seed source did not return JSON") from e

        if not isinstance(data, list):
            seed_fetch_failures_total.inc()
            raise SeedSourceError(
                f"Seed source returned {type(data).__name__}, expected a JSON array"
            )
        return data

    def _map_to_domain_entity(self, index: int, raw: Any) -> Transaction:
        if not isinstance(raw, dict):
            raise SeedSourceError(f"Seed record {index} is not an object")
        missing = [name for name in REQUIRED_FIELDS if raw.get(name) is None]
        if missing:
            raise SeedSourceError(
                f"Seed record {index} is missing field(s): {', '.join(missing)}"
            )
        try:
            price = float(raw["price"])
        except (TypeError, ValueError) as e:
            raise SeedSourceError(f"Seed record {index} has a non-numeric price") from e

        return Transaction(
            title=str(raw["title"]),
            description=str(raw["description"]),
            price=price,
            date_of_sale=_normalize_date(index, raw["dateOfSale"]),
            sold=_parse_bool(raw["sold"]),
            category=str(raw["category"]),
        )

    async def close(self):
        """Close the httpx client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def _normalize_date(index: int, value: Any) -> str:
    """
    Return the sale date as an ISO-8601 string starting with "YYYY-MM-".

    ISO strings are kept verbatim; other accepted forms (date/datetime objects,
    unix timestamps, basic ISO like "20210305") are re-emitted in extended form.
    """
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            try:
                parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
            except ValueError:
                raise SeedSourceError(
                    f"Seed record {index} has an unparseable dateOfSale: {value!r}"
                ) from None
        return text if _ISO_PREFIX.match(text) else parsed.isoformat()
    raise SeedSourceError(f"Seed record {index} has an unsupported dateOfSale: {value!r}")
