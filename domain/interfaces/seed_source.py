from typing_extensions import Protocol
from domain.entities import Transaction


class SeedSource(Protocol):
    async def fetch_transactions(self) -> list[Transaction]:
        """
        Fetch the seed dataset as domain entities.

        Raises:
            SeedSourceError: if the dataset is unreachable or malformed
        """
        ...
