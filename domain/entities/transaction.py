from dataclasses import dataclass
from typing import Optional


@dataclass
class Transaction:
    title: str
    description: str
    price: float
    date_of_sale: str
    sold: bool
    category: str
    id: Optional[int] = None
