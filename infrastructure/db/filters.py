"""
Query predicates for the transaction store.

Month policy: a record belongs to month M of any year when the month segment
of its ISO date string (characters 6-7 of "YYYY-MM-DD...") equals M.
"""
from typing import Optional

from sqlalchemy import String, and_, case, cast, or_, true
from sqlalchemy.sql.expression import ColumnElement

from domain.services.months import month_segment
from domain.services.price_buckets import PRICE_BUCKETS
from infrastructure.db.models import TransactionModel


def month_filter(month: Optional[int]) -> ColumnElement[bool]:
    if month is None:
        return true()
    # "_" matches exactly one character, so the year must be four characters wide
    return TransactionModel.date_of_sale.like(f"____-{month_segment(month)}-%")


def search_filter(term: Optional[str]) -> ColumnElement[bool]:
    """Case-insensitive substring match on title, description or the price's text form."""
    term = (term or "").strip()
    if not term:
        return true()
    return or_(
        TransactionModel.title.icontains(term, autoescape=True),
        TransactionModel.description.icontains(term, autoescape=True),
        cast(TransactionModel.price, String).icontains(term, autoescape=True),
    )


def transaction_filter(month: Optional[int], search: Optional[str] = None) -> ColumnElement[bool]:
    return and_(month_filter(month), search_filter(search))


def price_bucket_index() -> ColumnElement[int]:
    """CASE expression mapping a price to its bucket index (0-9)."""
    whens = [
        (TransactionModel.price <= bucket.upper, bucket.index)
        for bucket in PRICE_BUCKETS
        if bucket.upper is not None
    ]
    return case(*whens, else_=PRICE_BUCKETS[-1].index)
