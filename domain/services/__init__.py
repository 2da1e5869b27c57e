from .months import parse_month, month_segment
from .price_buckets import PRICE_BUCKETS, PriceBucket

__all__ = ["parse_month", "month_segment", "PRICE_BUCKETS", "PriceBucket"]
