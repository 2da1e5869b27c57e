"""
Fixed price buckets for the bar chart.

The buckets partition the whole price axis: the first one is closed above
and open below, the middle ones are (lower, upper], and the last one is
open-ended. Labels keep the historic integer form ("101-200").
"""
from dataclasses import dataclass
from typing import Optional

BUCKET_WIDTH = 100
BUCKET_COUNT = 10


@dataclass(frozen=True)
class PriceBucket:
    index: int
    lower: Optional[float]  # exclusive; None for the first bucket
    upper: Optional[float]  # inclusive; None for the last bucket

    @property
    def label(self) -> str:
        start = 0 if self.lower is None else int(self.lower) + 1
        end = "above" if self.upper is None else str(int(self.upper))
        return f"{start}-{end}"


def _build_buckets() -> tuple[PriceBucket, ...]:
    buckets = []
    for i in range(BUCKET_COUNT):
        lower = None if i == 0 else float(i * BUCKET_WIDTH)
        upper = None if i == BUCKET_COUNT - 1 else float((i + 1) * BUCKET_WIDTH)
        buckets.append(PriceBucket(index=i, lower=lower, upper=upper))
    return tuple(buckets)


PRICE_BUCKETS = _build_buckets()
