from typing import Optional, Union

from domain.exceptions import InvalidQueryError

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)


def parse_month(value: Union[str, int, None]) -> Optional[int]:
    """
    Interpret a month query parameter.

    Accepts 1-12, zero-padded "01"-"12", and English month names or their
    three-letter abbreviations (case-insensitive). None or a blank string
    means "no month restriction" and returns None.

    Raises:
        InvalidQueryError: if the value is not a recognizable month
    """
    if value is None:
        return None
    if isinstance(value, int):
        month = value
    else:
        text = value.strip().lower()
        if not text:
            return None
        if text.isdecimal():
            month = int(text)
        else:
            for index, name in enumerate(MONTH_NAMES, start=1):
                if text == name or (len(text) == 3 and name.startswith(text)):
                    return index
            raise InvalidQueryError(f"month must be 1-12 or a month name, got {value!r}")
    if not 1 <= month <= 12:
        raise InvalidQueryError(f"month must be between 1 and 12, got {value!r}")
    return month


def month_segment(month: int) -> str:
    """Two-digit month as it appears in an ISO date ("2021-03-05" -> "03")."""
    return f"{month:02d}"
