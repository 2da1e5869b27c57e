import pytest

from domain.exceptions import InvalidQueryError
from domain.services.months import month_segment, parse_month


@pytest.mark.parametrize("value, expected", [
    ("3", 3),
    ("03", 3),
    (" 12 ", 12),
    (1, 1),
    ("March", 3),
    ("mar", 3),
    ("DECEMBER", 12),
    ("sep", 9),
])
def test_parse_month_accepts_numbers_and_names(value, expected):
    assert parse_month(value) == expected


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_month_blank_means_all_months(value):
    assert parse_month(value) is None


@pytest.mark.parametrize("value", ["0", "13", "-1", "ma", "2021-03", "3.5", "²", 13])
def test_parse_month_rejects_invalid_values(value):
    with pytest.raises(InvalidQueryError):
        parse_month(value)


def test_month_segment_is_zero_padded():
    assert month_segment(3) == "03"
    assert month_segment(11) == "11"
