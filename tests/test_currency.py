import pytest

from utils.currency import format_currency, parse_amount
from utils.errors import ValidationError


def test_format_currency():
    assert format_currency(12.5) == "$12.50"
    assert format_currency(1234.567, "€") == "€1,234.57"


@pytest.mark.parametrize(
    "value, expected",
    [("12.50", 12.5), (" 7 ", 7.0), (3, 3.0), (0.01, 0.01), ("1e2", 100.0)],
)
def test_parse_amount_valid(value, expected):
    assert parse_amount(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value", ["", "  ", "abc", "12,50", "nan", "inf", "-1", "0", None, False, [], -0.5],
)
def test_parse_amount_invalid(value):
    with pytest.raises(ValidationError):
        parse_amount(value)
