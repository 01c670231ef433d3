import pytest

from investcalc.core.formatting import format_currency, format_percent, format_years


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "$0"),
        (950, "$950"),
        (999.4, "$999"),
        (1234, "$1K"),
        (1500, "$2K"),
        (12345, "$12K"),
        (999_600, "$1M"),
        (1_000_000, "$1M"),
        (1_234_567, "$1.2M"),
        (12_345_678, "$12.3M"),
        (2_500_000_000, "$2.5B"),
        (-1234.4, "-$1,234"),
        (-0.2, "$0"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_percent_rounds_half_up():
    assert format_percent(12.5) == "13%"
    assert format_percent(33.333, decimals=1) == "33.3%"


def test_format_years_keeps_one_decimal():
    assert format_years((360 - 221) / 12) == "11.6 years"
    assert format_years(0) == "0.0 years"
