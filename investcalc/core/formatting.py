"""Display strings for dollar amounts, percentages and year counts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# Largest first; compact notation picks the first scale the value reaches.
_COMPACT_SCALES = (
    (Decimal(10) ** 12, "T"),
    (Decimal(10) ** 9, "B"),
    (Decimal(10) ** 6, "M"),
    (Decimal(10) ** 3, "K"),
)


def _round_half_up(value: Decimal, decimals: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _compact(value: Decimal, decimals: int) -> str:
    for index, (scale, suffix) in enumerate(_COMPACT_SCALES):
        if value < scale:
            continue
        scaled = _round_half_up(value / scale, decimals)
        # 999,600 -> "1000K" would read oddly; move up a suffix instead
        if scaled >= 1000 and index > 0:
            scale, suffix = _COMPACT_SCALES[index - 1]
            scaled = _round_half_up(value / scale, decimals)
        text = f"{scaled:f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return f"{text}{suffix}"
    return f"{_round_half_up(value, 0):f}"


def format_currency(value: float) -> str:
    """
    US-dollar display string.

      >= 1,000,000 : compact, at most one decimal   ($1.2M, $3B)
      >= 1,000     : compact, whole units           ($12K)
      otherwise    : whole dollars with separators  ($950, -$1,234)
    """
    amount = Decimal(str(value))
    if amount >= 1_000_000:
        return "$" + _compact(amount, 1)
    if amount >= 1_000:
        return "$" + _compact(amount, 0)

    rounded = _round_half_up(abs(amount), 0)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,f}"


def format_percent(value: float, decimals: int = 0) -> str:
    rounded = _round_half_up(Decimal(str(value)), decimals)
    return f"{rounded:f}%"


def format_years(value: float) -> str:
    return f"{_round_half_up(Decimal(str(value)), 1):f} years"


__all__ = ["format_currency", "format_percent", "format_years"]
