"""
Label and number formatting for projection graphs.

Time axis
---------
Month indices are 0-based.  The first year is labelled by month alone,
later months by years and months::

    0 → "Month 0"    11 → "Month 11"    12 → "1Y 0M"    13 → "1Y 1M"

Currency
--------
Amounts use the Indian digit grouping (lakh / crore) that the chart's
``toLocaleString('en-IN')`` calls produce in the browser::

    1234567.5 → "₹12,34,567.5"
"""

from __future__ import annotations

DEFAULT_CURRENCY_SYMBOL = "₹"


def month_label(month: int) -> str:
    """Axis label for a 0-based month index."""
    years, months = divmod(month, 12)
    if years == 0:
        return f"Month {months}"
    return f"{years}Y {months}M"


def month_labels(n_months: int) -> list[str]:
    return [month_label(m) for m in range(n_months)]


def horizon_label(max_month: int) -> str:
    """Projection horizon text for the metadata panel, e.g. ``"5 years 3 months"``."""
    years, months = divmod(max_month, 12)
    return f"{years} years {months} months"


def method_title(method: str) -> str:
    """Display title for a projection method tag.

    ``"method1"`` → ``"METHOD1"``; ``"method2_basic"`` → ``"METHOD2 - Basic Tier"``.
    """
    return (
        method.upper()
        .replace("_BASIC", " - Basic Tier")
        .replace("_AMBITIOUS", " - Ambitious Tier")
    )


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_inr(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format ``value`` with Indian digit grouping and at most two decimals.

    Trailing zero decimals are dropped, so whole amounts have no fraction.
    """
    sign = "-" if value < 0 else ""
    whole, frac = f"{abs(value):.2f}".split(".")
    frac = frac.rstrip("0")
    body = _group_indian(whole) + (f".{frac}" if frac else "")
    return f"{sign}{symbol}{body}"


def format_percent(value: float) -> str:
    """``10.0`` → ``"10%"``, ``7.5`` → ``"7.5%"``."""
    return f"{value:g}%"
