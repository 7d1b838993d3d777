"""
Metric summaries for stat cards.

Aggregates one field across a record list into a display string, and
derives trend text by comparing the two most recent records.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from typing import Any, Literal

from panelkit.core.ir import NUMERIC_FIELD_TYPES, FieldSpec, FieldTypeKind

PLACEHOLDER = "-"

DEFAULT_CURRENCY_SYMBOL = "¥"

# ── Currency metadata ─────────────────────────────────────────────────

CURRENCY_SYMBOLS: dict[str, str] = {
    "CNY": "¥",
    "RMB": "¥",
    "JPY": "¥",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF",
    "HKD": "HK$",
    "SGD": "S$",
    "NZD": "NZ$",
    "INR": "₹",
    "KRW": "₩",
    "BRL": "R$",
    "MXN": "MX$",
    "ZAR": "R",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
}

_KNOWN_SYMBOLS = frozenset(CURRENCY_SYMBOLS.values())

TREND_UP = "↑"
TREND_DOWN = "↓"


def to_number(value: Any) -> float | None:
    """
    Coerce a record value to a finite float.

    Blank strings count as zero and booleans as 0/1. Returns None for
    missing, non-numeric and non-finite values.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def format_grouped(value: float) -> str:
    """Format a number with thousands separators and at most three decimals."""
    rounded = round(value, 3)
    if rounded == int(rounded):
        return f"{int(rounded):,}"
    return f"{rounded:,.3f}".rstrip("0").rstrip(".")


def format_display_value(value: Any) -> str:
    """Render an arbitrary record value as display text."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def resolve_currency_symbol(field: FieldSpec) -> str:
    """
    Pick the currency prefix for a field.

    ``unit`` and then ``format`` are consulted; each may be an ISO code
    (``USD``) or a symbol (``$``).
    """
    for candidate in (field.unit, field.format):
        if not candidate:
            continue
        code = candidate.strip().upper()
        if code in CURRENCY_SYMBOLS:
            return CURRENCY_SYMBOLS[code]
        if candidate.strip() in _KNOWN_SYMBOLS:
            return candidate.strip()
    return DEFAULT_CURRENCY_SYMBOL


def summarise_metric(
    records: list[dict[str, Any]],
    field_name: str,
    field_type: FieldTypeKind,
    currency: str | None = None,
) -> str:
    """
    Summarise a field across records as display text.

    Numeric fields are summed (non-numeric values contribute nothing);
    currency sums get a currency prefix, percentages are averaged over the
    record count. Any other type shows the first record's value.

    Args:
        records: Dataset rows
        field_name: Field to aggregate
        field_type: Declared type of the field
        currency: Currency prefix (defaults to ``DEFAULT_CURRENCY_SYMBOL``)

    Returns:
        Display string, ``"-"`` for an empty dataset or a total that
        overflows

    Examples:
        >>> summarise_metric([{"amount": 100}, {"amount": 200}], "amount", FieldTypeKind.CURRENCY)
        '¥300'
        >>> summarise_metric([{"rate": 10}, {"rate": 15}], "rate", FieldTypeKind.PERCENTAGE)
        '12.5%'
    """
    if not records:
        return PLACEHOLDER

    if field_type in NUMERIC_FIELD_TYPES:
        total = 0.0
        for record in records:
            number = to_number(record.get(field_name))
            if number is not None:
                total += number
        if not math.isfinite(total):
            return PLACEHOLDER
        if field_type == FieldTypeKind.CURRENCY:
            return f"{currency or DEFAULT_CURRENCY_SYMBOL}{format_grouped(total)}"
        if field_type == FieldTypeKind.PERCENTAGE:
            return f"{total / len(records):.1f}%"
        return format_grouped(total)

    return format_display_value(records[0].get(field_name))


def summarise_field(records: list[dict[str, Any]], field: FieldSpec) -> str:
    """Summarise an entity field, resolving its currency prefix."""
    currency = resolve_currency_symbol(field) if field.type == FieldTypeKind.CURRENCY else None
    return summarise_metric(records, field.name, field.type, currency=currency)


def derive_change_text(records: list[dict[str, Any]], field_name: str) -> str | None:
    """
    Describe the change between the latest and previous record.

    Record 0 is the latest, record 1 the previous one. Returns None with
    fewer than two records, a non-numeric value, a zero previous value or
    a change too large to represent.

    Examples:
        >>> derive_change_text([{"v": 150}, {"v": 100}], "v")
        '↑50.0%'
    """
    if len(records) < 2:
        return None
    latest = to_number(records[0].get(field_name))
    previous = to_number(records[1].get(field_name))
    if latest is None or previous is None or previous == 0:
        return None
    diff = (latest - previous) / abs(previous) * 100
    if not math.isfinite(diff):
        return None
    arrow = TREND_UP if diff >= 0 else TREND_DOWN
    return f"{arrow}{abs(diff):.1f}%"


def trend_intent(change: str | None) -> Literal["positive", "negative", "neutral"]:
    """Metric intent implied by a change text."""
    if not change:
        return "neutral"
    return "positive" if change.startswith(TREND_UP) else "negative"
