# ==========================
# File: banking/money.py
# ==========================
# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Carry every monetary value as `Decimal` with 2 fractional digits.
- Parse user-entered amounts, rejecting anything that is not a finite number.
- Format amounts with the configured currency symbol.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN

import banking.config as cfg


def as_money(value) -> Decimal:
    """
    Normalize any input to Decimal with 2 fractional digits.

    Why:
    - Guarantees consistent 2dp (e.g., "10.00") across the system.
    - Avoids subtle float inaccuracies (e.g., 0.1 + 0.2 != 0.3).
    """
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)


def as_amount(value) -> Decimal:
    """
    Convert a transaction amount to Decimal without rounding.

    Rule checks (sign, balance, ceiling) compare this exact value, so a
    sub-cent excess is never rounded away before it is seen.
    """
    return Decimal(str(value))


def parse_amount(raw: str) -> Decimal:
    """
    Parse a user-entered amount and return it normalized.

    Rules:
    - Surrounding whitespace is ignored.
    - Sign and precision are kept; range checks belong to the account operations.
    - Raises ValueError for empty, non-numeric, NaN or infinite input.
    """
    text = (raw or "").strip()
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Not a valid amount: {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"Not a valid amount: {raw!r}")
    return value


def fmt_money(x) -> str:
    symbol = cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, '$')
    return f"{symbol}{as_money(x):,.2f}"
