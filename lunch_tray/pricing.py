"""Money helpers shared by the catalog, the session and the panes."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from lunch_tray.config import CURRENCY_SYMBOL

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round a money amount to whole cents."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal) -> str:
    """Format an amount as a currency string, e.g. ``$5.50``."""
    return f"{CURRENCY_SYMBOL}{to_cents(amount):,.2f}"
