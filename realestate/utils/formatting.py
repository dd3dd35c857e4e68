"""
Formatting utilities.
"""

import math


def format_currency(amount: float, currency: str = "HUF") -> str:
    """
    Format an amount as currency in whole units.

    Fractional amounts are truncated toward zero, matching how total and
    room prices are truncated.

    Args:
        amount: The amount in whole units (forints, pounds...).
        currency: Currency code (default HUF).

    Returns:
        Formatted currency string.
    """
    symbols = {
        "GBP": "£",
        "USD": "$",
        "EUR": "€",
    }
    symbol = symbols.get(currency, currency + " ")
    return f"{symbol}{math.trunc(amount):,}"


def format_percent(value: float, decimals: int = 1, signed: bool = False) -> str:
    """
    Format a number as a percentage.

    Args:
        value: The percentage value.
        decimals: Number of decimal places.
        signed: Prefix non-negative values with "+", for price changes.

    Returns:
        Formatted percentage string.
    """
    sign = "+" if signed else ""
    return f"{value:{sign}.{decimals}f}%"
