"""Domain constants for journal parsing and reporting."""

ACCOUNT_SEPARATOR = ":"

DEFAULT_COMMODITY_SYMBOL = "$"

DEFAULT_PRECISION = 2

# Currency symbols written before the number with no separating space.
PREFIX_COMMODITY_SYMBOLS = ("$", "£", "€", "¥")

OPENING_BALANCES_ACCOUNT = "Equity:Opening Balances"


__all__ = [
    "ACCOUNT_SEPARATOR",
    "DEFAULT_COMMODITY_SYMBOL",
    "DEFAULT_PRECISION",
    "PREFIX_COMMODITY_SYMBOLS",
    "OPENING_BALANCES_ACCOUNT",
]
