"""Display helpers for amounts shown next to calculation results."""


def format_number(value: float, decimals: int = 2) -> str:
    """Thousands separators and a fixed number of decimals, e.g. 1,234.50."""
    return f"{value:,.{decimals}f}"


def format_currency(value: float, symbol: str = "$") -> str:
    """Prefix a two-decimal amount with a currency symbol, e.g. $1,234.50."""
    return f"{symbol}{format_number(value, 2)}"
