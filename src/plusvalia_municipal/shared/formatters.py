"""Value formatters for display."""

from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "€") -> str:
    """
    Format decimal as Spanish currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: €)

    Returns:
        Formatted string like "1.234,56 €"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Spanish format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{formatted} {symbol}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal, decimals: int = 0) -> str:
    """
    Format decimal as percentage.

    Args:
        value: Decimal value (e.g., 30 for 30%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "30%" or "12,50%"
    """
    formatted = f"{value:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def format_coefficient(value: Decimal) -> str:
    """Format a coefficient with Spanish decimal comma (0.17 -> "0,17")."""
    return f"{value:.2f}".replace(".", ",")
