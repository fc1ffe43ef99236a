"""
Display helpers shared by every algebra.
"""

from mpmath import mp


def format_scalar(value) -> str:
    """Shortest decimal form of a scalar at the current precision; 3 not 3.0."""
    mantissa, sep, exponent = mp.nstr(value, mp.dps).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return mantissa + sep + exponent


def format_components(components, symbols):
    """
    Render components as (a+bU1-cU2...).

    The leading real term keeps its own sign only; every other term gets an
    explicit '+' or '-'.
    """
    parts = ["(", format_scalar(components[0])]
    for value, symbol in zip(components[1:], symbols[1:]):
        text = format_scalar(value)
        if value >= 0:
            text = "+" + text
        parts.append(text + symbol)
    parts.append(")")
    return "".join(parts)
