from decimal import Decimal

# Unicode vulgar fractions and their decimal spellings
UNICODE_FRAC = {
    "¼": ".25",
    "½": ".5",
    "¾": ".75",
    "⅓": ".333",
    "⅔": ".667",
    "⅛": ".125",
}


def replace_unicode_fractions(text: str) -> str:
    """Replace unicode fraction characters with their decimal form."""
    return "".join(UNICODE_FRAC.get(c, c) for c in text)


def _is_integer(text: str) -> bool:
    """Check if a string is a plain run of decimal digits."""
    return text.isdecimal()


def _is_number(text: str) -> bool:
    """Check if a string is an integer or decimal quantity like '2' or '2.5'."""
    if not text or text.startswith(("-", "+")):
        return False
    try:
        float(text)
    except ValueError:
        return False
    # float() also accepts 'nan', 'inf' and exponents
    return all(c.isdecimal() or c == "." for c in text)


def _is_fraction(text: str) -> bool:
    """Check if a string is a simple fraction like '1/2'."""
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '3/4') into a Decimal.

    Raises:
        ValueError: If the text is not a fraction.
        ZeroDivisionError: If the denominator is zero.
    """
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    denominator = Decimal(denominator_str)
    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return Decimal(numerator_str) / denominator
