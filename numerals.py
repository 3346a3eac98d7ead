"""Bengali digit rendering for day, month and year numbers."""

BENGALI_NUMERALS = ["০", "১", "২", "৩", "৪", "৫", "৬", "৭", "৮", "৯"]

_DIGITS = str.maketrans("0123456789", "".join(BENGALI_NUMERALS))


def to_bengali_numerals(num: int) -> str:
    """Return ``num`` written with Bengali digits (signs pass through)."""
    return str(num).translate(_DIGITS)


def format_number(num: int, use_bengali_numerals: bool) -> str:
    """Return ``num`` in Bengali or plain decimal digits."""
    if use_bengali_numerals:
        return to_bengali_numerals(num)
    return str(num)
