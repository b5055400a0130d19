import math


def parse_number(text):
    """Return `text` as a float, or None if it is not a plain numeric literal.

    Surrounding whitespace, digit-group underscores and NaN are rejected.
    """
    text = "" if text is None else str(text)
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value
