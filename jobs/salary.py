import re

_AMOUNT = re.compile(r'(\d[\d,]*(?:\.\d+)?)\s*([kKmM](?![a-zA-Z]))?')
_MULTIPLIERS = {'k': 1_000, 'm': 1_000_000}


def parse_salary(text):
    """
    Best-effort numeric value of a free-text salary.

    "$85,000" -> 85000, "80k - 100k" -> 80000 (lower bound), "Negotiable" -> None.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)):
        return float(text)

    match = _AMOUNT.search(str(text))
    if not match:
        return None
    amount = float(match.group(1).replace(',', ''))
    suffix = (match.group(2) or '').lower()
    return amount * _MULTIPLIERS.get(suffix, 1)
