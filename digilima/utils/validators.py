import re
from typing import Any

# local@domain.tld: one "@", a dot after it, no whitespace anywhere
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value or ""))


def is_blank(value: Any) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
