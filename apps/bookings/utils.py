import re

_PHONE_NOISE = re.compile(r"[\s\-().]")


def normalize_phone(phone: str) -> str:
    """Strip spaces, dashes, dots and brackets; keep a leading ``+``."""
    return _PHONE_NOISE.sub("", (phone or "").strip())
