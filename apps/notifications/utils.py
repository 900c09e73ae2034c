def mask_phone(phone: str) -> str:
    """Hide all but the last four digits, e.g. ``********4567``."""
    phone = phone or ""
    if len(phone) <= 4:
        return "*" * len(phone)
    return "*" * (len(phone) - 4) + phone[-4:]
