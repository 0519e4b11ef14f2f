"""
utils/email_validation.py
─────────────────────────
Syntax-only recipient address check used when notification models are built.

Deliverability (MX / SMTP) is intentionally NOT checked: a status record
describes an attempt that already happened, so only the address grammar
matters here.
"""

import logging

from email_validator import EmailNotValidError
from email_validator import validate_email as _validate_email

from utils.errors import InvalidArgumentError

logger = logging.getLogger("notification_status")


def validate_email(address: str) -> None:
    """
    Raise InvalidArgumentError unless `address` is a syntactically valid
    email address. The address itself is never rewritten.
    """
    if not isinstance(address, str) or not address:
        raise InvalidArgumentError(f"Invalid email address: {address!r}")
    try:
        _validate_email(address, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected email address {address!r}: {e}")
        raise InvalidArgumentError(f"Invalid email address: {address} ({e})") from e


def is_valid_email(address: str) -> bool:
    try:
        validate_email(address)
    except InvalidArgumentError:
        return False
    return True
