import os
from dotenv import load_dotenv

from utils.errors import InvalidArgumentError

# Load environment variables from .env file
load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_STRING_BYTES = 1024 * 1024


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got '{raw}'")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


def get_log_level() -> str:
    return os.getenv("NOTIFICATION_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_max_string_bytes() -> int:
    """Largest string (in UTF-8 bytes) the binary decoder will accept."""
    return _int_env("NOTIFICATION_MAX_STRING_BYTES", DEFAULT_MAX_STRING_BYTES)
