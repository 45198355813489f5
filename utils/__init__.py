"""
Shared helpers with no service dependencies.
"""

from utils.key_utils import generate_key
from utils.time_utils import utc_now, ensure_utc, format_timestamp

__all__ = [
    "generate_key",
    "utc_now",
    "ensure_utc",
    "format_timestamp",
]
