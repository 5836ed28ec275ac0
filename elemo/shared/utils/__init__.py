"""Shared utilities: datetime and generators."""

from elemo.shared.utils.datetime import ensure_utc, utc_now
from elemo.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "utc_now",
]
