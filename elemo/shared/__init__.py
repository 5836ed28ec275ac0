"""Shared utilities: telemetry, generators, and datetime helpers.

Used by domain and infrastructure. No business logic.
"""

from elemo.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "utc_now",
]
