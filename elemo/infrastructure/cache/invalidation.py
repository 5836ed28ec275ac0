"""Invalidation steps applied by cached repositories after a mutation.

A mutation declares an ordered list of steps. They are applied one at a
time; the first failure stops the walk and earlier steps stay applied.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class Key:
    """Delete a single key."""

    key: str


@dataclass(frozen=True)
class Pattern:
    """Delete every key matching a glob pattern."""

    pattern: str


@dataclass(frozen=True)
class Refresh:
    """Overwrite a key with the post-mutation value."""

    key: str
    value: Any


InvalidationStep: TypeAlias = Key | Pattern | Refresh


def describe(step: InvalidationStep) -> str:
    """Return a short log-friendly description of a step."""
    match step:
        case Key(key=key):
            return f"delete {key}"
        case Pattern(pattern=pattern):
            return f"delete pattern {pattern}"
        case Refresh(key=key):
            return f"refresh {key}"
    raise TypeError(f"Unknown invalidation step: {step!r}")
