"""Identifier value generation."""

from cuid2 import cuid_wrapper

# CUID2 default length (24) matches NIL_ID_VALUE, so generated and nil
# ids share one shape.
_generate = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant CUID2 string for an ID value."""
    return _generate()
