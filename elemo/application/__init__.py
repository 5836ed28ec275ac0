"""Application layer: repository contracts consumed by services."""
