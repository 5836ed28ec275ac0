"""Storage repositories (systems of record) behind the cached decorators."""
