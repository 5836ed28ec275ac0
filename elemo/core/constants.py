"""Core constants: cache key structure and shared literal values.

Single source of truth for the cache key wire format. Used by the key
composer and every cached repository.
"""

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Pattern component matching any run of characters (Redis glob syntax)
CACHE_KEY_WILDCARD = "*"

# Canonical component for an absent optional argument
CACHE_KEY_NIL = "nil"

# Canonical boolean components
CACHE_KEY_TRUE = "true"
CACHE_KEY_FALSE = "false"

# Value of the nil identifier for every resource type
NIL_ID_VALUE = "000000000000000000000000"

# Upper bound on identifier string length
MAX_ID_LENGTH = 64

# Default cache entry lifetime in seconds (0 disables expiry)
DEFAULT_CACHE_TTL = 3600

# SCAN COUNT hint used when resolving pattern keys
CACHE_SCAN_COUNT = 500

# Redis glob metacharacters; identifiers embedded in patterns must not carry them
CACHE_KEY_GLOB_CHARS = frozenset("*?[]\\")
