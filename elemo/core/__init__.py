"""Core: settings, constants, and process lifespan."""
