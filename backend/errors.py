# backend/errors.py


class InvalidConfigurationError(ValueError):
    """Raised when a board cannot be built from the given parameters."""
