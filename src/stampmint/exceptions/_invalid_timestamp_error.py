class InvalidTimestampError(ValueError):
    """Raised when a token is requested for a timestamp that could never validate."""
