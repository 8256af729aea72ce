class TokenConfigurationError(RuntimeError):
    """Raised when a token engine cannot be built from the given configuration."""
