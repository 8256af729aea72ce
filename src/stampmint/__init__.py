from stampmint.exceptions import InvalidTimestampError, TokenConfigurationError
from stampmint.schema import ContextData, ValidationCode, ValidationResult
from stampmint.settings import Settings
from stampmint.services import StampMint

__all__ = [
    "ContextData",
    "InvalidTimestampError",
    "Settings",
    "StampMint",
    "TokenConfigurationError",
    "ValidationCode",
    "ValidationResult",
]
