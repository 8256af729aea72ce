from ._invalid_timestamp_error import InvalidTimestampError
from ._token_configuration_error import TokenConfigurationError

__all__ = ["InvalidTimestampError", "TokenConfigurationError"]
