from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from os import environ as os_environ

from stampmint.exceptions import TokenConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 30
DEFAULT_BCRYPT_ROUNDS = 10

_UNBOUNDED_VALUES = {"", "none", "unbounded"}


@dataclass(frozen=True)
class Settings:
    """
    Settings for token generation and validation.

    Attributes:
        private_key (str | bytes | int): The shared secret tokens are bound to.
        delay (int | None): Allowed distance in seconds between a token's
            timestamp and the verifier's clock, in either direction.
            ``None`` disables the freshness check (default: 30).
        bcrypt_rounds (int): bcrypt work factor used when issuing tokens
            (default: 10). Tokens remember the factor they were issued with.

    Example:
    ```
        settings = Settings(
            private_key="aaaaaaaaaabbbbbbbbbbccccccccccdddddddddd",
            delay=60,
        )
    ```
    """

    private_key: str | bytes | int
    delay: int | None = DEFAULT_DELAY
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "STAMPMINT_",
    ) -> Settings:
        """
        Example environment:
        - STAMPMINT_PRIVATE_KEY = "aaaaaaaaaabbbbbbbbbbccccccccccdddddddddd"
        - STAMPMINT_DELAY = "30"           (optional, "none" for unbounded)
        - STAMPMINT_BCRYPT_ROUNDS = "10"   (optional)
        """
        source = os_environ if environ is None else environ

        private_key = source.get(f"{prefix}PRIVATE_KEY")
        if not private_key:
            raise TokenConfigurationError(
                f"The {prefix}PRIVATE_KEY environment variable is missing. "
                "You must set it to the shared secret tokens are signed with, for example:\n\n"
                f"    {prefix}PRIVATE_KEY = 'aaaaaaaaaabbbbbbbbbbccccccccccdddddddddd'"
            )

        delay: int | None = DEFAULT_DELAY
        raw_delay = source.get(f"{prefix}DELAY")
        if raw_delay is not None:
            if raw_delay.strip().lower() in _UNBOUNDED_VALUES:
                delay = None
            else:
                delay = _parse_int(f"{prefix}DELAY", raw_delay)

        bcrypt_rounds = DEFAULT_BCRYPT_ROUNDS
        raw_rounds = source.get(f"{prefix}BCRYPT_ROUNDS")
        if raw_rounds:
            bcrypt_rounds = _parse_int(f"{prefix}BCRYPT_ROUNDS", raw_rounds)

        logger.debug(
            "Loaded token settings from environment (delay=%s, bcrypt_rounds=%s)",
            delay,
            bcrypt_rounds,
        )
        return cls(private_key=private_key, delay=delay, bcrypt_rounds=bcrypt_rounds)


def _parse_int(name: str, value: str) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as error:
        raise TokenConfigurationError(
            f"{name} is set to '{value}', but it must be a whole number of seconds or rounds."
        ) from error
    if parsed < 0:
        raise TokenConfigurationError(f"{name} must not be negative, got {parsed}.")
    return parsed
