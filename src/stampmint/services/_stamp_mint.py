from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable

import bcrypt
from cryptography.hazmat.primitives import hashes

from stampmint.canonical import canonicalize, is_valid_timestamp, normalize_timestamp
from stampmint.exceptions import InvalidTimestampError, TokenConfigurationError
from stampmint.schema import ContextData, ValidationCode, ValidationResult
from stampmint.settings import Settings

logger = logging.getLogger(__name__)

# bcrypt's accepted work factor range.
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


class StampMint:
    """
    High-level API to generate and validate short-lived tokens bound to a
    private key, a timestamp and optional context data.

    Tokens do not carry their timestamp or context: the caller sends both
    alongside the token and passes them back to `validate`.
    """

    def __init__(
        self,
        settings: Settings,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if clock is not None and not callable(clock):
            raise TokenConfigurationError("clock must be a callable returning UTC seconds")
        rounds = settings.bcrypt_rounds
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise TokenConfigurationError(
                f"bcrypt_rounds is set to {rounds}, but bcrypt only accepts "
                f"{MIN_BCRYPT_ROUNDS} to {MAX_BCRYPT_ROUNDS}."
            )
        try:
            _check_delay(settings.delay)
        except ValueError as error:
            raise TokenConfigurationError(str(error)) from error

        self._private_key = settings.private_key
        self._delay = settings.delay
        self._bcrypt_rounds = rounds
        self._clock = clock or self._current_time

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        clock: Callable[[], int] | None = None,
    ) -> StampMint:
        return cls(Settings.from_environ(environ), clock=clock)

    @staticmethod
    def _current_time() -> int:
        return int(datetime.now(timezone.utc).timestamp())

    def _now(self) -> int:
        return int(self._clock())

    def get_private_key(self) -> str | bytes | int:
        return self._private_key

    def set_private_key(self, private_key: str | bytes | int) -> None:
        self._private_key = private_key
        logger.debug("Private key rotated")

    def get_delay(self) -> int | None:
        return self._delay

    def set_delay(self, delay: int | None) -> None:
        _check_delay(delay)
        self._delay = delay
        logger.debug("Token delay set to %s", "unbounded" if delay is None else delay)

    private_key = property(get_private_key, set_private_key)
    delay = property(get_delay, set_delay)

    @property
    def bcrypt_rounds(self) -> int:
        return self._bcrypt_rounds

    def generate(
        self,
        timestamp: int | str | None = None,
        context: ContextData = None,
    ) -> str:
        """
        Issue a token for `timestamp` (the current time when omitted) and
        `context`. Two calls with the same arguments give different tokens,
        both of which validate.
        """
        if timestamp is None:
            timestamp = self._now()
        elif not is_valid_timestamp(timestamp):
            raise InvalidTimestampError(
                f"Timestamp must be a non-negative integer or a string of digits, got {timestamp!r}"
            )

        digest = self._digest(timestamp, context)
        return bcrypt.hashpw(digest, bcrypt.gensalt(rounds=self._bcrypt_rounds)).decode("ascii")

    def generate_from_timestamp(
        self,
        timestamp: int | str,
        context: ContextData = None,
    ) -> str:
        return self.generate(timestamp, context)

    def validate(
        self,
        token: Any,
        timestamp: Any,
        context: ContextData = None,
    ) -> ValidationResult:
        """
        Check timestamp format, freshness and key match, in that order.
        Never raises for bad input; the first failing check decides the
        returned code.
        """

        # Timestamp format
        if not is_valid_timestamp(timestamp):
            return ValidationResult.failed(ValidationCode.TIMESTAMP_INVALID)

        # Freshness
        if self._delay is not None:
            skew = normalize_timestamp(timestamp) - self._now()
            if abs(skew) > self._delay:
                return ValidationResult.failed(ValidationCode.TIMESTAMP_DELAYED, {"delay": skew})

        # Key match
        if not self._verify(token, self._digest(timestamp, context)):
            return ValidationResult.failed(ValidationCode.KEY_INVALID)

        return ValidationResult.passed()

    def _digest(self, timestamp: int | str, context: ContextData) -> bytes:
        """
        SHA-384 of the canonical triple, base64 encoded.

        bcrypt rejects NUL bytes and ignores anything past 72 bytes, so the
        raw digest is encoded to 64 ASCII bytes first.
        """
        hasher = hashes.Hash(hashes.SHA384())
        hasher.update(canonicalize(self._private_key, timestamp, context))
        return base64.b64encode(hasher.finalize())

    @staticmethod
    def _verify(token: Any, digest: bytes) -> bool:
        if isinstance(token, str):
            try:
                token = token.encode("ascii")
            except UnicodeEncodeError:
                return False
        if not isinstance(token, bytes):
            return False
        try:
            return bcrypt.checkpw(digest, token)
        except ValueError:
            # Unparseable salt or hash.
            return False


def _check_delay(delay: Any) -> None:
    if delay is None:
        return
    if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
        raise ValueError(f"delay must be a non-negative integer or None, got {delay!r}")
