from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._delay_data import DelayData


class ValidationCode(str, Enum):
    SUCCESS = "success"
    TIMESTAMP_INVALID = "timestamp.invalid"
    TIMESTAMP_DELAYED = "timestamp.delayed"
    KEY_INVALID = "key.invalid"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a token validation.

    Attributes:
        success (bool): Whether every check passed.
        code (ValidationCode): Which check decided the outcome.
        data (DelayData | None): Extra detail for the failing check. A
            ``timestamp.delayed`` failure carries ``{"delay": skew}``, where
            skew is the token timestamp minus the verifier's clock.
    """

    success: bool
    code: ValidationCode
    data: DelayData | None = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def message(self) -> str:
        """Code rendered as ``success`` or ``fail:<code>``."""
        if self.success:
            return self.code.value
        return f"fail:{self.code.value}"

    @classmethod
    def passed(cls) -> ValidationResult:
        return cls(True, ValidationCode.SUCCESS)

    @classmethod
    def failed(
        cls,
        code: ValidationCode,
        data: DelayData | None = None,
    ) -> ValidationResult:
        return cls(False, code, data)
