from ._context_data import ContextData
from ._delay_data import DelayData
from ._validation_result import ValidationCode, ValidationResult

__all__ = ["ContextData", "DelayData", "ValidationCode", "ValidationResult"]
