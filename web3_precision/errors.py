"""
Ошибки конвертаций.

Каждая ошибка конвертации знает, какая функция упала (operation) и почему
(cause), так что вызывающий код может ловить конкретный класс без разбора
строки сообщения.
"""

from enum import Enum
from typing import Any


class ErrorCause(str, Enum):
    """Причина ошибки конвертации."""
    INVALID_INPUT = "invalid_input"
    NON_INTEGER_RESULT = "non_integer_result"
    TICK_OUT_OF_RANGE = "tick_out_of_range"


class ConversionError(ValueError):
    """Базовая ошибка конвертации."""
    cause: ErrorCause

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} conversion failed: {detail}")


class InvalidInputError(ConversionError):
    """Вход не число, NaN или вне домена функции."""
    cause = ErrorCause.INVALID_INPUT


class NonIntegerResultError(ConversionError):
    """После масштабирования получилось не целое число."""
    cause = ErrorCause.NON_INTEGER_RESULT


class TickOutOfRangeError(ConversionError):
    """Тик вне [MIN_TICK, MAX_TICK]."""
    cause = ErrorCause.TICK_OUT_OF_RANGE

    def __init__(self, operation: str, tick: Any, detail: str = ""):
        self.tick = tick
        super().__init__(operation, detail or f"Tick out of range: {tick}")


class FormatError(ValueError):
    """Значение нельзя отформатировать (не парсится как число)."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot format value: {value!r}")
