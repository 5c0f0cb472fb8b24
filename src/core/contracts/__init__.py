"""
Contract Validation Module

Модуль для валидации JSON контрактов: каноническое представление BigInteger.
"""

from .validators import CONTRACT_SCHEMA_VERSION, validate_big_integer

__all__ = [
    "CONTRACT_SCHEMA_VERSION",
    "validate_big_integer",
]
