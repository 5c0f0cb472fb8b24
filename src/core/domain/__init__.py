"""
Domain models and value objects.

Contains the arbitrary-precision integer value type and its mutable binding.
"""

from src.core.domain.big_integer import ONE, ZERO, BigInteger
from src.core.domain.counter import BigIntegerCounter
from src.core.math.decimal_text import InvalidFormat

__all__ = [
    # Value type
    "BigInteger",
    "ZERO",
    "ONE",
    # Exceptions
    "InvalidFormat",
    # Mutable binding
    "BigIntegerCounter",
]
