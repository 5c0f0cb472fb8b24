"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the arbitrary-precision
integer: digit arithmetic, decimal text conversion, the value type, and its
wire contract.
"""
