"""
Test suite for bigint-decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
