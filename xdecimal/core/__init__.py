"""
Core value type, mathematical primitives, and invariants.

This module contains the foundational building blocks of the extended-range
Decimal: configuration, float safeguards, the value type and its contracts.
"""
