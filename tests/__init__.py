"""
Test suite for xdecimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
