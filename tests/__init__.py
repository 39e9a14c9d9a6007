"""
Test suite for vmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
