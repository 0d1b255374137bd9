"""
Test suite for ratio

Contains:
- tests/unit/          : Unit tests for individual modules
"""
