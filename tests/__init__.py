"""
Test suite for conversely

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/helpers.py     : Shared wrappers and accessor functions
"""
