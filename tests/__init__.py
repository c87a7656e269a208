"""
Test suite for stridekit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
