"""
Test suite for exact-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests against an exact oracle
"""
