"""
Test suite for roman-vinculum

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Property-based tests (hypothesis) for codec invariants
"""
